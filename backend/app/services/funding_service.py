"""
Service des demandes de financement.
"""

import logging
from typing import Optional

from app.models import FundingApplication
from app.schemas.funding_application import FundingApplicationCreate
from app.services import queries
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def create_application(store: RecordStore, data: FundingApplicationCreate) -> FundingApplication:
    """Crée une demande, toujours au statut pending."""
    application = store.create_funding_application(data.model_dump())
    logger.info(
        "Demande de financement créée : id=%d, étudiant %d, %d $",
        application.id, application.student_id, application.amount,
    )
    return application


def get_application(store: RecordStore, application_id: int) -> Optional[FundingApplication]:
    return store.get_funding_application(application_id)


def get_student_applications(store: RecordStore, student_id: int) -> list[FundingApplication]:
    return queries.list_applications_by_student(store, student_id)


def get_pending_applications(store: RecordStore) -> list[FundingApplication]:
    return queries.list_pending_applications(store)


def update_status(store: RecordStore, application_id: int, status: str) -> Optional[FundingApplication]:
    """
    Change le statut d'une demande. None si introuvable.
    Aucune transition n'est interdite (approved → pending est accepté).
    """
    application = store.update_funding_application(application_id, {"status": status})
    if application is not None:
        logger.info("Demande %d → %s", application_id, status)
    return application
