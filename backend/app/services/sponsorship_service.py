"""
Service des parrainages.
"""

import logging
from typing import Optional

from app.models import Sponsorship
from app.schemas.sponsorship import SponsorshipCreate
from app.services import funding_service, queries
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def create_sponsorship(store: RecordStore, data: SponsorshipCreate) -> Sponsorship:
    """
    Crée un parrainage actif.
    Si une demande est liée, elle passe à "approved" dans une seconde écriture
    (une demande inexistante est ignorée).
    """
    sponsorship = store.create_sponsorship(data.model_dump())
    logger.info(
        "Parrainage créé : id=%d, sponsor %d → étudiant %d, %d $",
        sponsorship.id, sponsorship.sponsor_id, sponsorship.student_id, sponsorship.amount,
    )

    if sponsorship.application_id:
        funding_service.update_status(store, sponsorship.application_id, "approved")

    return sponsorship


def get_sponsor_sponsorships(store: RecordStore, sponsor_id: int) -> list[Sponsorship]:
    return queries.list_sponsorships_by_sponsor(store, sponsor_id)


def get_student_sponsorships(store: RecordStore, student_id: int) -> list[Sponsorship]:
    return queries.list_sponsorships_by_student(store, student_id)


def set_payment_id(store: RecordStore, sponsorship_id: int, payment_id: str) -> Optional[Sponsorship]:
    return store.update_sponsorship(sponsorship_id, {"payment_id": payment_id})
