"""
Service des micro-jobs.
"""

import logging
from typing import Optional

from app.models import MicroJob
from app.schemas.micro_job import MicroJobCreate
from app.services import queries
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def create_job(store: RecordStore, data: MicroJobCreate) -> MicroJob:
    """Publie un micro-job, toujours au statut open."""
    job = store.create_micro_job(data.model_dump())
    logger.info("Micro-job publié : %s (id=%d) par l'utilisateur %d", job.title, job.id, job.posted_by)
    return job


def get_jobs(store: RecordStore, status: Optional[str] = None) -> list[MicroJob]:
    return queries.list_micro_jobs(store, status)


def get_job(store: RecordStore, job_id: int) -> Optional[MicroJob]:
    return store.get_micro_job(job_id)


def update_status(store: RecordStore, job_id: int, status: str) -> Optional[MicroJob]:
    job = store.update_micro_job(job_id, {"status": status})
    if job is not None:
        logger.info("Micro-job %d → %s", job_id, status)
    return job
