"""
Router pour les micro-jobs.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.micro_job import JobStatusUpdate, MicroJobCreate, MicroJobResponse
from app.services import micro_job_service
from app.services.record_store import RecordStore, get_store

router = APIRouter(prefix="/api/micro-jobs", tags=["Micro-jobs"])


@router.post("", response_model=MicroJobResponse, status_code=201, summary="Publier un micro-job")
async def create_job(data: MicroJobCreate, store: RecordStore = Depends(get_store)):
    return micro_job_service.create_job(store, data)


@router.get("", response_model=List[MicroJobResponse], summary="Lister les micro-jobs")
async def list_jobs(status: Optional[str] = None, store: RecordStore = Depends(get_store)):
    """Tous les micro-jobs, ou seulement ceux du statut passé en paramètre (?status=open)."""
    return micro_job_service.get_jobs(store, status)


@router.get("/{job_id}", response_model=MicroJobResponse, summary="Détail d'un micro-job")
async def get_job(job_id: int, store: RecordStore = Depends(get_store)):
    job = micro_job_service.get_job(store, job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Micro-job introuvable.")
    return job


@router.put("/{job_id}/status", response_model=MicroJobResponse, summary="Changer le statut d'un micro-job")
async def update_status(job_id: int, data: JobStatusUpdate, store: RecordStore = Depends(get_store)):
    job = micro_job_service.update_status(store, job_id, data.status)
    if job is None:
        raise HTTPException(status_code=404, detail="Micro-job introuvable.")
    return job
