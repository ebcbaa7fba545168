"""
Point d'entrée principal de l'API EduBridge.
Démarrage : uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Enregistre tous les modèles dans Base.metadata avant les routers
import app.models  # noqa: F401
from app.config import settings
from app.database import init_db
from app.routers import (
    auth,
    debug,
    funding_applications,
    matching,
    micro_jobs,
    payments,
    sponsors,
    sponsorships,
    students,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : crée les tables au démarrage."""
    init_db()
    if not settings.STRIPE_SECRET_KEY:
        logger.warning("STRIPE_SECRET_KEY absente: les paiements sont désactivés.")
    yield


app = FastAPI(
    title="EduBridge API",
    description="Mise en relation d'étudiants en recherche de financement avec des sponsors, et micro-jobs",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS: autorise tous les ports localhost en développement (à restreindre en production).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


app.include_router(auth.router)
app.include_router(students.router)
app.include_router(sponsors.router)
app.include_router(funding_applications.router)
app.include_router(sponsorships.router)
app.include_router(micro_jobs.router)
app.include_router(matching.router)
app.include_router(payments.router)

if settings.ENV == "development":
    app.include_router(debug.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Corps ou paramètres invalides → 400 (erreur client), avec le détail Pydantic."""
    # La valeur reçue n'est pas renvoyée : NaN ou Infinity ne sont pas sérialisables en JSON
    errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(errors)},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "EduBridge API", "version": "0.1.0"}
