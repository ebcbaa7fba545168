"""
Configuration de la connexion à la base de données.
Par défaut : SQLite en mémoire, partagée par toutes les sessions du processus.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings


def build_engine(url: str):
    """
    Crée le moteur SQLAlchemy.
    Une base SQLite en mémoire n'existe que le temps d'une connexion : on force
    une connexion unique (StaticPool), partagée par toutes les sessions.
    """
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url)


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db() -> None:
    """Crée les tables manquantes (appelé au démarrage de l'API)."""
    import app.models  # noqa: F401  (enregistre les modèles dans Base.metadata)

    Base.metadata.create_all(bind=engine)


def make_session_dependency(factory):
    """
    Construit la dépendance FastAPI qui fournit une session BDD et la ferme après usage.

    Toutes les sessions partagent la même connexion SQLite (StaticPool) : la
    dépendance et les handlers sont asynchrones et ne cèdent pas la main pendant
    un accès BDD, donc une requête s'exécute entièrement avant la suivante sur
    la boucle d'événements. Aucun accès BDD ne doit passer par le threadpool.
    """
    async def get_session():
        db = factory()
        try:
            yield db
        finally:
            db.close()

    return get_session


get_db = make_session_dependency(SessionLocal)
