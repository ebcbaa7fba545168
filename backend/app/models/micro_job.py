"""
Modèle SQLAlchemy pour les micro-jobs (crédits de frais de scolarité).
"""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text, func

from app.database import Base


class MicroJob(Base):
    __tablename__ = "micro_jobs"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    posted_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    skills_required = Column(JSON, nullable=True)
    compensation = Column(Integer, nullable=False)
    status = Column(String(20), default="open", nullable=False)  # open, assigned, completed
    created_at = Column(DateTime, server_default=func.now())
