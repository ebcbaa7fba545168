"""
Modèle SQLAlchemy pour les parrainages (sponsor ↔ étudiant).
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, func

from app.database import Base


class Sponsorship(Base):
    __tablename__ = "sponsorships"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    sponsor_id = Column(Integer, ForeignKey("sponsor_profiles.id"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("student_profiles.id"), nullable=False, index=True)
    application_id = Column(Integer, ForeignKey("funding_applications.id"), nullable=True)
    amount = Column(Integer, nullable=False)
    status = Column(String(20), default="active", nullable=False)  # active, completed, cancelled
    payment_id = Column(String(255), default="")  # identifiant PaymentIntent Stripe
    created_at = Column(DateTime, server_default=func.now())
    mentorship_offered = Column(Boolean, default=False, nullable=False)
