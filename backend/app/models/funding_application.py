"""
Modèle SQLAlchemy pour les demandes de financement.
"""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text, func

from app.database import Base


class FundingApplication(Base):
    __tablename__ = "funding_applications"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    student_id = Column(Integer, ForeignKey("student_profiles.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    purpose = Column(Text, nullable=False)
    status = Column(String(20), default="pending", nullable=False)  # pending, approved, rejected
    created_at = Column(DateTime, server_default=func.now())
    documents = Column(JSON, default=dict)
