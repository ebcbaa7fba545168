"""
Modèle SQLAlchemy pour les profils sponsors.
"""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String, Text

from app.database import Base


class SponsorProfile(Base):
    __tablename__ = "sponsor_profiles"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String(20), nullable=True)  # individual, corporate, ngo
    organization = Column(String(255), nullable=True)
    website = Column(String(500), nullable=True)
    focus_areas = Column(JSON, nullable=True)
    bio = Column(Text, nullable=True)
