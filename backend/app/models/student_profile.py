"""
Modèle SQLAlchemy pour les profils étudiants.
Aucune contrainte d'unicité sur user_id : les lectures prennent le premier profil trouvé.
"""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String, Text

from app.database import Base


class StudentProfile(Base):
    __tablename__ = "student_profiles"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    age = Column(Integer, nullable=True)
    education_level = Column(String(100), nullable=True)
    course = Column(String(255), nullable=True)
    institution_name = Column(String(255), nullable=True)
    financial_need = Column(Integer, nullable=True)  # en dollars entiers
    skills = Column(JSON, nullable=True)
    bio = Column(Text, nullable=True)
    documents = Column(JSON, default=dict)
