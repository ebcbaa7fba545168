"""
Modèle SQLAlchemy pour les utilisateurs (étudiants et sponsors).
Le mot de passe est stocké tel quel : authentification de démonstration uniquement.
"""

from sqlalchemy import Boolean, Column, Integer, String

from app.database import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    username = Column(String(100), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    role = Column(String(20), nullable=False)  # student, sponsor
    display_name = Column(String(150), nullable=False)
    profile_completed = Column(Boolean, default=False, nullable=False)
