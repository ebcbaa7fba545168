"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données: SQLite en mémoire par défaut (rien n'est persisté)
    DATABASE_URL: str = "sqlite://"

    # Stripe: le paiement est désactivé tant que la clé secrète est vide
    STRIPE_SECRET_KEY: str = ""
    STRIPE_CURRENCY: str = "usd"

    # CORS: origines autorisées en développement
    CORS_ORIGIN_REGEX: str = r"https?://(localhost|127\.0\.0\.1)(:\d+)?"

    # Environnement ("development" active les routes de debug)
    ENV: str = "development"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
