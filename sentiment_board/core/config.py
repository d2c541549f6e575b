"""
➡️ But : Centraliser tous les paramètres configurables (nom d'app, capacité, mot de passe admin, logs...)

Utilise pydantic-settings pour charger automatiquement les variables d'environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from sentiment_board.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "sentiment-board"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # Stockage
    # -----------------------------
    STORE_CAPACITY: int = Field(default=255, ge=1)
    SEED_PATH: Optional[str] = None  # fichier YAML chargé au démarrage

    # -----------------------------
    # Admin
    # -----------------------------
    ADMIN_PASS: str = ""  # vide => pas de mot de passe demandé

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "simple"  # simple | json

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }


# Instance globale importable partout
settings = Settings()
