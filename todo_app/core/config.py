"""
➡️ But : Centraliser tous les paramètres configurables (nom d'app, adresse d'écoute, niveau de log, dossiers de templates...).

Utilise pydantic-settings pour charger automatiquement les variables d'environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from todo_app.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # Serveur (bootstrap uniquement)
    # -----------------------------
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: Optional[str] = None  # auto selon ENV si None

    # -----------------------------
    # Vues / assets
    # -----------------------------
    TEMPLATES_DIR: Optional[Path] = None
    STATIC_DIR: Optional[Path] = None

    # Swagger désactivé par défaut : les routes servent du HTML, pas du JSON
    ENABLE_DOCS: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        if self.LOG_LEVEL is None:
            object.__setattr__(self, "LOG_LEVEL", "DEBUG" if self.ENV == "dev" else "INFO")

        if self.TEMPLATES_DIR is None:
            object.__setattr__(self, "TEMPLATES_DIR", PACKAGE_DIR / "views" / "templates")

        if self.STATIC_DIR is None:
            object.__setattr__(self, "STATIC_DIR", PACKAGE_DIR / "static")


# Instance globale importable partout
settings = Settings()
