"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l'instance FastAPI (app) via create_app().

Configure :

les logs (niveau selon ENV)

le repository partagé, le moteur de templates et les assets, rangés dans app.state

les gestionnaires d'erreurs (400 / 404 / 500 en texte brut)

la doc OpenAPI, seulement si ENABLE_DOCS

Inclut les routers (todos, assets).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d'exécution : uvicorn todo_app.main:app --reload.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from todo_app.api.routers import assets, todos
from todo_app.core.config import Settings, settings as default_settings
from todo_app.core.errors import register_exception_handlers
from todo_app.core.logging import setup_logging
from todo_app.core.openapi import custom_openapi
from todo_app.domain.repositories import TodoRepository
from todo_app.utils.assets import AssetStore
from todo_app.views.renderer import JinjaRenderer, ViewRenderer

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[TodoRepository] = None,
    renderer: Optional[ViewRenderer] = None,
    asset_store: Optional[AssetStore] = None,
) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    docs = settings.ENABLE_DOCS
    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        redirect_slashes=False,  # routage exact : "/done/" n'est pas "/done"
        docs_url="/docs" if docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs else None,
        openapi_tags=[
            {"name": "todos", "description": "Liste, création, bascule et suppression des todos"},
            {"name": "assets", "description": "Feuille de style et icônes"},
        ],
    )

    # État partagé : une seule instance pour toute la durée du process
    app.state.settings = settings
    app.state.todo_repository = repository if repository is not None else TodoRepository()
    app.state.renderer = renderer if renderer is not None else JinjaRenderer(settings.TEMPLATES_DIR)
    app.state.assets = asset_store if asset_store is not None else AssetStore(settings.STATIC_DIR)

    register_exception_handlers(app)

    # Routers
    app.include_router(todos.router)
    app.include_router(assets.router)

    if docs:
        app.openapi = lambda: custom_openapi(app)

    # Démarrage
    @app.on_event("startup")
    def on_startup():
        logger.info("%s ready (env=%s), listening on http://%s:%d",
                    settings.APP_NAME, settings.ENV, settings.HOST, settings.PORT)

    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "todo_app.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=(default_settings.ENV == "dev"),
        log_config=None,  # logs déjà configurés par setup_logging
    )


if __name__ == "__main__":
    run() # http://127.0.0.1:3000
