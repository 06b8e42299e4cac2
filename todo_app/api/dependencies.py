"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_todo_repository() : l'unique TodoRepository, créé au démarrage et rangé dans app.state.

get_todo_service() : crée un TodoService autour de ce repository.

get_renderer() / get_asset_store() : collaborateurs externes (templates, assets).

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Aucun état global : les tests construisent leur propre app avec create_app(...).
"""

from fastapi import Depends, Request

from todo_app.domain.repositories import TodoRepository
from todo_app.domain.services import TodoService
from todo_app.utils.assets import AssetStore
from todo_app.views.renderer import ViewRenderer


# -----------------------------
# Repository (état partagé)
# -----------------------------
def get_todo_repository(request: Request) -> TodoRepository:
    return request.app.state.todo_repository


# -----------------------------
# Services
# -----------------------------
def get_todo_service(repo: TodoRepository = Depends(get_todo_repository)) -> TodoService:
    return TodoService(repo)


# -----------------------------
# Collaborateurs externes
# -----------------------------
def get_renderer(request: Request) -> ViewRenderer:
    return request.app.state.renderer

def get_asset_store(request: Request) -> AssetStore:
    return request.app.state.assets
