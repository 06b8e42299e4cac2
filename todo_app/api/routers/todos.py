"""
➡️ But : Définir les endpoints de la liste de todos.

C'est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET /, POST /, /done, /not-done, /delete)

Lit le corps complet puis appelle le service correspondant

Retourne la page HTML ou une redirection 303 vers /

🔹 Avantages :

Une mutation est toujours terminée avant l'envoi de la redirection.

Le POST n'est pas renvoyé par le navigateur lors d'un rafraîchissement (303 See Other).
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool

from todo_app.api.dependencies import get_renderer, get_todo_service
from todo_app.domain.services import TodoService
from todo_app.views.renderer import ViewRenderer

router = APIRouter(
    tags=["todos"],
    responses={404: {"description": "Not Found"}},
)

_FORM_BODY = {
    "requestBody": {
        "content": {"application/x-www-form-urlencoded": {"schema": {"type": "string"}}},
    }
}


def _back_to_index() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get(
    "/",
    summary="Afficher la liste",
    response_class=HTMLResponse,
)
@router.get("/index.html", include_in_schema=False, response_class=HTMLResponse)
def index(
    svc: TodoService = Depends(get_todo_service),
    renderer: ViewRenderer = Depends(get_renderer),
):
    view = svc.index()
    # Rendu hors verrou : la liste est déjà une copie
    return HTMLResponse(content=renderer.render("index.html", view.to_context()))


@router.post(
    "/",
    summary="Créer un todo",
    description="Corps : `name=<texte>`.",
    status_code=status.HTTP_303_SEE_OTHER,
    openapi_extra=_FORM_BODY,
)
async def add_todo(request: Request, svc: TodoService = Depends(get_todo_service)):
    body = await request.body()
    # verrou pris hors de la boucle asyncio
    await run_in_threadpool(svc.add, body)
    return _back_to_index()


@router.post(
    "/done",
    summary="Basculer l'état d'un todo",
    description="Corps : `id=<uuid>`. Identique à /not-done : l'état vient du todo, pas de la route.",
    status_code=status.HTTP_303_SEE_OTHER,
    openapi_extra=_FORM_BODY,
)
@router.post(
    "/not-done",
    summary="Basculer l'état d'un todo",
    status_code=status.HTTP_303_SEE_OTHER,
    openapi_extra=_FORM_BODY,
)
async def toggle_todo(request: Request, svc: TodoService = Depends(get_todo_service)):
    body = await request.body()
    await run_in_threadpool(svc.toggle, body)
    return _back_to_index()


@router.post(
    "/delete",
    summary="Supprimer un todo",
    description="Corps : `id=<uuid>`.",
    status_code=status.HTTP_303_SEE_OTHER,
    openapi_extra=_FORM_BODY,
)
async def delete_todo(request: Request, svc: TodoService = Depends(get_todo_service)):
    body = await request.body()
    await run_in_threadpool(svc.remove, body)
    return _back_to_index()
