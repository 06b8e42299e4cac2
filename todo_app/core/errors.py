"""
➡️ But : Définir la taxonomie d'erreurs de l'application et leur traduction en réponses HTTP.

ValidationError → 400 (champ vide)

BadRequest → 400 (corps mal formé, identifiant illisible)

NotFound → 404 (route inconnue, asset absent)

InternalError → 500 (échec du rendu, aucun détail renvoyé au client)

🔹 Avantages :

Les services lèvent des erreurs métier, sans connaître FastAPI.

Un seul endroit décide du code HTTP et du corps renvoyé.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "Oops! Not Found"
INTERNAL_ERROR_BODY = "Internal Server Error"


class TodoAppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message: str = INTERNAL_ERROR_BODY

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message

    @property
    def body(self) -> str:
        return self.message


class ValidationError(TodoAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "Invalid input"


class BadRequest(TodoAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "Bad request"


class NotFound(TodoAppError):
    status_code = status.HTTP_404_NOT_FOUND
    public_message = NOT_FOUND_BODY

    @property
    def body(self) -> str:
        # Corps fixe, quel que soit le message interne
        return NOT_FOUND_BODY


class InternalError(TodoAppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = INTERNAL_ERROR_BODY

    @property
    def body(self) -> str:
        return INTERNAL_ERROR_BODY


def not_found_response() -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND)


async def todo_app_error_handler(request: Request, exc: TodoAppError) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message,
                     exc_info=exc.__cause__ or exc)
    else:
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return PlainTextResponse(exc.body, status_code=exc.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    # 404 du routeur et 405 (bonne route, mauvaise méthode) → même réponse Not Found
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.debug("%s %s -> not found", request.method, request.url.path)
        return not_found_response()
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoAppError, todo_app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
