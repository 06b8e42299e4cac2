"""
➡️ But : Contenir la logique métier : lire le formulaire, appeler le repository, journaliser.

TodoService : transforme un corps de requête brut en opération sur le repository.

Lève les erreurs métier (BadRequest, ValidationError) que main.py traduit en réponses HTTP.

🔹 Avantages :

Code métier découplé du web (les routes ne font que lire le corps et rediriger).

Test unitaire possible sans passer par FastAPI.
"""

import logging
import uuid

from todo_app.domain.repositories import TodoRepository
from todo_app.domain.schemas import IndexView, TodoOut
from todo_app.utils.forms import parse_single_field, parse_todo_id

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def index(self) -> IndexView:
        todos = self.repo.list()
        return IndexView(
            todos=[TodoOut.model_validate(t) for t in todos],
            todos_len=len(todos),
        )

    def add(self, body: bytes) -> uuid.UUID:
        name = parse_single_field(body, "name")
        todo_id = self.repo.add(name)
        logger.info("added todo %s", todo_id)
        return todo_id

    def toggle(self, body: bytes) -> None:
        todo_id = self._read_id(body)
        if self.repo.toggle(todo_id):
            logger.info("toggled todo %s", todo_id)
        else:
            logger.debug("toggle ignored, unknown todo %s", todo_id)

    def remove(self, body: bytes) -> None:
        todo_id = self._read_id(body)
        if self.repo.remove(todo_id):
            logger.info("removed todo %s", todo_id)
        else:
            logger.debug("remove ignored, unknown todo %s", todo_id)

    @staticmethod
    def _read_id(body: bytes) -> uuid.UUID:
        return parse_todo_id(parse_single_field(body, "id"))
