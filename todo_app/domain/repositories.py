"""
➡️ But : Encapsuler la collection de Todo partagée par toutes les requêtes.

TodoRepository : add / toggle / remove / list sur une liste ordonnée en mémoire.

Protégée par un verrou lecteurs/rédacteur :
- list, count, get → lecture partagée
- add, toggle, remove → écriture exclusive

Ne contient aucune logique HTTP, juste la donnée et sa discipline de verrouillage.

🔹 Avantages :

Une seule instance, créée au démarrage et injectée (pas de global).

Testable indépendamment (aucun serveur nécessaire).
"""

import uuid
from typing import Callable, List, Optional

from todo_app.core.errors import ValidationError
from todo_app.domain.models import Todo
from todo_app.utils.rwlock import ReadWriteLock


class TodoRepository:
    def __init__(self, id_factory: Callable[[], uuid.UUID] = uuid.uuid4):
        self._todos: List[Todo] = []
        self._lock = ReadWriteLock()
        self._id_factory = id_factory
        self._used_ids: set[uuid.UUID] = set()

    # ---------- READ ----------

    def list(self) -> List[Todo]:
        """Retourne une copie instantanée, dans l'ordre d'insertion."""
        with self._lock.read():
            return [todo.copy() for todo in self._todos]

    def count(self) -> int:
        with self._lock.read():
            return len(self._todos)

    def get(self, todo_id: uuid.UUID) -> Optional[Todo]:
        with self._lock.read():
            index = self._index_of(todo_id)
            return self._todos[index].copy() if index is not None else None

    # ---------- WRITE ----------

    def add(self, name: str) -> uuid.UUID:
        # le nom est stocké tel quel ; seul un nom vide ou blanc est refusé
        if not name or not name.strip():
            raise ValidationError("Todo name cannot be empty.")
        with self._lock.write():
            todo_id = self._id_factory()
            # Un id déjà distribué (même supprimé depuis) n'est jamais réattribué
            while todo_id in self._used_ids:
                todo_id = self._id_factory()
            self._used_ids.add(todo_id)
            self._todos.append(Todo(id=todo_id, name=name))
        return todo_id

    def toggle(self, todo_id: uuid.UUID) -> bool:
        """Inverse `done`. Id inconnu : no-op, retourne False."""
        with self._lock.write():
            index = self._index_of(todo_id)
            if index is None:
                return False
            self._todos[index].toggle()
            return True

    def remove(self, todo_id: uuid.UUID) -> bool:
        """Supprime en conservant l'ordre des autres. Id inconnu : no-op, retourne False."""
        with self._lock.write():
            index = self._index_of(todo_id)
            if index is None:
                return False
            del self._todos[index]
            return True

    # ---------- helpers ----------

    def _index_of(self, todo_id: uuid.UUID) -> Optional[int]:
        # scan linéaire, à appeler verrou tenu
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        return None
