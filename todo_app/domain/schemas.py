"""
➡️ But : Définir les formats transmis à la vue (couche présentation).

TodoOut → une ligne de la liste

IndexView → contexte complet de la page d'accueil (todos + todosLen)

Sépare l'entité stockée de ce que voit le template.

🔹 Avantages :

Validation automatique.

Le template ne reçoit jamais de référence vers l'objet du repository.
"""

import uuid
from typing import List

from pydantic import BaseModel, Field


class TodoOut(BaseModel):
    id: uuid.UUID
    name: str = Field(..., min_length=1, examples=["Acheter du lait"])
    done: bool

    model_config = {"from_attributes": True}


class IndexView(BaseModel):
    todos: List[TodoOut]
    todos_len: int = Field(..., ge=0, serialization_alias="todosLen")

    def to_context(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
