"""
➡️ But : Définir l'entité stockée en mémoire (ici : Todo).

id : UUID v4 généré à la création, jamais réutilisé.

name : libellé non vide, immuable (pas d'opération de renommage).

done : seul champ modifiable, via toggle.

🔹 Avantages :

Objet Python simple, pas de base de données.

Copiable à volonté : le repository ne distribue que des copies.
"""

import uuid
from dataclasses import dataclass, field, replace


@dataclass
class Todo:
    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    done: bool = False

    def toggle(self) -> None:
        self.done = not self.done

    def copy(self) -> "Todo":
        return replace(self)
