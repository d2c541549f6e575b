"""
➡️ But : Construire le stockage en mémoire et le fournir aux repositories.

init_stores() : crée une collection de taille fixe + un générateur d'ID par entité.

Le stockage vit aussi longtemps que le processus ; il n'y a pas d'opération de remise à zéro.
Les tests construisent simplement un nouveau Stores.

🔹 Avantages :

Un seul endroit pour créer le stockage.

Pas de variables globales partagées entre modules : on passe l'objet Stores.
"""

from dataclasses import dataclass, field

from sentiment_board.db.models.comments import Comment
from sentiment_board.db.models.users import User
from sentiment_board.db.storage import DEFAULT_CAPACITY, FixedCapacityCollection, IdGenerator


@dataclass
class Stores:
    users: FixedCapacityCollection[User]
    comments: FixedCapacityCollection[Comment]
    user_ids: IdGenerator = field(default_factory=IdGenerator)
    comment_ids: IdGenerator = field(default_factory=IdGenerator)


def init_stores(capacity: int = DEFAULT_CAPACITY) -> Stores:
    return Stores(
        users=FixedCapacityCollection(User, capacity),
        comments=FixedCapacityCollection(Comment, capacity),
    )
