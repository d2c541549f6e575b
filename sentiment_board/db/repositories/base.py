from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from sqlmodel import SQLModel

from sentiment_board.db.errors import CapacityExceededError, NotFoundError
from sentiment_board.db.storage import FixedCapacityCollection, IdGenerator

# Type générique pour le modèle (User, Comment)
ModelT = TypeVar("ModelT", bound=SQLModel)

# Résultat "creux" : position d'origine -> enregistrement, seulement pour les correspondances
SparseResult = Dict[int, ModelT]


def contains_ignore_case(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards sur une collection en mémoire.

    👉 Ne contient aucune logique métier.
    👉 Gère le stockage générique : create, read, update, delete, count, list.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, collection: FixedCapacityCollection[ModelT], ids: IdGenerator):
        self.collection = collection
        self.ids = ids

    # ---------- READ ----------

    def list(self) -> List[ModelT]:
        """Retourne une copie des enregistrements vivants, dans l'ordre de stockage."""
        return self.collection.snapshot()

    def count(self) -> int:
        """Retourne le nombre d'enregistrements vivants."""
        return len(self.collection)

    def get_at(self, position: int) -> ModelT:
        return self.collection.get_at(position).model_copy()

    def position_of(self, id_: int) -> Optional[int]:
        for position, record in enumerate(self.collection.all()):
            if record.id == id_:
                return position
        return None

    def get(self, id_: int) -> ModelT:
        """Retourne un enregistrement par son identifiant, ou lève NotFoundError."""
        position = self.position_of(id_)
        if position is None:
            raise NotFoundError(f"{self.model.__name__} with ID {id_} not found")
        return self.get_at(position)

    def _filter(self, predicate: Callable[[ModelT], bool]) -> SparseResult:
        return {
            position: record.model_copy()
            for position, record in enumerate(self.collection.all())
            if predicate(record)
        }

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """
        Attribue un nouvel identifiant et ajoute l'enregistrement en fin de collection.
        L'identifiant n'est consommé que si l'ajout réussit.
        """
        if self.collection.is_full:
            raise CapacityExceededError(self.collection.capacity)
        entity = self.model(**fields, id=self.ids.next())
        self.collection.append(entity)
        return entity.model_copy()

    # ---------- UPDATE ----------

    def _patch(self, entity: ModelT, **changes: str) -> ModelT:
        """Applique uniquement les champs non vides ; un champ vide veut dire "inchangé"."""
        for key, value in changes.items():
            if value:
                setattr(entity, key, value)
        return entity.model_copy()

    def update_at(self, position: int, **changes: str) -> ModelT:
        return self._patch(self.collection.get_at(position), **changes)

    # ---------- DELETE ----------

    def delete_at(self, position: int) -> None:
        self.collection.delete_at(position)
