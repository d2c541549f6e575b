"""
➡️ But : Fournir le stockage en mémoire partagé par tous les repositories.

FixedCapacityCollection : tableau de taille fixe + compteur d'enregistrements vivants.
IdGenerator : compteur monotone qui fournit les identifiants.

Les enregistrements vivants occupent toujours le préfixe [0, count) ; tout
emplacement au-delà vaut l'enregistrement zéro et est considéré absent.

🔹 Avantages :

Un seul endroit pour l'ajout, la suppression avec tassement et le parcours.

Aucun état global : chaque repository reçoit sa propre collection.
"""

from typing import Callable, Generic, Iterator, List, TypeVar

from sqlmodel import SQLModel

from sentiment_board.db.errors import CapacityExceededError, OutOfRangeError

DEFAULT_CAPACITY = 255

RecordT = TypeVar("RecordT", bound=SQLModel)


class IdGenerator:
    """Compteur qui démarre à 0 et ne fait que croître (pas de reset)."""

    def __init__(self) -> None:
        self._value = 0

    @property
    def current(self) -> int:
        return self._value

    def next(self) -> int:
        self._value += 1
        return self._value


class LiveView(Generic[RecordT]):
    """Vue paresseuse sur les enregistrements vivants ; peut être parcourue plusieurs fois."""

    def __init__(self, collection: "FixedCapacityCollection[RecordT]"):
        self._collection = collection

    def __iter__(self) -> Iterator[RecordT]:
        slots = self._collection._slots
        for position in range(len(self._collection)):
            yield slots[position]

    def __len__(self) -> int:
        return len(self._collection)


class FixedCapacityCollection(Generic[RecordT]):
    def __init__(self, factory: Callable[[], RecordT], capacity: int = DEFAULT_CAPACITY):
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._factory = factory
        self._capacity = capacity
        self._slots: List[RecordT] = [factory() for _ in range(capacity)]
        self._count = 0

    # ---------- READ ----------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return self._count == self._capacity

    def __len__(self) -> int:
        return self._count

    def _check_position(self, position: int) -> None:
        if position < 0 or position >= self._count:
            raise OutOfRangeError(position, self._count)

    def get_at(self, position: int) -> RecordT:
        """Retourne l'enregistrement vivant (modifiable en place) à cette position."""
        self._check_position(position)
        return self._slots[position]

    def all(self) -> LiveView[RecordT]:
        return LiveView(self)

    def snapshot(self) -> List[RecordT]:
        """Copie du préfixe vivant ; modifier la copie ne touche pas le stockage."""
        return [record.model_copy() for record in self.all()]

    # ---------- CREATE ----------

    def append(self, record: RecordT) -> int:
        if self.is_full:
            raise CapacityExceededError(self._capacity)
        position = self._count
        self._slots[position] = record
        self._count += 1
        return position

    # ---------- DELETE ----------

    def delete_at(self, position: int) -> None:
        self._check_position(position)
        for i in range(position, self._count - 1):
            self._slots[i] = self._slots[i + 1]
        self._slots[self._count - 1] = self._factory()
        self._count -= 1
