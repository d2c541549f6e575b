"""
➡️ But : Regrouper les erreurs levées par la couche de stockage.

Les repositories ne journalisent rien et ne réessaient rien : ils lèvent une de
ces exceptions et l'appelant décide.

NotFoundError hérite de LookupError et OutOfRangeError de IndexError, pour que
le code qui attrape déjà les exceptions standard continue de fonctionner.
"""


class StoreError(Exception):
    pass


class NotFoundError(StoreError, LookupError):
    pass


class OutOfRangeError(StoreError, IndexError):
    def __init__(self, position: int, count: int):
        super().__init__(f"position {position} out of bounds (count={count})")
        self.position = position
        self.count = count


class NotFoundOrNotOwnedError(NotFoundError):
    """Volontairement ambigu : ne dit pas si l'enregistrement existe chez un autre user."""

    def __init__(self, comment_id: int, owner_id: int):
        super().__init__(
            f"comment with ID {comment_id} not found or does not belong to user with ID {owner_id}"
        )
        self.comment_id = comment_id
        self.owner_id = owner_id


class CapacityExceededError(StoreError):
    def __init__(self, capacity: int):
        super().__init__(f"storage is full (capacity={capacity})")
        self.capacity = capacity
