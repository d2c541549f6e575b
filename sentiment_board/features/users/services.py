"""
➡️ But : Contenir la logique métier : orchestrer le repo, appliquer des règles, gérer les erreurs.

UserService : applique les validations logiques (nom unique, confirmation du mot de passe, hash).

Lève des exceptions métier que la console transforme en message.

🔹 Avantages :

Code métier découplé de l'affichage.

Test unitaire possible sans passer par la console.
"""

import logging
from typing import List

from sentiment_board.db.models.users import User
from sentiment_board.db.repositories.base import SparseResult
from sentiment_board.db.repositories.users import UserRepository
from sentiment_board.features.users.schemas import UserCreate, UserUpdate
from sentiment_board.security.password import hash_password

logger = logging.getLogger(__name__)


class ConflictError(Exception):
    pass


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def list(self) -> List[User]:
        return self.repo.list()

    def count(self) -> int:
        return self.repo.count()

    def get_at(self, position: int) -> User:
        return self.repo.get_at(position)

    def get_by_username(self, username: str) -> User:
        return self.repo.get_by_username(username)

    def search(self, needle: str) -> SparseResult[User]:
        return self.repo.search_by_username(needle)

    def register(self, payload: UserCreate) -> User:
        if self.repo.exists(payload.username):
            raise ConflictError(f"User {payload.username} already exists")
        if payload.password != payload.confirm_password:
            raise ValueError("Password does not match")
        user = self.repo.create_user(
            User(username=payload.username, password=hash_password(payload.password))
        )
        logger.info("user registered id=%s username=%s", user.id, user.username)
        return user

    def update_at(self, position: int, payload: UserUpdate) -> User:
        # vérifie la position avant les règles métier
        self.repo.get_at(position)
        if payload.username and self.repo.exists(payload.username, position):
            raise ConflictError(f"User {payload.username} already exists")
        if payload.password and payload.password != payload.confirm_password:
            raise ValueError("Password does not match")
        patch = User(
            username=payload.username,
            password=hash_password(payload.password) if payload.password else "",
        )
        user = self.repo.edit_at(position, patch)
        logger.info("user updated id=%s position=%s", user.id, position)
        return user

    def delete_at(self, position: int) -> None:
        user = self.repo.get_at(position)
        self.repo.delete_at(position)
        logger.info("user deleted id=%s username=%s", user.id, user.username)
