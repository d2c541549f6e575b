"""
➡️ But : Encapsuler toutes les opérations de stockage des users.

UserRepository : CRUD (create, read, update, delete) sur la collection User.

Ne contient aucune logique métier, juste du stockage.
L'unicité du nom d'utilisateur n'est PAS vérifiée ici : c'est au service d'appeler exists().

🔹 Avantages :

Réutilisable (les services n'ont pas à savoir comment le stockage fonctionne).

Testable indépendamment.
"""

from sentiment_board.db.errors import NotFoundError
from sentiment_board.db.models.users import User
from sentiment_board.db.repositories.base import BaseRepository, SparseResult, contains_ignore_case


class UserRepository(BaseRepository[User]):
    """
    Repository pour la collection User.
    Hérite du CRUD générique de BaseRepository.
    Contient uniquement les requêtes spécifiques à User.
    """
    model = User

    def create_user(self, user: User) -> User:
        return self.create(username=user.username, password=user.password)

    def get_by_username(self, username: str) -> User:
        """Retourne le premier user dont le nom correspond exactement (sensible à la casse)."""
        for record in self.collection.all():
            if record.username == username:
                return record.model_copy()
        raise NotFoundError(f"user with username {username} not found")

    def exists(self, username: str, except_position: int = -1) -> bool:
        """
        True si un autre user vivant porte déjà ce nom.
        except_position=-1 compare à tous les users (création) ;
        une vraie position permet à un user de garder son propre nom (édition).
        """
        for position, record in enumerate(self.collection.all()):
            if record.username == username and position != except_position:
                return True
        return False

    def search_by_username(self, needle: str) -> SparseResult[User]:
        return self._filter(lambda user: contains_ignore_case(user.username, needle))

    def edit_at(self, position: int, patch: User) -> User:
        return self.update_at(position, username=patch.username, password=patch.password)
