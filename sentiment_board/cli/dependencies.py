"""
➡️ But : Centraliser la construction des dépendances de la console.

build_container() : crée les repositories à partir du stockage, puis les services.

🔹 Avantages :

Menus plus propres (pas de code de construction dupliqué).

Facile de fournir un stockage neuf dans les tests.
"""

from dataclasses import dataclass
from typing import Optional

from sentiment_board.core.config import Settings
from sentiment_board.db.repositories.comments import CommentRepository
from sentiment_board.db.repositories.users import UserRepository
from sentiment_board.db.session import Stores, init_stores
from sentiment_board.features.authentication.services import AuthService
from sentiment_board.features.comments.services import CommentService
from sentiment_board.features.users.services import UserService


@dataclass
class Container:
    settings: Settings
    stores: Stores
    user_repo: UserRepository
    comment_repo: CommentRepository
    user_service: UserService
    auth_service: AuthService
    comment_service: CommentService


def build_container(settings: Settings, stores: Optional[Stores] = None) -> Container:
    if stores is None:
        stores = init_stores(settings.STORE_CAPACITY)

    user_repo = UserRepository(stores.users, stores.user_ids)
    comment_repo = CommentRepository(stores.comments, stores.comment_ids)

    return Container(
        settings=settings,
        stores=stores,
        user_repo=user_repo,
        comment_repo=comment_repo,
        user_service=UserService(user_repo),
        auth_service=AuthService(user_repo=user_repo, admin_password=settings.ADMIN_PASS),
        comment_service=CommentService(comment_repo=comment_repo, user_repo=user_repo),
    )
