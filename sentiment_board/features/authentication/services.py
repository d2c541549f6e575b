import logging
import secrets

from sentiment_board.db.errors import NotFoundError
from sentiment_board.db.models.users import User
from sentiment_board.db.repositories.users import UserRepository
from sentiment_board.security.password import verify_password

logger = logging.getLogger(__name__)


class InvalidCredentialsError(Exception):
    pass


class AuthService:
    """
    Service d'authentification : vérifie les identifiants des users et le mot de passe admin.
    Ne révèle jamais si c'est le nom ou le mot de passe qui est faux.
    """

    def __init__(self, *, user_repo: UserRepository, admin_password: str = ""):
        self.user_repo = user_repo
        self.admin_password = admin_password

    # ---------- Sign in ----------
    def sign_in(self, username: str, password: str) -> User:
        try:
            user = self.user_repo.get_by_username(username)
        except NotFoundError:
            user = None
        if not user or not verify_password(password, user.password):
            logger.info("sign in failed username=%s", username)
            raise InvalidCredentialsError("Invalid credentials")
        logger.info("sign in id=%s", user.id)
        return user

    # ---------- Admin ----------
    def admin_required(self) -> bool:
        return bool(self.admin_password)

    def admin_sign_in(self, password: str) -> None:
        if not self.admin_required():
            return
        if not secrets.compare_digest(password.encode(), self.admin_password.encode()):
            logger.warning("admin sign in failed")
            raise InvalidCredentialsError("Passwords do not match")
