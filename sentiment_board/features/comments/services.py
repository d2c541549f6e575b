import logging
from typing import Dict, List

from sentiment_board.db.errors import NotFoundError
from sentiment_board.db.models.comments import ADMIN_OWNER_ID, Category, Comment
from sentiment_board.db.repositories.base import SparseResult
from sentiment_board.db.repositories.comments import CommentRepository
from sentiment_board.db.repositories.users import UserRepository
from sentiment_board.features.comments.schemas import (
    CategorySummary,
    CommentCreateIn,
    CommentOut,
    CommentUpdateIn,
)

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(
        self,
        *,
        comment_repo: CommentRepository,
        user_repo: UserRepository,
    ):
        self.comments = comment_repo
        self.users = user_repo

    # --------------- Helpers ---------------
    @staticmethod
    def _patch(payload: CommentUpdateIn) -> Comment:
        return Comment(
            text=payload.text,
            category=payload.category.value if payload.category else "",
        )

    def _get_owner_username(self, owner_id: int) -> str:
        if owner_id == ADMIN_OWNER_ID:
            return "admin"
        try:
            return self.users.get(owner_id).username
        except NotFoundError:
            # le user a été supprimé, ses commentaires restent
            return "-"

    def to_out(self, entity: Comment) -> CommentOut:
        return CommentOut(
            id=entity.id,
            user_id=entity.user_id,
            text=entity.text,
            category=entity.category,
            owner_username=self._get_owner_username(entity.user_id),
        )

    # --------------- Commands ---------------
    def add(self, payload: CommentCreateIn, *, user_id: int) -> Comment:
        entity = self.comments.create_comment(
            Comment(text=payload.text, category=payload.category.value),
            user_id,
        )
        logger.info("comment created id=%s user_id=%s category=%s", entity.id, user_id, entity.category)
        return entity

    def add_as_admin(self, payload: CommentCreateIn) -> Comment:
        return self.add(payload, user_id=ADMIN_OWNER_ID)

    def update_own(self, comment_id: int, payload: CommentUpdateIn, *, user_id: int) -> Comment:
        entity = self.comments.edit_owned(comment_id, user_id, self._patch(payload))
        logger.info("comment updated id=%s user_id=%s", comment_id, user_id)
        return entity

    def delete_own(self, comment_id: int, *, user_id: int) -> None:
        self.comments.delete_owned(comment_id, user_id)
        logger.info("comment deleted id=%s user_id=%s", comment_id, user_id)

    def update_any(self, comment_id: int, payload: CommentUpdateIn) -> Comment:
        entity = self.comments.edit_by_id(comment_id, self._patch(payload))
        logger.info("comment updated by admin id=%s", comment_id)
        return entity

    def delete_any(self, comment_id: int) -> None:
        self.comments.delete_by_id(comment_id)
        logger.info("comment deleted by admin id=%s", comment_id)

    # --------------- Queries ---------------
    def list(self) -> List[Comment]:
        return self.comments.list()

    def list_for_user(self, user_id: int) -> SparseResult[Comment]:
        return self.comments.get_by_owner(user_id)

    def search(self, needle: str) -> SparseResult[Comment]:
        return self.comments.search_by_text(needle)

    def sorted_by_length(self, ascending: bool = True) -> List[Comment]:
        return self.comments.sort_by_text_length(ascending)

    def sorted_by_category(self, ascending: bool = True) -> List[Comment]:
        return self.comments.sort_by_category(ascending)

    def summary(self) -> CategorySummary:
        counts: Dict[str, int] = {
            category.value: self.comments.count_by_category(category.value) for category in Category
        }
        return CategorySummary(
            positive=counts[Category.POSITIF.value],
            neutral=counts[Category.NETRAL.value],
            negative=counts[Category.NEGATIF.value],
        )
