from typing import List, Optional

from sentiment_board.db.errors import NotFoundError, NotFoundOrNotOwnedError
from sentiment_board.db.models.comments import Comment, category_rank
from sentiment_board.db.repositories.base import BaseRepository, SparseResult, contains_ignore_case
from sentiment_board.utils.sorting import insertion_sort, selection_sort


class CommentRepository(BaseRepository[Comment]):
    model = Comment

    def create_comment(self, comment: Comment, owner_id: int) -> Comment:
        return self.create(user_id=owner_id, text=comment.text, category=comment.category)

    def _find_position(self, comment_id: int, owner_id: Optional[int] = None) -> Optional[int]:
        for position, record in enumerate(self.collection.all()):
            if record.id == comment_id and (owner_id is None or record.user_id == owner_id):
                return position
        return None

    def _owned_position(self, comment_id: int, owner_id: int) -> int:
        position = self._find_position(comment_id, owner_id)
        if position is None:
            raise NotFoundOrNotOwnedError(comment_id, owner_id)
        return position

    def _position(self, comment_id: int) -> int:
        position = self._find_position(comment_id)
        if position is None:
            raise NotFoundError(f"comment with ID {comment_id} not found")
        return position

    # ---------- Queries ----------

    def search_by_text(self, needle: str) -> SparseResult[Comment]:
        return self._filter(lambda comment: contains_ignore_case(comment.text, needle))

    def get_by_owner(self, owner_id: int) -> SparseResult[Comment]:
        return self._filter(lambda comment: comment.user_id == owner_id)

    def count_by_category(self, label: str) -> int:
        return sum(1 for comment in self.collection.all() if comment.category == label)

    def sort_by_text_length(self, ascending: bool = True) -> List[Comment]:
        """Tri par sélection sur len(text) ; l'ordre des longueurs égales n'est pas garanti."""
        return selection_sort(self.list(), key=lambda c: len(c.text), ascending=ascending)

    def sort_by_category(self, ascending: bool = True) -> List[Comment]:
        """Tri par insertion sur le rang de catégorie ; stable pour les égalités."""
        return insertion_sort(self.list(), key=lambda c: category_rank(c.category), ascending=ascending)

    # ---------- Commands (owner) ----------

    def edit_owned(self, comment_id: int, owner_id: int, patch: Comment) -> Comment:
        position = self._owned_position(comment_id, owner_id)
        return self.update_at(position, text=patch.text, category=patch.category)

    def delete_owned(self, comment_id: int, owner_id: int) -> None:
        self.delete_at(self._owned_position(comment_id, owner_id))

    # ---------- Commands (admin) ----------

    def edit_by_id(self, comment_id: int, patch: Comment) -> Comment:
        return self.update_at(self._position(comment_id), text=patch.text, category=patch.category)

    def delete_by_id(self, comment_id: int) -> None:
        self.delete_at(self._position(comment_id))
