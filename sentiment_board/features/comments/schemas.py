from typing import Optional

from pydantic import BaseModel, Field as PydField

from sentiment_board.db.models.comments import Category


class CommentCreateIn(BaseModel):
    text: str = PydField(..., min_length=1)
    category: Category


class CommentUpdateIn(BaseModel):
    text: str = ""
    category: Optional[Category] = None


class CommentOut(BaseModel):
    id: int
    user_id: int
    text: str
    category: str
    owner_username: Optional[str] = None


class CategorySummary(BaseModel):
    positive: int
    neutral: int
    negative: int

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative
