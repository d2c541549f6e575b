from enum import Enum

from sqlmodel import Field

from .base import BaseModelDB

# Propriétaire des commentaires écrits depuis le menu admin
ADMIN_OWNER_ID = 0


class Category(str, Enum):
    POSITIF = "Positif"
    NETRAL = "Netral"
    NEGATIF = "Negatif"


CATEGORY_RANK = {
    Category.POSITIF.value: 1,
    Category.NETRAL.value: 0,
    Category.NEGATIF.value: -1,
}


def category_rank(label: str) -> int:
    """Rang de tri d'une catégorie ; une valeur inconnue compte comme Netral."""
    return CATEGORY_RANK.get(label, 0)


class Comment(BaseModelDB):
    user_id: int = Field(default=0, ge=0)
    text: str = Field(default="")
    category: str = Field(default="")
