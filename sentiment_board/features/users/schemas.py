"""
➡️ But : Définir les formats d'entrée/sortie du service users (couche validation).

UserCreate → formulaire d'inscription / ajout admin

UserUpdate → formulaire d'édition (champ vide = inchangé)

🔹 Avantages :

Validation automatique avant d'atteindre le stockage.

Le hash du mot de passe n'est jamais saisi directement.
"""

from pydantic import field_validator
from sqlmodel import SQLModel, Field

from sentiment_board.security.password import PASSWORD_MAX_BYTES


def _check_password_bytes(value: str) -> str:
    """Refuse un mot de passe que bcrypt ne pourrait pas hacher en entier."""
    if len(value.encode()) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password cannot be longer than {PASSWORD_MAX_BYTES} bytes")
    return value


class UserCreate(SQLModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1)
    confirm_password: str

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return _check_password_bytes(v)


class UserUpdate(SQLModel):
    username: str = Field(default="", max_length=64)
    password: str = ""
    confirm_password: str = ""

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return _check_password_bytes(v)
