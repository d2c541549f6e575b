"""
➡️ But : Définir l'enregistrement User.

Représente un compte : identifiant généré, nom d'utilisateur, mot de passe.

Le mot de passe est stocké tel que reçu ; c'est le service qui y place un hash bcrypt.

🔹 Avantages :

Un seul type pour le stockage, les recherches et l'affichage.
"""

from sqlmodel import Field

from .base import BaseModelDB


class User(BaseModelDB):
    username: str = Field(default="")
    password: str = Field(default="")
