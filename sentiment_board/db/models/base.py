"""
➡️ But : Définir la structure des enregistrements gardés en mémoire.

Contient les classes héritant de SQLModel (sans table=True : rien n'est écrit en base).

Ici on représente les propriétés communes de tous les enregistrements.

Un enregistrement construit sans argument est la "valeur zéro" : c'est ce que
contient un emplacement libre du stockage.

🔹 Avantages :

Tu manipules des objets Python validés, pas des dicts.

Les mêmes classes servent de modèles et de schémas de sortie.
"""

from sqlmodel import SQLModel, Field


class BaseModelDB(SQLModel, table=False):
    id: int = Field(default=0, ge=0)
