"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- ContentKind : Type de contenu (MOVIE, SERIES, EPISODE)
- FailureKind : Nature d'un echec de recherche (SEMANTIC, TRANSPORT)
- NOT_AVAILABLE : Sentinelle OMDb pour un champ absent ("N/A")
"""

from src.core.value_objects.content_kind import (
    NOT_AVAILABLE,
    ContentKind,
    FailureKind,
)

__all__ = [
    "NOT_AVAILABLE",
    "ContentKind",
    "FailureKind",
]
