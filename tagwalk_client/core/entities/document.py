"""
Groupes de champs partages par les documents de l'API.

Chaque preoccupation (slug, nom, statut, horodatage) est un petit dataclass
independant ; les entites les incluent par heritage simple de champs.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Sluggable:
    """Identifiant lisible utilise dans les chemins de l'API."""

    slug: Optional[str] = None


@dataclass
class Nameable:
    """Nom affichable."""

    name: Optional[str] = None


@dataclass
class Statusable:
    """Statut de publication ("enabled" ou "disabled")."""

    status: Optional[str] = None


@dataclass
class Timestampable:
    """Dates de creation et de mise a jour."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Document(Timestampable, Statusable, Nameable, Sluggable):
    """
    Base commune des documents de l'API.

    Regroupe slug, nom, statut et horodatage.
    """
