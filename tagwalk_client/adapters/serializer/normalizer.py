"""
Conversion entre les reponses JSON de l'API et les entites.

La recursion sur les entites imbriquees est pilotee par une table:
pour chaque type cible, quels champs se denormalisent vers quel type
et s'ils contiennent une liste. L'algorithme de parcours est generique;
ajouter une entite revient a ajouter une entree dans la table.

Usage:
    normalizer = Normalizer()
    streetstyle = normalizer.denormalize(data, Streetstyle)
    data = normalizer.normalize(streetstyle)
"""

from dataclasses import fields, is_dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, TypeVar

from loguru import logger

from tagwalk_client.core.entities import (
    Affiliation,
    City,
    Designer,
    File,
    Gallery,
    Individual,
    Media,
    Season,
    Streetstyle,
    Tag,
)

T = TypeVar("T")

# champ -> (type cible, liste ?)
NestedRules = dict[str, tuple[type, bool]]

DEFAULT_RULES: dict[type, NestedRules] = {
    Streetstyle: {
        "city": (City, False),
        "season": (Season, False),
        "designers": (Designer, True),
        "tags": (Tag, True),
        "affiliations": (Affiliation, True),
        "files": (File, True),
        "individuals": (Individual, True),
    },
    Media: {
        "city": (City, False),
        "season": (Season, False),
        "designer": (Designer, False),
        "designers": (Designer, True),
        "tags": (Tag, True),
        "files": (File, True),
        "individuals": (Individual, True),
    },
    Gallery: {
        "medias": (Media, True),
        "streetstyles": (Streetstyle, True),
    },
}

DATETIME_FIELDS = frozenset({"created_at", "updated_at", "birthdate"})


def _parse_datetime(value: str) -> Optional[datetime]:
    """Parse une date ISO-8601, None si le format est invalide."""
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        logger.warning("Date invalide ignoree", value=value)
        return None


class Normalizer:
    """
    Normaliseur/denormaliseur generique des entites de l'API.

    Attributes:
        rules: Table des champs imbriques par type d'entite
    """

    def __init__(self, rules: Optional[Mapping[type, NestedRules]] = None) -> None:
        """
        Initialise le normaliseur.

        Args:
            rules: Table des champs imbriques (DEFAULT_RULES si absente)
        """
        self.rules: dict[type, NestedRules] = dict(rules if rules is not None else DEFAULT_RULES)

    def register(self, cls: type, rules: NestedRules) -> None:
        """Declare (ou remplace) les champs imbriques d'un type d'entite."""
        self.rules[cls] = dict(rules)

    def supports(self, cls: type) -> bool:
        """Indique si le type peut etre denormalise."""
        return isinstance(cls, type) and is_dataclass(cls)

    def denormalize(self, data: Mapping[str, Any], cls: type[T]) -> T:
        """
        Construit une entite a partir d'un dictionnaire JSON.

        Les champs imbriques presents sont d'abord denormalises dans leur
        propre type, puis l'entite englobante est construite. Les listes
        absentes ou vides restent des listes vides. Les cles inconnues
        sont ignorees.

        Args:
            data: Dictionnaire decode depuis la reponse JSON
            cls: Type d'entite cible

        Returns:
            Instance de cls

        Raises:
            TypeError: Si cls n'est pas un type d'entite (dataclass)
        """
        if not self.supports(cls):
            raise TypeError(f"Unsupported denormalization target: {cls!r}")
        if isinstance(data, cls):
            return data

        nested = self.rules.get(cls, {})
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}

        for name, value in data.items():
            if name not in known:
                continue
            if name in nested:
                target, many = nested[name]
                if many:
                    value = self.denormalize_many(value, target)
                elif value and self._is_record(value, target):
                    value = self.denormalize(value, target)
                else:
                    value = None
            elif name in DATETIME_FIELDS and isinstance(value, str):
                value = _parse_datetime(value)

            if value is None:
                # Conserver la valeur par defaut du champ
                continue
            kwargs[name] = value

        return cls(**kwargs)

    def denormalize_many(self, items: Any, cls: type[T]) -> list[T]:
        """
        Denormalise une liste, en preservant l'ordre.

        Une liste encodee en objet ({"0": {...}, "1": {...}}) est lue
        dans l'ordre de ses valeurs. Les elements qui ne sont pas des
        objets sont ignores.
        """
        if isinstance(items, Mapping):
            items = items.values()
        elif not isinstance(items, (list, tuple)):
            if items:
                logger.warning("Liste attendue, valeur ignoree", target=cls.__name__, value=items)
            return []
        return [self.denormalize(item, cls) for item in items if self._is_record(item, cls)]

    @staticmethod
    def _is_record(value: Any, cls: type) -> bool:
        """Indique si value peut etre denormalise en cls (objet JSON ou instance)."""
        if isinstance(value, (Mapping, cls)):
            return True
        logger.warning("Objet attendu, valeur ignoree", target=cls.__name__, value=value)
        return False

    def normalize(self, entity: Any) -> Any:
        """
        Convertit une entite en structure JSON (dict, list, scalaires).

        Les entites imbriquees sont normalisees recursivement, les dates
        en ISO-8601 et les valeurs None sont omises.
        """
        if is_dataclass(entity) and not isinstance(entity, type):
            result = {}
            for f in fields(entity):
                value = getattr(entity, f.name)
                if value is None:
                    continue
                result[f.name] = self.normalize(value)
            return result
        if isinstance(entity, (list, tuple)):
            return [self.normalize(item) for item in entity]
        if isinstance(entity, datetime):
            return entity.isoformat()
        return entity
