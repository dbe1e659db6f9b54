"""
Fashion content entities.

Typed records mirroring the JSON objects returned by the Tagwalk API.
Nested entities are owned by value once denormalized; list-valued
references always default to an empty list.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from tagwalk_client.core.entities.document import Document, Nameable, Sluggable


@dataclass
class City(Document):
    """
    Fashion week city (Paris, Milan, New York...).

    Attributes:
        position: Display order used by the API listings
    """

    position: Optional[int] = None


@dataclass
class Season(Document):
    """
    Fashion season.

    Attributes:
        shortname: Compact code used in media paths (e.g. "fw19")
        position: Chronological order
    """

    shortname: Optional[str] = None
    position: Optional[int] = None


@dataclass
class Designer(Document):
    """Designer or fashion house."""

    description: Optional[str] = None
    country: Optional[str] = None


@dataclass
class Tag(Document):
    """Trend tag (color, material, pattern...)."""

    category: Optional[str] = None


@dataclass
class Affiliation(Sluggable, Nameable):
    """Brand or agency an individual is affiliated with on a streetstyle."""

    url: Optional[str] = None


@dataclass
class File:
    """
    Image file attached to a media or a streetstyle.

    Attributes:
        filename: Stored file name
        path: CDN path of the file
        position: Order of the file within its owner
        width: Width in pixels
        height: Height in pixels
    """

    filename: Optional[str] = None
    path: Optional[str] = None
    position: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass
class Individual(Document):
    """Model or personality appearing in medias and streetstyles."""

    gender: Optional[str] = None
    nationality: Optional[str] = None
    birthdate: Optional[datetime] = None


@dataclass
class Streetstyle(Document):
    """
    Streetstyle photo record.

    Owns at most one City and one Season, and zero or more designers,
    tags, affiliations, files and individuals.
    """

    text: Optional[str] = None
    city: Optional[City] = None
    season: Optional[Season] = None
    designers: list[Designer] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    affiliations: list[Affiliation] = field(default_factory=list)
    files: list[File] = field(default_factory=list)
    individuals: list[Individual] = field(default_factory=list)


@dataclass
class Media(Document):
    """
    Runway look (or accessory, detail...) shot during a show.

    Attributes:
        type: Media type ("woman", "man", "couture", "accessory"...)
        look: Look number within the show
    """

    type: Optional[str] = None
    look: Optional[int] = None
    city: Optional[City] = None
    season: Optional[Season] = None
    designer: Optional[Designer] = None
    designers: list[Designer] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    files: list[File] = field(default_factory=list)
    individuals: list[Individual] = field(default_factory=list)


@dataclass
class Gallery(Document):
    """Editorial gallery gathering medias and streetstyles."""

    title: Optional[str] = None
    description: Optional[str] = None
    medias: list[Media] = field(default_factory=list)
    streetstyles: list[Streetstyle] = field(default_factory=list)
