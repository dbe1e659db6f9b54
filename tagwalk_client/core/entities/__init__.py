"""
Business entities representing the API's fashion content.

Exports:
- Document and its field groups (Sluggable, Nameable, Statusable, Timestampable)
- City, Season, Designer, Tag, Affiliation, File, Individual
- Streetstyle, Media, Gallery: records with nested entities
"""

from tagwalk_client.core.entities.document import (
    Document,
    Nameable,
    Sluggable,
    Statusable,
    Timestampable,
)
from tagwalk_client.core.entities.fashion import (
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

__all__ = [
    "Document",
    "Nameable",
    "Sluggable",
    "Statusable",
    "Timestampable",
    "Affiliation",
    "City",
    "Designer",
    "File",
    "Gallery",
    "Individual",
    "Media",
    "Season",
    "Streetstyle",
    "Tag",
]
