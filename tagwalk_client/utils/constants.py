"""
Constantes globales pour Tagwalk Client.

Ce module contient les constantes partagees par les managers:
- Statuts de publication
- Tris et tailles de page par defaut
- Noms des headers de compteurs
- Namespaces du cache
"""

# Statuts de publication
STATUS_ENABLED = "enabled"
STATUS_DISABLED = "disabled"

# Tris par defaut
DEFAULT_CITY_SORT = "name:asc"
DEFAULT_MEDIAS_MODEL_SORT = "created_at:desc"

# Tailles de page par defaut
DEFAULT_CITY_SIZE = 100
DEFAULT_MEDIA_SIZE = 24
RELATED_MEDIA_SIZE = 6

# Headers de compteurs
HEADER_TOTAL_COUNT = "X-Total-Count"
HEADER_STREETSTYLES_COUNT = "X-Streetstyles-Count"
HEADER_NEWS_COUNT = "X-News-Count"
HEADER_TALKS_COUNT = "X-Talks-Count"

# Namespaces du cache (un sous-repertoire par famille de ressources)
CITY_CACHE_NAMESPACE = "cities"

# TTL par defaut du cache (1 heure)
DEFAULT_CACHE_TTL = 60 * 60
