"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Transport HTTP (httpx), cache persistant (diskcache), clés de requête
- serializer/ : Conversion JSON <-> entités

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
