"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (httpx, diskcache).

Sous-packages :
- entities/ : Entités métier (City, Gallery, Media, Streetstyle, ...)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (pages de résultats avec compteurs)
"""
