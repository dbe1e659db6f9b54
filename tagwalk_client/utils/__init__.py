"""
Utilitaires et constantes pour Tagwalk Client.

Ce module contient les constantes partagees par les managers.
"""
