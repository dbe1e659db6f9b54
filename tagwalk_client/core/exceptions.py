"""Exceptions du domaine remontees aux appelants."""


class OutOfRangeError(LookupError):
    """
    Levee quand l'API repond 416 (pagination hors limites).

    Seul cas d'erreur escalade par les managers : les autres codes
    inattendus sont journalises et degrades en resultat vide.
    """

    def __init__(self, message: str = "Api response: Range not satisfiable") -> None:
        super().__init__(message)
