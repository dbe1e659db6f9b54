"""
Logging loguru de Tagwalk Client.

Le package se comporte en bibliothèque : ses logs sont désactivés à l'import
(disable_library_logging) et une application les réactive en appelant
configure_logging(). Les erreurs des managers portent le code HTTP et le
corps de la réponse dans record["extra"] ; la sortie console les affiche
à la suite du message, le fichier JSON les conserve tels quels.
"""

import sys
from pathlib import Path

from loguru import logger

LOGGER_NAMESPACE = "tagwalk_client"

# Longueur maximale du corps de réponse affiché en console
CONSOLE_BODY_LIMIT = 200


def disable_library_logging() -> None:
    """Rend les logs du package muets tant qu'aucune application ne les active."""
    logger.disable(LOGGER_NAMESPACE)


def _console_format(record: dict) -> str:
    """Format console : contexte HTTP (code, corps tronqué) ajouté si présent."""
    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    extra = record["extra"]
    if "code" in extra:
        fmt += " | <yellow>HTTP {extra[code]}</yellow>"
    if "message" in extra:
        body = str(extra["message"])
        if len(body) > CONSOLE_BODY_LIMIT:
            body = body[:CONSOLE_BODY_LIMIT] + "..."
        extra["console_body"] = body
        fmt += " <dim>{extra[console_body]}</dim>"
    return fmt + "\n{exception}"


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/tagwalk.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Active les logs du package et installe les sorties console et fichier.

    Args :
        log_level : Niveau minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON avec rotation, tous niveaux
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()
    logger.enable(LOGGER_NAMESPACE)

    logger.add(sys.stderr, level=log_level, format=_console_format, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
