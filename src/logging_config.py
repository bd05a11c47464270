"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, niveau ajustable depuis la CLI
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse historique

Les tentatives de retry et les échecs absorbés par le client OMDb
(fiche indisponible, saison en erreur) sont tracés en WARNING/ERROR,
les évictions du cache en DEBUG.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Identifiant loguru du handler console, remplacé à chaque changement de niveau
_console_handler_id: Optional[int] = None


def level_for_verbosity(verbose: int, quiet: bool, default: str = "INFO") -> str:
    """Niveau console correspondant aux options -v/-q de la CLI.

    -q : ERROR, -v : INFO, -vv et plus : DEBUG, sinon le niveau configuré.
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return default


def set_console_level(log_level: str) -> None:
    """Remplace le handler console par un handler au niveau demandé."""
    global _console_handler_id

    if _console_handler_id is not None:
        try:
            logger.remove(_console_handler_id)
        except ValueError:
            # Handler déjà retiré par un logger.remove() global
            pass
    _console_handler_id = logger.add(
        sys.stderr,
        level=log_level,
        format=_CONSOLE_FORMAT,
        colorize=True,
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/cinequery.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    global _console_handler_id

    # Supprime le handler par défaut
    logger.remove()
    _console_handler_id = None

    set_console_level(log_level)

    # Handler fichier - JSON pour l'analyse, indépendant du niveau console
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,  # Sortie JSON
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
