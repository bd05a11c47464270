"""
Point d'entrée CLI de CineQuery.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger
from pydantic import ValidationError

from .adapters.cli.commands import detail, episodes, search
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_for_verbosity, set_console_level

__version__ = "0.1.0"

app = typer.Typer(
    name="cinequery",
    help="Recherche de films, series et episodes via OMDb",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v: INFO, -vv: DEBUG)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CineQuery - Recherche dans la base de films OMDb."""
    # Sans option, le niveau configure par main() reste en place
    if verbose or quiet:
        set_console_level(level_for_verbosity(verbose, quiet))


app.command()(search)
app.command()(detail)
app.command()(episodes)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"API OMDb : {config.omdb_base_url}")
    typer.echo(f"Timeout : {config.request_timeout}s")
    typer.echo(
        f"Retry : {config.retry_max_attempts} tentative(s), "
        f"délai de base {config.retry_base_delay}s"
    )
    typer.echo(
        f"Cache : {config.cache_max_entries} entrées, TTL {config.cache_ttl_seconds}s"
    )
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineQuery v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration : sans clé API, le démarrage échoue immédiatement
    try:
        settings = container.config()
    except ValidationError as e:
        typer.echo(f"Configuration invalide : {e}", err=True)
        raise SystemExit(1) from e

    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de CineQuery", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
