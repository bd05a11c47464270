"""
Commandes CLI de consultation OMDb: recherche, fiche detaillee, episodes.

Chaque commande est un consommateur du contrat de la couche d'acces aux
donnees: un resultat absent ou en echec s'affiche comme un etat vide,
jamais comme une erreur.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from src.adapters.cli.helpers import console, with_container
from src.core.ports.api_clients import DetailRecord
from src.core.value_objects import NOT_AVAILABLE, ContentKind
from src.services.search import SearchPage, SearchQuery


def search(
    query: Annotated[
        Optional[str],
        typer.Argument(help="Texte recherche (defaut: 'movie')"),
    ] = None,
    page: Annotated[
        int,
        typer.Option("--page", "-p", min=1, help="Numero de page"),
    ] = 1,
    content_type: Annotated[
        Optional[ContentKind],
        typer.Option("--type", "-t", help="Type de contenu"),
    ] = None,
    year: Annotated[
        Optional[str],
        typer.Option("--year", "-y", help="Annee de sortie"),
    ] = None,
    genre: Annotated[
        Optional[str],
        typer.Option("--genre", "-g", help="Genre (filtre sur les fiches detaillees)"),
    ] = None,
) -> None:
    """Recherche des films, series et episodes."""
    asyncio.run(
        _search_async(
            SearchQuery(
                query=query,
                page=page,
                content_type=content_type,
                year=year,
                genre=genre,
            )
        )
    )


@with_container()
async def _search_async(container, query: SearchQuery) -> None:
    """Implementation async de la commande search."""
    result = await container.search_service().search_page(query)
    _render_search_page(result)


def _render_search_page(result: SearchPage) -> None:
    """Affiche une page de resultats, ou l'etat vide."""
    if result.error or not result.items:
        console.print(f"[yellow]{result.error or 'Aucun resultat.'}[/yellow]")
        return

    table = Table(title=f"Recherche: {result.query.effective_query}")
    table.add_column("IMDb", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Annee")
    table.add_column("Type")
    if result.details:
        table.add_column("Genre")

    for item in result.items:
        row = [item.imdb_id, item.title, item.year, item.kind.value if item.kind else "?"]
        if result.details:
            detail = result.details.get(item.imdb_id)
            row.append(detail.genre if detail else "")
        table.add_row(*row)

    console.print(table)
    console.print(
        f"[dim]{result.total_results} resultat(s) - "
        f"page {result.current_page}/{max(result.total_pages, 1)}[/dim]"
    )


def detail(
    imdb_id: Annotated[str, typer.Argument(help="Identifiant IMDb (ttXXXXXXX)")],
) -> None:
    """Affiche la fiche detaillee d'un titre."""
    asyncio.run(_detail_async(imdb_id))


@with_container()
async def _detail_async(container, imdb_id: str) -> None:
    """Implementation async de la commande detail."""
    record = await container.omdb_client().get_details(imdb_id)
    if record is None:
        console.print(f"[yellow]Fiche indisponible pour {imdb_id}.[/yellow]")
        return
    console.print(render_detail_panel(record))


def render_detail_panel(record: DetailRecord) -> Panel:
    """
    Cree un panel Rich representant la fiche d'un titre.

    Les champs "N/A" ne sont pas affiches.
    """
    fields = [
        ("Annee", record.year),
        ("Genre", record.genre),
        ("Duree", record.runtime),
        ("Realisateur", record.director),
        ("Acteurs", record.actors),
        ("Note IMDb", record.imdb_rating),
        ("Sortie", record.released),
        ("Pays", record.country),
        ("Langue", record.language),
        ("Recompenses", record.awards),
        ("Box-office", record.box_office),
        ("Saisons", record.total_seasons),
    ]
    lines = [f"[bold]{record.title}[/bold]"]
    lines.extend(
        f"{label}: {value}" for label, value in fields if value and value != NOT_AVAILABLE
    )
    if record.plot and record.plot != NOT_AVAILABLE:
        lines.append(f"\n[italic]{record.plot}[/italic]")

    kind = record.kind.value if record.kind else "?"
    return Panel("\n".join(lines), title=f"{record.imdb_id} ({kind})", border_style="cyan")


def episodes(
    imdb_id: Annotated[str, typer.Argument(help="Identifiant IMDb de la serie")],
    seasons: Annotated[
        Optional[int],
        typer.Option("--seasons", "-s", help="Nombre de saisons si deja connu"),
    ] = None,
) -> None:
    """Calcule le nombre total d'episodes d'une serie."""
    asyncio.run(_episodes_async(imdb_id, seasons))


@with_container()
async def _episodes_async(container, imdb_id: str, seasons: Optional[int]) -> None:
    """Implementation async de la commande episodes."""
    total = await container.episode_counter().get_total_episodes(imdb_id, seasons)
    if total is None:
        console.print(f"[yellow]Nombre d'episodes indisponible pour {imdb_id}.[/yellow]")
        return
    console.print(f"[bold cyan]{imdb_id}[/bold cyan]: {total} episode(s)")
