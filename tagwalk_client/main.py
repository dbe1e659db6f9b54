"""
Point d'entrée CLI de Tagwalk Client.

Initialise le container DI, configure le logging et fournit des commandes
de consultation de l'API (villes, galeries, medias).
"""

import asyncio
import inspect
from functools import wraps
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from .adapters.api.query import elide
from .container import Container
from .core.entities import City, Media
from .core.exceptions import OutOfRangeError
from .logging_config import configure_logging

app = typer.Typer(
    name="tagwalk",
    help="Client en ligne de commande de l'API Tagwalk",
)
container = Container()
console = Console()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Afficher les logs DEBUG"),
    ] = False,
) -> None:
    """Tagwalk - Consultation des contenus mode."""
    config = container.config()
    configure_logging(
        log_level="DEBUG" if verbose else config.log_level,
        log_file=config.log_file,
        rotation_size=config.log_rotation_size,
        retention_count=config.log_retention_count,
    )


def async_command(func):
    """
    Transforme une fonction async en commande sync via asyncio.run().

    Preserve la signature pour que Typer interprete les options/arguments,
    et ferme le transport HTTP a la fin de la commande.
    """

    async def run_and_close(*args, **kwargs):
        try:
            await func(*args, **kwargs)
        finally:
            await container.api_provider().close()

    @wraps(func)
    def wrapper(*args, **kwargs):
        asyncio.run(run_and_close(*args, **kwargs))

    wrapper.__signature__ = inspect.signature(func)
    return wrapper


def _cities_table(cities: list[City]) -> Table:
    table = Table(title="Villes")
    table.add_column("Slug", style="cyan")
    table.add_column("Nom")
    for city in cities:
        table.add_row(city.slug or "", city.name or "")
    return table


def _medias_table(medias: list[Media], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Slug", style="cyan")
    table.add_column("Createur")
    table.add_column("Saison")
    table.add_column("Look", justify="right")
    for media in medias:
        table.add_row(
            media.slug or "",
            media.designer.name if media.designer else "",
            media.season.name if media.season else "",
            str(media.look or ""),
        )
    return table


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = container.config()
    typer.echo(f"API : {config.api_base_url}")
    typer.echo(f"Identifiants : {'configurés' if config.credentials_configured else 'absents'}")
    typer.echo(f"Cache : {config.cache_dir} (TTL {config.cache_ttl}s)")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
@async_command
async def cities(
    language: Annotated[Optional[str], typer.Option("--language", "-l", help="Langue")] = None,
    size: Annotated[int, typer.Option("--size", "-n", help="Nombre de villes")] = 100,
) -> None:
    """Liste les villes de fashion week."""
    result = await container.city_manager().list(language=language, size=size)
    if not result:
        console.print("[yellow]Aucune ville.[/yellow]")
        return
    console.print(_cities_table(result))


@app.command()
@async_command
async def gallery(slug: Annotated[str, typer.Argument(help="Slug de la galerie")]) -> None:
    """Affiche une galerie."""
    page = await container.gallery_manager().get(slug)
    if page is None:
        console.print(f"[red]Galerie introuvable : {slug}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[bold]{page.gallery.title or page.gallery.name or slug}[/bold]")
    console.print(f"{page.total} élément(s)")
    if page.gallery.medias:
        console.print(_medias_table(page.gallery.medias, "Medias"))


@app.command()
@async_command
async def media(slug: Annotated[str, typer.Argument(help="Slug du media")]) -> None:
    """Affiche un media."""
    found = await container.media_manager().get(slug)
    if found is None:
        console.print(f"[red]Media introuvable : {slug}[/red]")
        raise typer.Exit(code=1)
    console.print(_medias_table([found], found.name or slug))


@app.command()
@async_command
async def medias(
    type: Annotated[Optional[str], typer.Option("--type", "-t", help="Type de media")] = None,
    season: Annotated[Optional[str], typer.Option("--season", "-s", help="Slug de saison")] = None,
    designer: Annotated[Optional[str], typer.Option("--designer", "-d", help="Slug du createur")] = None,
    city: Annotated[Optional[str], typer.Option("--city", "-c", help="Slug de la ville")] = None,
    from_: Annotated[int, typer.Option("--from", help="Index du premier resultat")] = 0,
    size: Annotated[int, typer.Option("--size", "-n", help="Nombre de resultats")] = 24,
) -> None:
    """Liste les medias correspondant aux filtres."""
    query = elide({"type": type, "season": season, "designer": designer, "city": city})
    try:
        page = await container.media_manager().list(query, from_=from_, size=size)
    except OutOfRangeError:
        console.print("[red]Pagination hors limites.[/red]")
        raise typer.Exit(code=1)
    console.print(_medias_table(page.items, f"Medias ({page.total})"))


@app.command(name="model-medias")
@async_command
async def model_medias(slug: Annotated[str, typer.Argument(help="Slug du mannequin")]) -> None:
    """Liste les looks d'un mannequin."""
    page = await container.media_manager().list_by_model(slug)
    console.print(_medias_table(page.medias, f"Looks ({page.total})"))
    console.print(
        f"Streetstyles : {page.streetstyles_count} | "
        f"News : {page.news_count} | Talks : {page.talks_count}"
    )


@app.command(name="cache-clear")
@async_command
async def cache_clear() -> None:
    """Vide le cache des villes."""
    await container.city_cache().clear()
    console.print("[green]Cache vidé.[/green]")
