"""Command-line interface for Notion Render."""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from notion_render import __version__
from notion_render.config import get_settings
from notion_render.core.renderer import PageRenderer, wrap_standalone
from notion_render.errors import NotionRenderError
from notion_render.notion.posts import PostRepository

app = typer.Typer(
    name="notion-render",
    help="Render Notion pages and blog posts to semantic HTML.",
    add_completion=False,
)
console = Console()

OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    help="Write HTML to this file instead of stdout",
)
VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Show tracebacks on errors",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Notion Render v{__version__}")
        raise typer.Exit()


def fail(error: Exception, verbose: bool) -> NoReturn:
    """Report an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {error}")
    if verbose:
        console.print_exception()
    raise typer.Exit(1)


def require_configuration() -> None:
    """Exit early when Notion credentials are not set up."""
    if not get_settings().is_configured:
        console.print(
            "[yellow]Warning:[/yellow] Notion is not configured. "
            "Set NOTION_API_KEY and NOTION_DATABASE_ID."
        )
        raise typer.Exit(1)


def emit(
    renderer: PageRenderer,
    html: str,
    output: Optional[Path],
    standalone: bool = False,
    title: str = "",
) -> None:
    """Send rendered HTML to a file or stdout."""
    if output is None:
        typer.echo(wrap_standalone(html, title) if standalone else html)
        return
    renderer.write_html(html, output, standalone=standalone, title=title)
    console.print(f"[green]Wrote:[/green] {output}")


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render Notion content to HTML.

    Examples:

        notion-render posts

        notion-render render my-first-post -o post.html --standalone

        notion-render page 1a2b3c4d5e6f

        notion-render file blocks.json
    """


@app.command()
def posts(verbose: bool = VERBOSE_OPTION) -> None:
    """List published posts, newest first."""
    require_configuration()
    repository = PostRepository()
    try:
        all_posts = repository.get_all_posts()
    except NotionRenderError as e:
        fail(e, verbose)
    finally:
        repository.close()

    if not all_posts:
        console.print("[yellow]No published posts found[/yellow]")
        return

    table = Table(title="Published posts")
    table.add_column("Slug", style="cyan")
    table.add_column("Title")
    table.add_column("Date", style="green")
    table.add_column("Tags", style="magenta")
    for post in all_posts:
        table.add_row(post.slug, post.title, post.date, ", ".join(post.tags))
    console.print(table)


@app.command()
def render(
    slug: str = typer.Argument(..., help="Slug of the post to render"),
    output: Optional[Path] = OUTPUT_OPTION,
    standalone: bool = typer.Option(
        False,
        "--standalone",
        "-s",
        help="Wrap the output in a complete HTML page",
    ),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Render a published post by its slug."""
    require_configuration()
    renderer = PageRenderer()
    try:
        rendered = renderer.render_post(slug)
    except NotionRenderError as e:
        fail(e, verbose)
    finally:
        renderer.close()

    if rendered is None:
        console.print(f"[red]Error:[/red] No published post with slug '{slug}'")
        raise typer.Exit(1)

    emit(renderer, rendered.html, output, standalone, rendered.post.title)


@app.command()
def page(
    page_id: str = typer.Argument(..., help="Notion page or block id"),
    output: Optional[Path] = OUTPUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Render any page by id."""
    require_configuration()
    renderer = PageRenderer()
    try:
        html = renderer.render_page(page_id)
    except NotionRenderError as e:
        fail(e, verbose)
    finally:
        renderer.close()

    emit(renderer, html, output)


@app.command("file")
def render_file(
    path: Path = typer.Argument(
        ...,
        help="JSON file with Notion block objects",
        exists=True,
        dir_okay=False,
    ),
    output: Optional[Path] = OUTPUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Render a local JSON dump of blocks without contacting Notion."""
    renderer = PageRenderer()
    try:
        html = renderer.render_file(path)
    except NotionRenderError as e:
        fail(e, verbose)

    emit(renderer, html, output)


if __name__ == "__main__":
    app()
