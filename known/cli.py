import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from known.client.folders import DEFAULT_API_HOST, CreateStatus, FolderClient, FolderListState
from known.domains.blog.posts import BlogSite, ContentError
from known.domains.blog.render import render_post

app = typer.Typer(
    name="known",
    help="Known command line: blog build, folder client and server.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)


@app.command("build-blog")
def build_blog(
    posts_dir: Annotated[Path, typer.Option(help="Directory of Markdown posts.")] = Path("posts"),
    out: Annotated[Optional[Path], typer.Option(help="Write one pre-rendered HTML page per slug here.")] = None,
) -> None:
    """Validate every post and print the static route set."""
    try:
        site = BlogSite.build(posts_dir)
    except ContentError as exc:
        err_console.print(f"[red]Blog build failed:[/red] {exc}")
        raise typer.Exit(code=1)

    if out is not None:
        out.mkdir(parents=True, exist_ok=True)
        for slug in site.static_paths.slugs:
            (out / f"{slug}.html").write_text(render_post(site.get_static_props(slug)), encoding="utf-8")

    for slug in site.static_paths.slugs:
        console.print(f"/blog/{slug}")
    console.print(f"[green]{len(site.posts)} routes[/green] (fallback: false)")


@app.command("new-folder")
def new_folder(
    name: Annotated[str, typer.Argument(help="Folder name.")],
    token: Annotated[str, typer.Option(envvar="KNOWN_TOKEN", help="Session token from /auth/login.")],
    api_host: Annotated[
        str,
        typer.Option(
            envvar="API_HOST",
            help="Public API origin. Read from API_HOST here because the server settings also require DATABASE_URL and JWT_SECRET.",
        ),
    ] = DEFAULT_API_HOST,
) -> None:
    """Create a folder through the JSON API."""

    async def _run() -> FolderListState:
        state = FolderListState()
        async with FolderClient(api_host, token=token) as client:
            await state.create(client, name)
        return state

    state = asyncio.run(_run())
    if state.status is CreateStatus.FAILED:
        err_console.print(f"[red]{state.error}[/red]")
        raise typer.Exit(code=1)

    folder = state.folders[-1]
    console.print(f"[green]Created[/green] folder {folder.get('name')} ({folder.get('id')})")


@app.command("serve")
def serve(
    host: str = "127.0.0.1",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """Start the web application."""
    import uvicorn

    console.print(f"[green]Starting Known on {host}:{port}[/green]")
    uvicorn.run("known.main:app", host=host, port=port, reload=reload)


def main() -> None:
    app()
