from __future__ import annotations

import logging
from pathlib import Path

import typer
import uvicorn

from mangashelf.config import AppConfig, load_config
from mangashelf.index import BuiltIndex, build_index
from mangashelf.storage import MangaRepository
from mangashelf.web import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = typer.Typer(help="mangashelf CLI")


@app.command("serve")
def serve(
    root: Path | None = typer.Option(
        None,
        "--root",
        help="Directory holding one sub-directory per manga.",
    ),
    host: str | None = typer.Option(
        None,
        "--host",
        help="Interface to bind.",
    ),
    port: int | None = typer.Option(
        None,
        "--port",
        help="Port to listen on.",
        min=1,
        max=65535,
    ),
    asset_dir: Path | None = typer.Option(
        None,
        "--asset-dir",
        help="Directory served under /asset.",
        exists=True,
        file_okay=False,
        readable=True,
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Config file path (YAML or JSON).",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Index the library and serve it over HTTP."""
    config = _load_config_or_exit(config_path)
    assets = asset_dir if asset_dir is not None else config.server.asset_dir
    if assets is not None and not Path(assets).is_dir():
        typer.echo(f"asset directory not found: {assets}", err=True)
        raise typer.Exit(code=1)

    library_root = root if root is not None else Path(config.library.root)
    index = _build_index_or_exit(library_root, config)

    repo = MangaRepository(index.mangas, index.chapters, index.pages)
    web_app = create_app(repo, asset_dir=assets)

    bind_host = host if host is not None else config.server.host
    bind_port = port if port is not None else config.server.port
    logging.info("serving root=%s host=%s port=%d", library_root, bind_host, bind_port)
    uvicorn.run(
        web_app,
        host=bind_host,
        port=bind_port,
        timeout_graceful_shutdown=config.server.shutdown_timeout_seconds,
    )


@app.command("index")
def index_library(
    root: Path | None = typer.Option(
        None,
        "--root",
        help="Directory holding one sub-directory per manga.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Config file path (YAML or JSON).",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Build the index once and print a summary."""
    config = _load_config_or_exit(config_path)
    library_root = root if root is not None else Path(config.library.root)
    index = _build_index_or_exit(library_root, config)

    typer.echo(
        f"mangas={len(index.mangas)} "
        f"chapters={len(index.chapters)} "
        f"pages={len(index.pages)} "
        f"skipped={len(index.skipped)}"
    )
    for skipped in index.skipped:
        typer.echo(f"skipped dir={skipped.directory.name} reason={skipped.reason}")


def _load_config_or_exit(config_path: Path | None) -> AppConfig:
    try:
        return load_config(config_path)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def _build_index_or_exit(root: Path, config: AppConfig) -> BuiltIndex:
    try:
        return build_index(root, descriptor_name=config.library.descriptor_name)
    except OSError as exc:
        typer.echo(f"cannot index root={root}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def main() -> None:
    """CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
