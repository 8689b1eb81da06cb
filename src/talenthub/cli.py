"""Typer CLI entrypoint for browsing candidates."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
import uvicorn
from pydantic import ValidationError

from .api import create_app
from .config import ConfigManager
from .container import AppContainer, create_container
from .core import parse_sort_option, sort_candidates
from .logging import configure_logging
from .schemas import Candidate, SortOption
from .schemas.config import AppConfig, load_config

app = typer.Typer(help="Candidate browsing CLI.", no_args_is_help=True)


def _bootstrap(config: Optional[Path], log_level: Optional[str]) -> tuple[AppConfig, AppContainer]:
    try:
        raw = ConfigManager.load_path(config) if config else None
        app_config = load_config(raw)
    except (ValueError, ValidationError) as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc

    configure_logging(log_level or app_config.log_level)
    return app_config, create_container(settings=app_config.to_settings())


def _summary_line(candidate: Candidate) -> str:
    shown, hidden = candidate.skills_preview()
    skills = ", ".join(shown)
    if hidden:
        skills = f"{skills} +{hidden}"
    return (
        f"[{candidate.id}] {candidate.name} - {candidate.role} | {candidate.location} | "
        f"{candidate.experience} years | {candidate.availability.label} | {skills}"
    )


@app.command("list")
def list_command(
    sort: str = typer.Option(SortOption.NAME_ASC.value, help="name-asc or experience-desc."),
    config: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="YAML config path."
    ),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """List all candidates."""
    _, container = _bootstrap(config, log_level)
    repository = container.candidate_repository()

    candidates = sort_candidates(repository.list_all(), parse_sort_option(sort))
    typer.echo(f"{len(candidates)} total candidates available")
    for candidate in candidates:
        typer.echo(_summary_line(candidate))


@app.command()
def show(
    candidate_id: str = typer.Argument(..., help="Candidate id."),
    with_strengths: bool = typer.Option(True, "--with-strengths/--no-strengths"),
    config: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="YAML config path."
    ),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Show the detail view for one candidate."""
    _, container = _bootstrap(config, log_level)
    candidate = container.candidate_repository().find_by_id(candidate_id)
    if candidate is None:
        typer.echo("Candidate not found", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{candidate.name}")
    typer.echo(f"{candidate.role}")
    typer.echo(f"Email: {candidate.email}")
    typer.echo(f"Location: {candidate.location}")
    typer.echo(f"Experience: {candidate.experience} years")
    typer.echo(f"Availability: {candidate.availability.detail_label}")
    typer.echo(f"Avatar: {candidate.avatar_or_placeholder}")
    typer.echo(f"Skills: {', '.join(candidate.skills)}")

    if with_strengths:
        strengths = asyncio.run(container.strengths_resolver().resolve_remote(candidate.id))
        typer.echo("Strengths:")
        for index, strength in enumerate(strengths, start=1):
            typer.echo(f"  {index}. {strength}")


@app.command()
def strengths(
    candidate_id: str = typer.Argument(..., help="Candidate id (any string)."),
    remote: bool = typer.Option(False, "--remote/--local", help="Simulate the inference call latency."),
    config: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="YAML config path."
    ),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Print generated strengths for a candidate id."""
    _, container = _bootstrap(config, log_level)
    resolver = container.strengths_resolver()
    if remote:
        result = asyncio.run(resolver.resolve_remote(candidate_id))
    else:
        result = resolver.resolve_local(candidate_id)
    for index, strength in enumerate(result, start=1):
        typer.echo(f"{index}. {strength}")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind host."),
    port: Optional[int] = typer.Option(None, help="Bind port."),
    config: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="YAML config path."
    ),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Run the HTTP API with uvicorn."""
    app_config, container = _bootstrap(config, log_level)
    uvicorn.run(
        create_app(container),
        host=app_config.server.host if host is None else host,
        port=app_config.server.port if port is None else port,
        log_level=(log_level or app_config.log_level).lower(),
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
