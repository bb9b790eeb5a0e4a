"""Comandos principales de la CLI.

Por qué Typer:
- Subcomandos (`render`, `funcs`, `doctor`) con ayuda generada y validación
  de parámetros sin código propio de parsing.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from jinja2 import TemplateError
from rich.console import Console

from adapters.renderer import export_rendered, render_file
from cli import doctor
from cli.ui_components import build_error_panel, build_funcs_table, print_banner
from core.config import AppSettings
from core.domain.errors import TemplateFuncError
from core.domain.models import FUNC_CATALOG
from core.log import configure_logging

app = typer.Typer(
    no_args_is_help=True,
    help="Render templates with dateFormat, htmlEscape, dict, querify and friends.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def parse_assignments(pairs: List[str]) -> dict[str, str]:
    """Convierte `key=value` en un dict; el último valor gana."""

    context: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise typer.BadParameter(f"expected key=value, got {pair!r}", param_hint="--set")
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"empty key in {pair!r}", param_hint="--set")
        context[key] = value
    return context


def _load_data(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"invalid JSON: {exc}", param_hint="--data") from exc
    if not isinstance(data, dict):
        raise typer.BadParameter("JSON data must be an object", param_hint="--data")
    return data


@app.command()
def render(
    template: Path = typer.Argument(..., exists=True, dir_okay=False, help="Template file."),
    assignments: List[str] = typer.Option(
        [], "--set", "-s", help="Context variable as key=value (repeatable)."
    ),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", exists=True, dir_okay=False, help="JSON object with context."
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write result here."),
    templates_dir: Optional[Path] = typer.Option(
        None, "--templates-dir", file_okay=False, help="Base directory for includes."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Render TEMPLATE with the registered template functions."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    context: dict[str, Any] = _load_data(data) if data else {}
    context.update(parse_assignments(assignments))

    try:
        rendered = render_file(template, context, templates_dir=templates_dir, settings=settings)
    except TemplateFuncError as exc:
        _err_console.print(build_error_panel("Template function error", str(exc)))
        raise typer.Exit(code=1)
    except TemplateError as exc:
        _err_console.print(build_error_panel("Template error", str(exc)))
        raise typer.Exit(code=1)
    except ValueError as exc:
        _err_console.print(build_error_panel("Configuration error", str(exc)))
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(rendered, nl=False)
        return
    path = export_rendered(rendered=rendered, output_path=output)
    _err_console.print(f"[green]Saved:[/green] {path}")


@app.command()
def funcs() -> None:
    """List the functions available to templates."""

    print_banner(_console)
    _console.print(build_funcs_table(FUNC_CATALOG))


def run() -> None:
    app()
