"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.jinja_env import build_environment
from core.config import AppSettings, get_user_env_file, resolve_timezone
from core.funcs import FUNC_MAP

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# Uses every registered function once.
SAMPLE_TEMPLATE = (
    "{{ dateFormat('2006-01-02', '2024-03-05T10:20:30Z') }}|"
    "{{ htmlEscape('<b>') }}|{{ htmlUnescape('&lt;i&gt;') }}|"
    "{{ safeHTML('<br>') }}|{{ safeURL('/a?b=1&c=2') }}|"
    "{{ dict('k', 'v')['k'] }}|{{ querify('b', 2, 'a', 1) }}|"
    "{{ split('x,y', ',') | join('+') }}|{{ loop(3) | length }}"
)


def _check_timezone(name: str) -> tuple[bool, str]:
    try:
        tz = resolve_timezone(name)
    except ValueError as exc:
        return False, str(exc)
    return True, str(tz)


def _check_render(settings: AppSettings) -> tuple[bool, str]:
    """Render a template that calls every function to detect broken installs."""

    try:
        env = build_environment(settings)
        return True, env.from_string(SAMPLE_TEMPLATE).render()
    except Exception as exc:
        return False, f"{type(exc).__name__}: {exc}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="TMPL-FUNCS Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    ok_tz, detail_tz = _check_timezone(settings.timezone)
    table.add_row("Timezone", "OK" if ok_tz else "FAIL", detail_tz)

    if settings.templates_dir is None:
        table.add_row("Templates dir", "OPTIONAL", "Not set -> template's own directory")
    elif settings.templates_dir.is_dir():
        table.add_row("Templates dir", "OK", str(settings.templates_dir))
    else:
        table.add_row("Templates dir", "FAIL", f"{settings.templates_dir} is not a directory")

    table.add_row("Functions", "OK", ", ".join(FUNC_MAP))

    ok_render = False
    if ok_tz:
        ok_render, detail_render = _check_render(settings)
        table.add_row("Sample render", "OK" if ok_render else "FAIL", detail_render)

    _console.print(table)

    if not ok_tz:
        _console.print(
            "\n[yellow]Note:[/yellow] Set TMPL_FUNCS_TIMEZONE to 'UTC', 'local' or an IANA name."
        )
    if not (ok_tz and ok_render):
        raise typer.Exit(code=1)
