"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `funcs` y `doctor`.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import FuncInfo


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Nunca se imprime en `render`, cuya salida puede ir a un pipe.
    """

    title = Text("TMPL-FUNCS", style="bold cyan")
    subtitle = Text("Funciones para plantillas • Fechas • HTML • URLs", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_funcs_table(catalog: Iterable[FuncInfo]) -> Table:
    """Tabla Rich con las funciones registradas."""

    table = Table(title="Template Functions")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Signature", style="white")
    table.add_column("Verbatim", style="green")
    table.add_column("Summary", style="dim")
    for info in catalog:
        table.add_row(info.name, info.signature, "yes" if info.verbatim else "", info.summary)
    return table


def build_error_panel(title: str, message: str) -> Panel:
    """Panel rojo para errores de renderizado."""

    return Panel(Text(message), title=Text(title, style="bold red"), border_style="red")
