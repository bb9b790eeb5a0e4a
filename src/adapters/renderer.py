"""Renderizado de plantillas con la tabla de funciones.

Por qué un módulo aparte del entorno:
- La CLI y los tests renderizan cadenas y ficheros con el mismo entorno.
- Los errores de las funciones (`TemplateFuncError`) y de Jinja2
  (`TemplateError`) se propagan sin envolver: el llamador decide la política.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment

from adapters.jinja_env import build_environment
from core.config import AppSettings
from core.log import get_logger

_log = get_logger("renderer")


def render_string(
    source: str,
    context: Mapping[str, Any] | None = None,
    *,
    env: Environment | None = None,
    settings: AppSettings | None = None,
) -> str:
    """Renderiza una plantilla en memoria (auto-escape activado)."""

    env = env or build_environment(settings)
    _log.debug("rendering inline template (%d chars)", len(source))
    return env.from_string(source).render(**dict(context or {}))


def render_file(
    template: Path,
    context: Mapping[str, Any] | None = None,
    *,
    templates_dir: Path | None = None,
    settings: AppSettings | None = None,
) -> str:
    """Renderiza un fichero de plantilla.

    Si no se indica `templates_dir` ni hay uno configurado, se usa el
    directorio del propio fichero, de modo que `include`/`extends` resuelven
    rutas relativas a él.
    """

    settings = settings or AppSettings()
    base = templates_dir or settings.templates_dir
    if base is None:
        base = template.resolve().parent
        name = template.name
    else:
        name = _relative_name(template, base)

    env = build_environment(settings, templates_dir=base)
    _log.debug("rendering %s from %s", name, base)
    return env.get_template(name).render(**dict(context or {}))


def _relative_name(template: Path, base: Path) -> str:
    try:
        return template.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        # Ya es un nombre relativo al directorio de plantillas.
        return template.as_posix()


def export_rendered(*, rendered: str, output_path: Path) -> Path:
    """Escribe el resultado en UTF-8 creando directorios intermedios."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rendered, encoding="utf-8")
    _log.debug("wrote %s (%d chars)", output_path, len(rendered))
    return output_path
