"""Entorno Jinja2 con la tabla de funciones.

Por qué está en adapters:
- Jinja2 es el motor concreto; el Core solo expone `make_func_map`.
- Aquí se decide cómo se inyectan las funciones (globals + filtros unarios)
  y qué plantillas se auto-escapan.
"""

from __future__ import annotations

from functools import wraps
from pathlib import Path
from typing import Any, Callable

from jinja2 import BaseLoader, Environment, FileSystemLoader, Undefined, select_autoescape

from core.config import AppSettings
from core.funcs import make_func_map
from core.log import get_logger

_log = get_logger("jinja")

# Funciones de un argumento que también tienen sentido como `{{ x | f }}`.
_FILTER_NAMES = ("htmlEscape", "htmlUnescape", "safeHTML", "safeURL")


def _undefined_as_none(func: Callable[..., Any]) -> Callable[..., Any]:
    """Una variable ausente (`Undefined`) llega como None, igual que un nil."""

    @wraps(func)
    def wrapper(*args: Any) -> Any:
        return func(*(None if isinstance(arg, Undefined) else arg for arg in args))

    return wrapper


def build_environment(
    settings: AppSettings | None = None,
    *,
    templates_dir: Path | None = None,
    loader: BaseLoader | None = None,
) -> Environment:
    """Crea un `Environment` con auto-escape y la tabla de funciones.

    Orden para el loader:
    1) `loader` explícito
    2) `templates_dir`
    3) `settings.templates_dir`
    4) sin loader (solo `from_string`)
    """

    settings = settings or AppSettings()
    if loader is None:
        directory = templates_dir or settings.templates_dir
        if directory is not None:
            loader = FileSystemLoader(str(directory))

    env = Environment(
        loader=loader,
        autoescape=select_autoescape(settings.autoescape_extensions),
    )
    funcs = dict(make_func_map(settings.resolved_timezone()))
    funcs["dateFormat"] = _undefined_as_none(funcs["dateFormat"])
    env.globals.update(funcs)
    for name in _FILTER_NAMES:
        env.filters[name] = funcs[name]

    _log.debug(
        "environment ready: %d functions, timezone=%s, loader=%s",
        len(funcs),
        settings.timezone,
        type(loader).__name__ if loader else None,
    )
    return env
