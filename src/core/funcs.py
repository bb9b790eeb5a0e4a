"""Tabla de funciones para plantillas.

Por qué en el Core:
- Cada función es un envoltorio puro sobre utilidades de texto/fecha/URL;
  no dependen del motor de plantillas concreto.
- El adaptador de Jinja2 solo inyecta `FUNC_MAP` (o un mapa construido con
  otra zona horaria) en el entorno.

Reglas de diseño:
- Sin estado compartido: todas son reentrantes.
- Los errores se levantan al llamador (el motor), nunca se registran aquí.
- Los nombres registrados son contrato público con los autores de plantillas.
"""

from __future__ import annotations

import html
from datetime import datetime, timezone, tzinfo
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Mapping
from urllib.parse import urlencode

from markupsafe import Markup, escape

from core.coercion import stringify, to_datetime, to_int, to_string
from core.domain.errors import ArityError, KeyTypeError, QuerifyError, TemplateFuncError
from core.layout import format_datetime


class SafeURL(Markup):
    """URL (o fragmento) de confianza; el renderer la emite sin escapar."""

    __slots__ = ()


def loop(n: Any) -> tuple[None, ...]:
    """Secuencia de `n` elementos vacíos para repetir un bloque `n` veces.

    `n <= 0` devuelve una secuencia vacía.
    """

    return (None,) * max(to_int(n), 0)


def date_format(layout: Any, value: Any = None, *, tz: tzinfo = timezone.utc) -> str:
    """Formatea `value` con un layout de momento de referencia.

    Si `value` es None se usa la hora actual en `tz`.
    """

    if value is None:
        moment = datetime.now(tz)
    else:
        moment = to_datetime(value, tz)
    return format_datetime(moment, to_string(layout))


def html_escape(value: Any) -> str:
    """Escapa `<`, `>`, `&`, `'` y `"`.

    No es idempotente: un texto ya escapado se escapa otra vez. A menos que
    pase por `safeHTML`, la salida vuelve a escaparse al renderizar.
    """

    return str(escape(to_string(value)))


def html_unescape(value: Any) -> str:
    """Decodifica entidades HTML con nombre, decimales y hexadecimales.

    Decodifica más de lo que `html_escape` produce (p.ej. `&eacute;`).
    """

    return html.unescape(to_string(value))


def safe_html(value: Any) -> Markup:
    return Markup(to_string(value))


def safe_url(value: Any) -> SafeURL:
    return SafeURL(to_string(value))


def dictionary(*values: Any) -> dict[str, Any]:
    """Construye un dict a partir de pares clave/valor alternados.

    Las claves deben ser cadenas; una clave repetida conserva el último valor.
    """

    if len(values) % 2 != 0:
        raise ArityError(len(values))
    result: dict[str, Any] = {}
    for i in range(0, len(values), 2):
        key = values[i]
        if not isinstance(key, str):
            raise KeyTypeError(key, i)
        result[key] = values[i + 1]
    return result


def querify(*params: Any) -> str:
    """Codifica pares clave/valor como query string (sin el `?` inicial).

    Las claves se ordenan de forma ascendente. El error de `dictionary`
    se conserva como causa del `QuerifyError`.
    """

    try:
        values = dictionary(*params)
    except TemplateFuncError as exc:
        raise QuerifyError(exc) from exc
    return urlencode([(key, stringify(values[key])) for key in sorted(values)])


def split(value: Any, delimiter: Any) -> list[str]:
    """Divide `value` en cada aparición literal de `delimiter`.

    Un delimitador vacío separa en caracteres individuales.
    """

    text = to_string(value)
    sep = to_string(delimiter)
    if not sep:
        return list(text)
    return text.split(sep)


def make_func_map(tz: tzinfo | None = None) -> Mapping[str, Callable[..., Any]]:
    """Construye la tabla nombre -> función (solo lectura).

    `tz` es la zona usada por `dateFormat` para "ahora", fechas naive y
    timestamps Unix (UTC por defecto).
    """

    return MappingProxyType(
        {
            "dateFormat": partial(date_format, tz=tz or timezone.utc),
            "htmlEscape": html_escape,
            "htmlUnescape": html_unescape,
            "safeHTML": safe_html,
            "safeURL": safe_url,
            "dict": dictionary,
            "querify": querify,
            "split": split,
            "loop": loop,
        }
    )


FUNC_MAP = make_func_map()


__all__ = [
    "FUNC_MAP",
    "SafeURL",
    "date_format",
    "dictionary",
    "html_escape",
    "html_unescape",
    "loop",
    "make_func_map",
    "querify",
    "safe_html",
    "safe_url",
    "split",
]
