"""Conversión flexible de valores de plantilla.

Por qué existe:
- Las plantillas pasan valores de cualquier tipo (contexto, literales,
  resultados de otras funciones); cada función necesita un tipo concreto.
- Centraliza las reglas para que todas las funciones fallen igual
  (`CoercionError`) ante un valor no convertible.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timezone, tzinfo
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

from dateutil import parser as date_parser

from core.domain.errors import CoercionError


def _float_positional(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _float_shortest(value: float) -> str:
    """Representación más corta; exponente solo fuera de [-4, 21)."""

    if math.isnan(value) or math.isinf(value):
        return _float_positional(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if -4 <= exp < 21:
        return format(Decimal(text), "f")
    sign = "+" if exp >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exp):02d}"


def _has_own_str(value: object) -> bool:
    return type(value).__str__ is not object.__str__


def to_string(value: Any) -> str:
    """Convierte `value` a `str` o levanta `CoercionError`.

    Reglas:
    - `None` -> ""
    - `bool` -> "true"/"false"
    - `float` -> forma posicional más corta (`1.0` -> "1")
    - `bytes` -> UTF-8
    - objetos con `__str__` propio (fechas, Decimal, excepciones) -> `str()`
    - contenedores y objetos planos fallan
    """

    if value is None:
        return ""
    if isinstance(value, Enum):
        return to_string(value.value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_positional(value)
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CoercionError(value, "string", str(exc)) from exc
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        raise CoercionError(value, "string")
    if _has_own_str(value):
        return str(value)
    raise CoercionError(value, "string")


def to_int(value: Any) -> int:
    """Convierte `value` a `int` (bools, floats enteros, cadenas numéricas)."""

    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise CoercionError(value, "int", "not an integral number")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise CoercionError(value, "int") from exc
    raise CoercionError(value, "int")


# Dos bases distintas: si el resultado cambia, el texto no traía fecha completa.
_BASE = datetime(2000, 1, 1)
_ALT_BASE = datetime(2001, 2, 2)


def _localize(moment: datetime, tz: tzinfo) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment


def to_datetime(value: Any, tz: tzinfo = timezone.utc) -> datetime:
    """Interpreta `value` como instante de tiempo.

    - `datetime`: se conserva; si es naive se asume `tz`.
    - `date`: medianoche en `tz`.
    - `str`: se parsea con dateutil (ISO 8601, RFC 1123, "02 Jan 2006", ...);
      debe incluir año, mes y día ("May" o "10:30" fallan).
    - `int`/`float`: segundos Unix, expresados en `tz`.
    """

    if isinstance(value, datetime):
        return _localize(value, tz)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=tz)
    if isinstance(value, bool):
        raise CoercionError(value, "time")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=tz)
        except (OverflowError, OSError, ValueError) as exc:
            raise CoercionError(value, "time", str(exc)) from exc
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise CoercionError(value, "time", "empty string")
        try:
            parsed = date_parser.parse(text, default=_BASE)
            check = date_parser.parse(text, default=_ALT_BASE)
        except (ValueError, OverflowError) as exc:
            raise CoercionError(value, "time", str(exc)) from exc
        if parsed.date() != check.date():
            raise CoercionError(value, "time", "missing year, month or day")
        return _localize(parsed, tz)
    raise CoercionError(value, "time")


def stringify(value: Any) -> str:
    """Representación por defecto de cualquier valor (usada por `querify`).

    A diferencia de `to_string`, nunca falla: listas como `[a b]` y mapas
    como `map[k:v]` ordenados por clave.
    """

    if value is None:
        return ""
    if isinstance(value, Enum):
        return stringify(value.value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_shortest(value)
    if isinstance(value, Mapping):
        items = sorted(value.items(), key=lambda kv: stringify(kv[0]))
        return "map[" + " ".join(f"{stringify(k)}:{stringify(v)}" for k, v in items) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(stringify(v) for v in value) + "]"
    return str(value)


__all__ = [
    "stringify",
    "to_datetime",
    "to_int",
    "to_string",
]
