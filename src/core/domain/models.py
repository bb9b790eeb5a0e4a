"""Catálogo de funciones registradas (Pydantic v2).

Por qué un catálogo:
- La tabla de funciones solo mapea nombres a callables; la CLI y el
  diagnóstico necesitan además firma y descripción legibles.
- Mantenerlo en el dominio evita que la CLI dependa de docstrings.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class FuncInfo(BaseModel):
    """Describe una función expuesta a las plantillas."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Nombre estable bajo el que se registra la función.",
    )
    signature: str = Field(
        ...,
        min_length=1,
        description="Firma tal como la escribe un autor de plantillas.",
    )
    summary: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Descripción corta del comportamiento.",
    )
    verbatim: bool = Field(
        default=False,
        description="True si el resultado se emite sin auto-escape.",
    )


FUNC_CATALOG: tuple[FuncInfo, ...] = (
    FuncInfo(
        name="dateFormat",
        signature="dateFormat(layout, value=None)",
        summary="Formats a date/time with a reference layout; None means now.",
    ),
    FuncInfo(
        name="htmlEscape",
        signature="htmlEscape(value)",
        summary="Escapes < > & ' \" as HTML entities.",
    ),
    FuncInfo(
        name="htmlUnescape",
        signature="htmlUnescape(value)",
        summary="Decodes named, decimal and hexadecimal HTML entities.",
    ),
    FuncInfo(
        name="safeHTML",
        signature="safeHTML(value)",
        summary="Marks a string as trusted HTML.",
        verbatim=True,
    ),
    FuncInfo(
        name="safeURL",
        signature="safeURL(value)",
        summary="Marks a string as a trusted URL.",
        verbatim=True,
    ),
    FuncInfo(
        name="dict",
        signature="dict(key1, value1, key2, value2, ...)",
        summary="Builds a mapping from alternating string keys and values.",
    ),
    FuncInfo(
        name="querify",
        signature="querify(key1, value1, key2, value2, ...)",
        summary="Encodes key/value pairs as a query string sorted by key.",
    ),
    FuncInfo(
        name="split",
        signature="split(value, delimiter)",
        summary="Splits a string on every literal occurrence of delimiter.",
    ),
    FuncInfo(
        name="loop",
        signature="loop(n)",
        summary=(
            "Returns a sequence of n empty items to repeat a block n times. "
            "Inside a for body `loop` is the loop variable: bind it first, "
            "e.g. {% set times = loop(n) %}."
        ),
    ),
)
