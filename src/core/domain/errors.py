"""Errores del conjunto de funciones de plantilla.

Por qué una jerarquía propia:
- El motor de plantillas propaga cualquier excepción al llamador de `render`;
  una base común permite a la CLI distinguir fallos de datos de fallos de
  sintaxis de la plantilla.
- Heredan de `ValueError` porque todos describen un argumento inválido.
"""

from __future__ import annotations


class TemplateFuncError(ValueError):
    """Base de todos los errores levantados por las funciones registradas."""


class CoercionError(TemplateFuncError):
    """El valor no puede interpretarse como el tipo escalar requerido."""

    def __init__(self, value: object, target: str, reason: str | None = None) -> None:
        self.value = value
        self.target = target
        message = f"unable to cast {value!r} of type {type(value).__name__} to {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ArityError(TemplateFuncError):
    """Número impar de argumentos para `dict`/`querify`."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"invalid dict call: expected an even number of arguments, got {count}")


class KeyTypeError(TemplateFuncError):
    """Una clave de `dict` no es una cadena."""

    def __init__(self, key: object, position: int) -> None:
        self.key = key
        self.position = position
        super().__init__(
            f"dict keys must be strings: argument {position} is {type(key).__name__}"
        )


class QuerifyError(TemplateFuncError):
    """`querify` no pudo construir el diccionario de parámetros.

    El error original se conserva en `__cause__` y en el mensaje.
    """

    def __init__(self, reason: TemplateFuncError) -> None:
        self.reason = reason
        super().__init__(f"invalid querify call: {reason}")
