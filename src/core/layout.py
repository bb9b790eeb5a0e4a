"""Formato de fechas con layouts de "momento de referencia".

Por qué no strftime:
- Las plantillas existentes escriben el formato como el momento de referencia
  `Mon Jan 2 15:04:05 MST 2006` ("2006-01-02", "Jan _2 15:04"), no con
  directivas `%Y-%m-%d`. Cambiar de lenguaje rompería la salida esperada.

Tokens soportados (todo lo demás se copia literal):
- Mes: `January`, `Jan`, `01`, `1`
- Día de la semana: `Monday`, `Mon`
- Día: `02`, `_2`, `2`; día del año: `002`, `__2`
- Año: `2006`, `06`
- Hora: `15`, `03`, `3`; minuto: `04`, `4`; segundo: `05`, `5`
- AM/PM: `PM`, `pm`
- Zona: `MST`, `Z07:00:00`, `Z070000`, `Z07:00`, `Z0700`, `Z07`,
  `-07:00:00`, `-070000`, `-07:00`, `-0700`, `-07`
- Fracción de segundo: `.000` (fija) y `.999` (sin ceros finales), también con `,`
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Callable

ANSIC = "Mon Jan _2 15:04:05 2006"
UNIX_DATE = "Mon Jan _2 15:04:05 MST 2006"
RUBY_DATE = "Mon Jan 02 15:04:05 -0700 2006"
RFC822 = "02 Jan 06 15:04 MST"
RFC822Z = "02 Jan 06 15:04 -0700"
RFC850 = "Monday, 02-Jan-06 15:04:05 MST"
RFC1123 = "Mon, 02 Jan 2006 15:04:05 MST"
RFC1123Z = "Mon, 02 Jan 2006 15:04:05 -0700"
RFC3339 = "2006-01-02T15:04:05Z07:00"
RFC3339_NANO = "2006-01-02T15:04:05.999999999Z07:00"
KITCHEN = "3:04PM"
STAMP = "Jan _2 15:04:05"
STAMP_MILLI = "Jan _2 15:04:05.000"
STAMP_MICRO = "Jan _2 15:04:05.000000"
DATE_TIME = "2006-01-02 15:04:05"
DATE_ONLY = "2006-01-02"
TIME_ONLY = "15:04:05"

NAMED_LAYOUTS: dict[str, str] = {
    "ANSIC": ANSIC,
    "UnixDate": UNIX_DATE,
    "RubyDate": RUBY_DATE,
    "RFC822": RFC822,
    "RFC822Z": RFC822Z,
    "RFC850": RFC850,
    "RFC1123": RFC1123,
    "RFC1123Z": RFC1123Z,
    "RFC3339": RFC3339,
    "RFC3339Nano": RFC3339_NANO,
    "Kitchen": KITCHEN,
    "Stamp": STAMP,
    "StampMilli": STAMP_MILLI,
    "StampMicro": STAMP_MICRO,
    "DateTime": DATE_TIME,
    "DateOnly": DATE_ONLY,
    "TimeOnly": TIME_ONLY,
}

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# El orden importa: las alternativas largas van antes que sus prefijos.
_TOKEN_RE = re.compile(
    r"January|Jan(?![a-z])|Monday|Mon(?![a-z])|MST"
    r"|Z07:00:00|Z070000|Z07:00|Z0700|Z07"
    r"|-07:00:00|-070000|-07:00|-0700|-07"
    r"|2006|002|__2|_2(?!006)|06|01|02|03|04|05|15|1|2|3|4|5"
    r"|PM|pm"
    r"|[.,](?:0+|9+)(?!\d)"
)


def _offset(moment: datetime, *, zulu: bool, colons: bool, minutes: bool, seconds: bool) -> str:
    delta = moment.utcoffset()
    total = int(delta.total_seconds()) if delta is not None else 0
    if zulu and total == 0:
        return "Z"
    sign = "-" if total < 0 else "+"
    total = abs(total)
    hh, rest = divmod(total, 3600)
    mm, ss = divmod(rest, 60)
    sep = ":" if colons else ""
    out = f"{sign}{hh:02d}"
    if minutes:
        out += f"{sep}{mm:02d}"
    if seconds:
        out += f"{sep}{ss:02d}"
    return out


def _zone_name(moment: datetime) -> str:
    name = moment.tzname()
    if name:
        return name
    return _offset(moment, zulu=False, colons=False, minutes=True, seconds=False)


def _fraction(moment: datetime, token: str) -> str:
    sep, digits = token[0], token[1:]
    # datetime solo guarda microsegundos; el resto se completa con ceros.
    nanos = f"{moment.microsecond:06d}000"[: len(digits)].ljust(len(digits), "0")
    if digits[0] == "9":
        nanos = nanos.rstrip("0")
        if not nanos:
            return ""
    return sep + nanos


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


def _yday(moment: datetime) -> int:
    return moment.timetuple().tm_yday


_RENDERERS: dict[str, Callable[[datetime], str]] = {
    "January": lambda m: _MONTHS[m.month - 1],
    "Jan": lambda m: _MONTHS[m.month - 1][:3],
    "Monday": lambda m: _WEEKDAYS[m.weekday()],
    "Mon": lambda m: _WEEKDAYS[m.weekday()][:3],
    "MST": _zone_name,
    "2006": lambda m: f"{m.year:04d}",
    "06": lambda m: f"{m.year % 100:02d}",
    "01": lambda m: f"{m.month:02d}",
    "1": lambda m: str(m.month),
    "02": lambda m: f"{m.day:02d}",
    "_2": lambda m: f"{m.day:2d}",
    "2": lambda m: str(m.day),
    "002": lambda m: f"{_yday(m):03d}",
    "__2": lambda m: f"{_yday(m):3d}",
    "15": lambda m: f"{m.hour:02d}",
    "03": lambda m: f"{_hour12(m):02d}",
    "3": lambda m: str(_hour12(m)),
    "04": lambda m: f"{m.minute:02d}",
    "4": lambda m: str(m.minute),
    "05": lambda m: f"{m.second:02d}",
    "5": lambda m: str(m.second),
    "PM": lambda m: "PM" if m.hour >= 12 else "AM",
    "pm": lambda m: "pm" if m.hour >= 12 else "am",
}


def _render_token(moment: datetime, token: str) -> str:
    if token[0] in ".,":
        return _fraction(moment, token)
    if token.startswith("Z07"):
        return _offset(
            moment,
            zulu=True,
            colons=":" in token,
            minutes=len(token.replace(":", "")) >= 5,
            seconds=len(token.replace(":", "")) == 7,
        )
    if token.startswith("-07"):
        return _offset(
            moment,
            zulu=False,
            colons=":" in token,
            minutes=len(token.replace(":", "")) >= 5,
            seconds=len(token.replace(":", "")) == 7,
        )

    return _RENDERERS[token](moment)


def format_datetime(moment: datetime, layout: str) -> str:
    """Renderiza `moment` según `layout` (lenguaje de momento de referencia)."""

    return _TOKEN_RE.sub(lambda m: _render_token(moment, m.group(0)), layout)


__all__ = [
    "NAMED_LAYOUTS",
    "format_datetime",
]
