"""Núcleo de tmpl-funcs: coerción, layouts de fecha y tabla de funciones."""
