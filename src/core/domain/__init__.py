"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) y la jerarquía de
  errores que ven los autores de plantillas.
- El dominio no conoce Jinja2, CLI ni configuración.
"""
