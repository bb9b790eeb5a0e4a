"""Adaptadores de infraestructura (Jinja2)."""
