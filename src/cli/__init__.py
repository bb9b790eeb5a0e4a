"""CLI de tmpl-funcs (Typer + Rich)."""
