"""Capa CLI (Typer + Rich): un `run()` por ejemplo y la app principal."""
