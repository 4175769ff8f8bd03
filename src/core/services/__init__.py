"""Servicios del Core: un módulo por ejemplo."""
