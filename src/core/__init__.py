"""Core: dominio, contratos, servicios y configuración (sin consola)."""
