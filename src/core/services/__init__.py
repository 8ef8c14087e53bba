"""Casos de uso del Core (Left Port y mapeo a view models)."""
