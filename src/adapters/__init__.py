"""Adaptadores concretos de los Ports del Core (reloj, tareas, analítica, exportación)."""
