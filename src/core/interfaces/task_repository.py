"""Right Port: origen de las tareas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que adaptadores (HTTP, fichero JSON, fake en memoria) sean
  intercambiables y testeables sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TaskRepository(Protocol):
    """Contrato mínimo para obtener tareas.

    Reglas de diseño:
    - `fetch_tasks` es asíncrono porque típicamente hará I/O (HTTP).
    - Devuelve registros crudos con la forma de cable (camelCase, timestamps
      ISO-8601); la validación ocurre en el Core.
    - Cualquier fallo se propaga como excepción; el Core lo convierte en
      `FetchError`.
    """

    async def fetch_tasks(self) -> list[dict[str, Any]]:
        ...
