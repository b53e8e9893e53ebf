"""Contrato de los resolvers de direcciones.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que las estrategias (DNS, ejecutable) sean intercambiables y
  testeables sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ResolvedAddress


@runtime_checkable
class AddressResolver(Protocol):
    """Contrato mínimo para una estrategia de resolución.

    Reglas de diseño:
    - `resolve` es asíncrono porque hace I/O (DNS, procesos hijos).
    - Devuelve las direcciones en el orden de la fuente, sin ordenar ni deduplicar.
    - Falla con una excepción de `core.domain.errors`, nunca con lista parcial.
    """

    async def resolve(self, target: str) -> list[ResolvedAddress]:
        """Resuelve `target` (hostname o línea de comando) a direcciones IP."""

        ...
