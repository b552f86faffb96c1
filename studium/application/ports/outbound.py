# studium/application/ports/outbound.py

from typing import Any, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class SupportsDescricaoLookup(Protocol):
    """
    Optional repository capability: lookup by the ``descricao`` column.

    Only reference tables (and localities) implement it; controllers
    check for it before serving ``/descricao/...`` routes.
    """

    async def find_by_descricao(self, descricao: str) -> Optional[Any]:
        """Exact match."""
        ...

    async def find_many_by_descricao(self, descricao: str) -> List[Any]:
        """Case-insensitive substring match."""
        ...
