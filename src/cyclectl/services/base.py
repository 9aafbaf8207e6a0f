"""BaseService — foundation for all cyclectl services.

Every service receives a :class:`GraphStore` at construction time and
owns its transaction boundaries via ``self._store.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cyclectl.infrastructure.store import GraphStore


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ProcedureService(BaseService):
            def create_and_check(self, names, edge_count) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: GraphStore) -> None:
        self._store = store
