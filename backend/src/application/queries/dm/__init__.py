"""DM inbox queries."""

from src.application.queries.dm.list_dm_wrappers import (
    ListDMWrappersQuery,
    ListDMWrappersHandler,
)

__all__ = [
    "ListDMWrappersQuery",
    "ListDMWrappersHandler",
]
