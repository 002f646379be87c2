"""In-memory ProductSource, for fixtures and tests."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from shelfman.protocols.catalog import ProductSource


class StaticProductSource:
    """Returns the same records on every fetch."""

    def __init__(self, records: Iterable[Mapping[str, Any]] = ()):
        self.records = [dict(record) for record in records]

    def fetch_products(self) -> list[Mapping[str, Any]]:
        return [dict(record) for record in self.records]


# Verify protocol compliance at import time.
if not isinstance(StaticProductSource(), ProductSource):
    raise TypeError("StaticProductSource does not implement ProductSource protocol")
