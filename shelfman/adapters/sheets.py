"""
Google Sheets ProductSource.

Reads the catalog from a sheet published as CSV
(File > Share > Publish to web > CSV). Every cell is read as text;
the normalizer turns stock and price into numbers.

Usage in settings.py:
    SHELFMAN = {
        "PRODUCT_SOURCE": "shelfman.adapters.sheets.SheetProductSource",
        "SHEET_CSV_URL": "https://docs.google.com/spreadsheets/d/e/<id>/pub?output=csv",
        "SHEET_COLUMNS": {"nombre": "name", "precio3": "price", ...},
    }
"""

from __future__ import annotations

import io
import logging
from typing import Any, Mapping

import pandas as pd
import requests

from shelfman.exceptions import CatalogError
from shelfman.protocols.catalog import ProductSource

logger = logging.getLogger(__name__)


class SheetProductSource:
    """
    ProductSource backed by a published Google Sheets CSV.

    Arguments left as None are read from settings on each fetch, so
    changing SHELFMAN in tests or at runtime takes effect immediately.
    """

    def __init__(
        self,
        url: str | None = None,
        columns: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ):
        self._url = url
        self._columns = columns
        self._timeout = timeout

    @property
    def url(self) -> str:
        if self._url is not None:
            return self._url
        from shelfman.conf import shelfman_settings

        return shelfman_settings.SHEET_CSV_URL

    @property
    def columns(self) -> Mapping[str, str]:
        if self._columns is not None:
            return self._columns
        from shelfman.conf import shelfman_settings

        return shelfman_settings.SHEET_COLUMNS

    @property
    def timeout(self) -> float:
        if self._timeout is not None:
            return self._timeout
        from shelfman.conf import shelfman_settings

        return shelfman_settings.SHEET_TIMEOUT

    def fetch_products(self) -> list[Mapping[str, Any]]:
        """
        Download the sheet and return one record per row.

        Raises:
            CatalogError: SOURCE_NOT_CONFIGURED without a URL,
                FETCH_FAILED on HTTP or CSV errors
        """
        url = self.url
        if not url:
            raise CatalogError("SOURCE_NOT_CONFIGURED", setting="SHEET_CSV_URL")

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise CatalogError("FETCH_FAILED", url=url, reason=str(exc)) from exc

        try:
            df = pd.read_csv(io.StringIO(response.text), dtype=str, keep_default_na=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            raise CatalogError("FETCH_FAILED", url=url, reason=str(exc)) from exc

        df = self._to_product_columns(df)
        logger.debug("Fetched %d rows from %s", len(df), url)
        return df.to_dict("records")

    def _to_product_columns(self, df: pd.DataFrame) -> pd.DataFrame:
        """Rename sheet headers to Product fields and drop the rest."""
        df = df.rename(columns=lambda c: str(c).strip())
        mapping = {header: field for header, field in self.columns.items() if header in df.columns}
        missing = set(self.columns) - set(mapping)
        if missing:
            logger.debug("Sheet has no column(s): %s", ", ".join(sorted(missing)))
        return df[list(mapping)].rename(columns=mapping)


# Verify protocol compliance at import time.
if not isinstance(SheetProductSource(url=""), ProductSource):
    raise TypeError("SheetProductSource does not implement ProductSource protocol")
