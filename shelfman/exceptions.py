"""Shelfman exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "FETCH_FAILED": "Could not fetch products from source",
    "SOURCE_NOT_CONFIGURED": "Product source is not configured",
    "INVALID_BACKEND": "Invalid backend path",
    "INVALID_SORT_ORDER": "Invalid price sort order",
    "INVALID_FILTER": "Invalid filter value",
}


class CatalogError(Exception):
    """
    Structured exception for catalog operations.

    Usage:
        try:
            store.refresh()
        except CatalogError as e:
            if e.code == "FETCH_FAILED":
                print(f"Sheet unavailable: {e.data.get('url')}")
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }
