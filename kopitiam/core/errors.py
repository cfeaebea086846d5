from __future__ import annotations


class SearchUnavailable(Exception):
    """The place-search provider returned an error or no response."""

    def __init__(self, message: str, *, provider: str = "unknown"):
        super().__init__(message)
        self.provider = provider
