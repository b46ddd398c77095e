"""Exceptions raised by the TVDB client."""
from typing import Optional


class TVDBError(Exception):
    """Single failure type for transport, HTTP and XML problems."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} (URL: {self.url})"
        return self.message
