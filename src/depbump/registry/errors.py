"""Errors raised by registry clients.

Every error names the package it was raised for so the orchestrator can log
it and move on to the next dependency.
"""

from typing import Optional


class RegistryError(Exception):
    """Base class for failures fetching registry metadata."""

    def __init__(self, package: str, message: str) -> None:
        super().__init__(message)
        self.package = package


class PackageNotFoundError(RegistryError):
    """The registry answered but the body is not usable dist-tag metadata."""

    def __init__(self, package: str, cause: Optional[BaseException] = None) -> None:
        message = f"Package `{package}` could not be found."
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(package, message)
        self.cause = cause


class RequestError(RegistryError):
    """Transport-level failure: connection, timeout or TLS."""

    def __init__(self, package: str, cause: BaseException) -> None:
        super().__init__(package, f"HTTP request error: {str(cause) or type(cause).__name__}")
        self.cause = cause


class ParseError(RegistryError):
    """The request URL built for a package is not well formed."""

    def __init__(self, package: str, url: str) -> None:
        super().__init__(package, f"URL parse error: {url!r}")
        self.url = url
