"""
Error taxonomy of the browser framework.

None of these is fatal to a page: fetch errors are caught by the search
controller and storage errors by the favorites store. There is no validation
error, query sanitizing drops invalid characters instead of rejecting input.
"""


class BrowserError(Exception):
    """Base class for browser framework errors."""


class NetworkError(BrowserError):
    """The search request failed: connection error, timeout or non-2xx response."""


class ParseError(BrowserError):
    """The search response body was not the expected JSON shape."""


class StorageError(BrowserError):
    """Reading or writing durable key-value storage failed."""
