"""src/ddnsurl/exceptions.py

ddnsurl Exceptions hierarchy.
"""


class DdnsUrlError(Exception):
    """Base exception for all ddnsurl errors."""


class ComponentError(DdnsUrlError):
    """A URL component record could not be used."""


class InvalidComponentError(ComponentError, ValueError):
    """
    Unknown component name or non-string component value.

    Raised when a mapping is turned into a ParsedURL or formatted back
    into a URL string.
    """

    def __init__(self, field: str, message: str = "invalid URL component"):
        self.field = field
        super().__init__(f"{message}: {field!r}")
