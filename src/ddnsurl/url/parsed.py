"""src/ddnsurl/url/parsed.py

Structured record of the RFC 2396 parts of a URL.
"""

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from ddnsurl.exceptions import InvalidComponentError

__all__ = ["ParsedURL"]


@dataclass(frozen=True)
class ParsedURL:
    """
    Components of a decomposed URL.

    Unmatched components are ``None``; ``path`` is always a string.
    Captured components may be empty strings, e.g. ``query`` for ``"/a?"``.

    Attributes:
        scheme: Lower-cased scheme, without the trailing colon.
        authority: Everything between ``//`` and the next ``/``.
        userinfo: Part of the authority before ``@``.
        user: Part of the userinfo before its last colon.
        password: Part of the userinfo after its last colon.
        host: Authority without userinfo and port.
        port: Trailing digits of the authority, never range checked.
        path: Whatever was left after every other part was removed.
        params: Text after the first ``;``.
        query: Text after the first ``?``.
        fragment: Text after the first ``#``.
    """

    FIELDS: ClassVar[Tuple[str, ...]] = (
        "scheme",
        "authority",
        "userinfo",
        "user",
        "password",
        "host",
        "port",
        "path",
        "params",
        "query",
        "fragment",
    )

    scheme: Optional[str] = None
    authority: Optional[str] = None
    userinfo: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    host: Optional[str] = None
    port: Optional[str] = None
    path: str = ""
    params: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Return only the components that were set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ParsedURL":
        """
        Build a record from a mapping of component names to strings.

        Args:
            data: Components keyed by name. ``None`` values count as unset.

        Returns:
            A new ParsedURL; a missing ``path`` becomes ``""``.

        Raises:
            InvalidComponentError: On an unknown name or a non-string value.
        """
        values: Dict[str, str] = {}
        for key, value in data.items():
            if key not in cls.FIELDS:
                raise InvalidComponentError(key, "unknown URL component")
            if value is None:
                continue
            if not isinstance(value, str):
                raise InvalidComponentError(key, "URL component must be a string")
            values[key] = value
        return cls(**values)
