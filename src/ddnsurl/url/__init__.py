"""src/ddnsurl/url/__init__.py

URL decomposition and formatting for ddnsurl.

This module provides the RFC 2396 parser, its result record and the
formatter that turns a record back into a URL string.
"""

from .builder import build_authority, build_url
from .parsed import ParsedURL
from .parser import parse_url

__all__ = ["ParsedURL", "parse_url", "build_url", "build_authority"]
