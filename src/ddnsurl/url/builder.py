"""src/ddnsurl/url/builder.py

URL formatting: the inverse of parse_url.
"""

from typing import Any, Mapping, Optional, Union

from ddnsurl.url.parsed import ParsedURL
from ddnsurl.utils.log import get_logger

__all__ = ["build_url", "build_authority"]

logger = get_logger(__name__)


def build_authority(parsed: ParsedURL) -> Optional[str]:
    """
    Return the authority to write for ``parsed``.

    When ``host`` is set the authority is rebuilt from ``userinfo``,
    ``host`` and ``port`` (``user``/``password`` win over ``userinfo``).
    Otherwise the stored ``authority`` is used as is.
    """
    if parsed.host is None:
        return parsed.authority

    authority = parsed.host
    if parsed.port is not None:
        authority = f"{authority}:{parsed.port}"

    userinfo = parsed.userinfo
    if parsed.user is not None:
        userinfo = parsed.user
        if parsed.password is not None:
            userinfo = f"{userinfo}:{parsed.password}"
    if userinfo is not None:
        authority = f"{userinfo}@{authority}"
    return authority


def build_url(parsed: Union[ParsedURL, Mapping[str, Any]]) -> str:
    """
    Compose a URL string from its parts.

    No escaping is applied; every part is written verbatim.

    Args:
        parsed: A ParsedURL, or a mapping accepted by ParsedURL.from_dict.

    Returns:
        The URL string.

    Raises:
        InvalidComponentError: If a mapping holds an unknown name or a
            non-string value.
    """
    if not isinstance(parsed, ParsedURL):
        parsed = ParsedURL.from_dict(parsed)

    url = parsed.path
    if parsed.params is not None:
        url = f"{url};{parsed.params}"
    if parsed.query is not None:
        url = f"{url}?{parsed.query}"

    authority = build_authority(parsed)
    if authority is not None:
        url = f"//{authority}{url}"
    if parsed.scheme is not None:
        url = f"{parsed.scheme}:{url}"
    if parsed.fragment is not None:
        url = f"{url}#{parsed.fragment}"

    logger.debug("Built URL %r", url)
    return url
