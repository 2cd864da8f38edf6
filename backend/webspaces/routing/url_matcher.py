from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from webspaces.models.portal_information import PortalInformation
from webspaces.url.replacer import REPLACER_HOST

# placeholders as they look after re.escape
_ESCAPED_PLACEHOLDER_RE = re.compile(r"\\\{[a-z]+\\\}")


@dataclass(frozen=True)
class UrlResolution:
    portal_information: PortalInformation
    host: str
    resource_locator: str


def _strip_scheme(url: str) -> str:
    return url.split("://", 1)[1] if "://" in url else url


def _strip_port(host: str) -> str:
    return host.split(":", 1)[0].lower()


def normalize_url(url: str) -> tuple[str, str]:
    """Split a request url into ``(host, host + path)``, dropping scheme, port, query and fragment."""

    rest = _strip_scheme(url.strip())
    rest = rest.split("?", 1)[0].split("#", 1)[0]
    host, sep, path = rest.partition("/")
    host = _strip_port(host)
    path = f"/{path}".rstrip("/") if sep else ""
    return host, host + path


def _portal_url_regex(portal_url: str, host: str | None) -> re.Pattern[str]:
    if host is not None:
        portal_url = portal_url.replace(REPLACER_HOST, host)
    return _compile_portal_url(portal_url)


@lru_cache(maxsize=1024)
def _compile_portal_url(portal_url: str) -> re.Pattern[str]:
    # hosts compare case-insensitively, paths as written
    key_host, sep, path = portal_url.partition("/")
    pattern = re.escape(f"{key_host.lower()}{sep}{path}")
    pattern = pattern.replace(r"\*", "[^/]+")
    pattern = _ESCAPED_PLACEHOLDER_RE.sub("[^/]+", pattern)
    return re.compile(rf"^{pattern}(?P<rest>$|/.*)")


def match_url(url: str, portal_url: str, host: str | None = None) -> bool:
    return _portal_url_regex(portal_url, host).match(url) is not None


def resolve_url(url: str, portal_informations: Mapping[str, PortalInformation]) -> UrlResolution | None:
    """
    Pick the entry serving ``url``.

    ``portal_informations`` is expected longest key first. The first match of the
    longest matching length wins; between keys of equal length the higher priority wins.
    """

    host, normalized = normalize_url(url)
    best_rank: tuple[int, int] | None = None
    best: tuple[PortalInformation, re.Match[str]] | None = None

    for key, info in portal_informations.items():
        match = _portal_url_regex(key, host).match(normalized)
        if match is None:
            continue
        rank = (len(key), info.priority)
        if best_rank is None or rank > best_rank:
            best_rank = rank
            best = (info, match)

    if best is None:
        return None

    info, match = best
    return UrlResolution(portal_information=info, host=host, resource_locator=match.group("rest") or "/")
