from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from webspaces.models.localization import Localization

MATCH_TYPE_FULL = 'full'
MATCH_TYPE_PARTIAL = 'partial'
MATCH_TYPE_REDIRECT = 'redirect'
MATCH_TYPE_WILDCARD = 'wildcard'

MATCH_TYPE_VALUES = [
    MATCH_TYPE_FULL,
    MATCH_TYPE_PARTIAL,
    MATCH_TYPE_REDIRECT,
    MATCH_TYPE_WILDCARD,
]


@dataclass(frozen=True, kw_only=True)
class _PortalInformationBase:
    webspace_key: str
    portal_key: str
    url: str
    url_template: str
    priority: int


@dataclass(frozen=True, kw_only=True)
class FullMatch(_PortalInformationBase):
    match_type: ClassVar[str] = MATCH_TYPE_FULL

    localization: Localization | None
    main: bool = False


@dataclass(frozen=True, kw_only=True)
class PartialMatch(_PortalInformationBase):
    match_type: ClassVar[str] = MATCH_TYPE_PARTIAL

    # raw template; the request is redirected there once a locale is negotiated
    redirect: str


@dataclass(frozen=True, kw_only=True)
class RedirectMatch(_PortalInformationBase):
    match_type: ClassVar[str] = MATCH_TYPE_REDIRECT

    redirect: str
    main: bool = False


@dataclass(frozen=True, kw_only=True)
class WildcardMatch(_PortalInformationBase):
    match_type: ClassVar[str] = MATCH_TYPE_WILDCARD

    priority: int = 1


PortalInformation = FullMatch | PartialMatch | RedirectMatch | WildcardMatch
