from webspaces.models.collection import WebspaceCollection
from webspaces.models.localization import Localization
from webspaces.models.portal_information import (
    MATCH_TYPE_FULL,
    MATCH_TYPE_PARTIAL,
    MATCH_TYPE_REDIRECT,
    MATCH_TYPE_VALUES,
    MATCH_TYPE_WILDCARD,
    FullMatch,
    PartialMatch,
    PortalInformation,
    RedirectMatch,
    WildcardMatch,
)
from webspaces.models.webspace import CustomUrl, Environment, Portal, Url, Webspace

__all__ = [
    'MATCH_TYPE_FULL',
    'MATCH_TYPE_PARTIAL',
    'MATCH_TYPE_REDIRECT',
    'MATCH_TYPE_VALUES',
    'MATCH_TYPE_WILDCARD',
    'CustomUrl',
    'Environment',
    'FullMatch',
    'Localization',
    'PartialMatch',
    'Portal',
    'PortalInformation',
    'RedirectMatch',
    'Url',
    'Webspace',
    'WebspaceCollection',
    'WildcardMatch',
]
