from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from webspaces.core.errors import EnvironmentNotFoundError
from webspaces.models.portal_information import PortalInformation
from webspaces.models.webspace import Portal, Webspace


def _freeze(
    portal_informations: Mapping[str, Mapping[str, PortalInformation]],
) -> Mapping[str, Mapping[str, PortalInformation]]:
    return MappingProxyType(
        {environment: MappingProxyType(dict(entries)) for environment, entries in portal_informations.items()}
    )


@dataclass(frozen=True)
class WebspaceCollection:
    """
    Result of one builder run.

    ``portal_informations`` maps environment -> url -> entry, each inner mapping ordered
    longest url first. Everything is read-only once constructed, so one instance can be
    shared between request threads.
    """

    webspaces: tuple[Webspace, ...] = ()
    portals: tuple[Portal, ...] = ()
    portal_informations: Mapping[str, Mapping[str, PortalInformation]] = field(default_factory=dict, hash=False)
    resources: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'webspaces', tuple(self.webspaces))
        object.__setattr__(self, 'portals', tuple(self.portals))
        object.__setattr__(self, 'resources', tuple(self.resources))
        object.__setattr__(self, 'portal_informations', _freeze(self.portal_informations))

    def __iter__(self) -> Iterator[Webspace]:
        return iter(self.webspaces)

    def __len__(self) -> int:
        return len(self.webspaces)

    @property
    def environments(self) -> list[str]:
        return list(self.portal_informations)

    def get_webspace(self, key: str) -> Webspace | None:
        for webspace in self.webspaces:
            if webspace.key == key:
                return webspace
        return None

    def get_portal(self, key: str) -> Portal | None:
        for portal in self.portals:
            if portal.key == key:
                return portal
        return None

    def get_portal_informations(
        self,
        environment: str,
        types: Iterable[str] | None = None,
    ) -> Mapping[str, PortalInformation]:
        if environment not in self.portal_informations:
            raise EnvironmentNotFoundError(environment)

        entries = self.portal_informations[environment]
        if types is None:
            return entries

        wanted = set(types)
        return MappingProxyType({url: info for url, info in entries.items() if info.match_type in wanted})

    def to_dict(self) -> dict[str, Any]:
        # local import: the output schema imports the model package
        from webspaces.schemas.portal_information import PortalInformationOut

        return {
            'webspaces': [webspace.key for webspace in self.webspaces],
            'portals': [portal.key for portal in self.portals],
            'resources': list(self.resources),
            'portal_informations': {
                environment: [PortalInformationOut.from_match(info).model_dump() for info in entries.values()]
                for environment, entries in self.portal_informations.items()
            },
        }
