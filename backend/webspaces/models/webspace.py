from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from webspaces.models.localization import Localization


def _find_localization(localizations: tuple[Localization, ...], locale: str) -> Localization | None:
    for localization in localizations:
        if localization.locale() == locale:
            return localization
    return None


@dataclass(frozen=True)
class Url:
    url: str
    language: str | None = None
    country: str | None = None
    segment: str | None = None
    redirect: str | None = None
    main: bool = False

    @property
    def is_redirect(self) -> bool:
        return bool(self.redirect)


@dataclass(frozen=True)
class CustomUrl:
    url: str


@dataclass(frozen=True)
class Environment:
    type: str
    urls: tuple[Url, ...] = ()
    custom_urls: tuple[CustomUrl, ...] = ()

    @property
    def main_url(self) -> Url | None:
        for url in self.urls:
            if url.main:
                return url
        return None


@dataclass(frozen=True)
class Portal:
    key: str
    name: str
    webspace_key: str
    localizations: tuple[Localization, ...] = ()
    environments: tuple[Environment, ...] = ()

    def get_localization(self, locale: str) -> Localization | None:
        return _find_localization(self.localizations, locale)

    @property
    def default_localization(self) -> Localization | None:
        for localization in self.localizations:
            if localization.default:
                return localization
        return self.localizations[0] if self.localizations else None

    def get_environment(self, type_: str) -> Environment | None:
        for environment in self.environments:
            if environment.type == type_:
                return environment
        return None


@dataclass(frozen=True)
class Webspace:
    """
    Root of one webspace configuration file.

    Portals reference their webspace by key only; the webspace owns the portal values.
    """

    key: str
    name: str
    portals: tuple[Portal, ...] = ()
    localizations: tuple[Localization, ...] = ()
    segments: tuple[str, ...] = ()
    default_templates: Mapping[str, str] = field(default_factory=dict, hash=False)
    excluded_templates: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'default_templates', MappingProxyType(dict(self.default_templates)))

    def get_portal(self, key: str) -> Portal | None:
        for portal in self.portals:
            if portal.key == key:
                return portal
        return None

    def get_localization(self, locale: str) -> Localization | None:
        return _find_localization(self.localizations, locale)

    def get_default_template(self, type_: str) -> str | None:
        return self.default_templates.get(type_)
