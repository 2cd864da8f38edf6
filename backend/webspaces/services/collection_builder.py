from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from webspaces.core.errors import InvalidTemplateError
from webspaces.models.collection import WebspaceCollection
from webspaces.models.localization import DASH, Localization
from webspaces.models.portal_information import (
    FullMatch,
    PartialMatch,
    PortalInformation,
    RedirectMatch,
    WildcardMatch,
)
from webspaces.models.webspace import Environment, Portal, Url, Webspace
from webspaces.url.replacer import (
    LOCALE_REPLACERS,
    REPLACER_COUNTRY,
    REPLACER_LANGUAGE,
    REPLACER_LOCALIZATION,
    Replacer,
)

logger = logging.getLogger(__name__)

PRIORITY_FULL = 10
PRIORITY_FULL_WITH_REPLACER = 5
PRIORITY_PARTIAL = 9
PRIORITY_PARTIAL_WITH_REPLACER = 4
PRIORITY_REDIRECT = 9
PRIORITY_REDIRECT_WITH_REPLACER = 4
PRIORITY_WILDCARD = 1


@dataclass
class _BuildState:
    webspaces: list[Webspace] = field(default_factory=list)
    portals: list[Portal] = field(default_factory=list)
    portal_informations: defaultdict[str, dict[str, PortalInformation]] = field(
        default_factory=lambda: defaultdict(dict)
    )


def sort_by_url_length(entries: dict[str, PortalInformation]) -> dict[str, PortalInformation]:
    """Longest url first; urls of equal length keep their insertion order."""

    return dict(sorted(entries.items(), key=lambda item: -len(item[0])))


class WebspaceCollectionBuilder:
    """
    Flattens webspace configurations into per-environment url lookups.

    All state of a run lives in a ``_BuildState`` created by ``build``, so a single
    builder can be reused and shared between threads.
    """

    def __init__(self, replacer: Replacer, available_templates: Iterable[str]) -> None:
        self.replacer = replacer
        self.available_templates = frozenset(available_templates)

    def build(self, webspaces: Iterable[Webspace], resources: Sequence[str] = ()) -> WebspaceCollection:
        state = _BuildState()

        for webspace in webspaces:
            self._validate_templates(webspace)
            logger.debug("Building portal informations for webspace %s", webspace.key)
            state.webspaces.append(webspace)
            self._build_portals(state, webspace)

        portal_informations = {
            environment: sort_by_url_length(entries) for environment, entries in state.portal_informations.items()
        }
        logger.info(
            "Built webspace collection: %d webspaces, %d portals, %d environments",
            len(state.webspaces),
            len(state.portals),
            len(portal_informations),
        )

        return WebspaceCollection(
            webspaces=tuple(state.webspaces),
            portals=tuple(state.portals),
            portal_informations=portal_informations,
            resources=tuple(resources),
        )

    def _validate_templates(self, webspace: Webspace) -> None:
        for template in webspace.default_templates.values():
            if template not in self.available_templates:
                raise InvalidTemplateError(webspace.key, template)
            if template in webspace.excluded_templates:
                raise InvalidTemplateError(webspace.key, template)

    def _build_portals(self, state: _BuildState, webspace: Webspace) -> None:
        for portal in webspace.portals:
            state.portals.append(portal)
            for environment in portal.environments:
                self._build_environment(state, portal, environment)

    def _build_environment(self, state: _BuildState, portal: Portal, environment: Environment) -> None:
        entries = state.portal_informations[environment.type]

        for url in environment.urls:
            if url.is_redirect:
                self._build_url_redirect(entries, portal, url)
            else:
                self._build_urls(entries, portal, url)

        for custom_url in environment.custom_urls:
            entries[custom_url.url] = WildcardMatch(
                webspace_key=portal.webspace_key,
                portal_key=portal.key,
                url=custom_url.url,
                url_template=custom_url.url,
                priority=PRIORITY_WILDCARD,
            )

    def _build_url_redirect(self, entries: dict[str, PortalInformation], portal: Portal, url: Url) -> None:
        entries[url.url] = RedirectMatch(
            webspace_key=portal.webspace_key,
            portal_key=portal.key,
            url=url.url,
            url_template=url.url,
            redirect=url.redirect,
            main=url.main,
            priority=(
                PRIORITY_REDIRECT_WITH_REPLACER if self.replacer.has_host_replacer(url.url) else PRIORITY_REDIRECT
            ),
        )

    def _build_urls(self, entries: dict[str, PortalInformation], portal: Portal, url: Url) -> None:
        if url.language:
            locale = url.language + (f"_{url.country}" if url.country else "")
            replacers = {
                REPLACER_LANGUAGE: url.language,
                REPLACER_COUNTRY: url.country,
                REPLACER_LOCALIZATION: locale,
            }
            self._build_url_full_match(entries, portal, url, replacers, portal.get_localization(locale))
        else:
            for localization in portal.localizations:
                replacers = {
                    REPLACER_LANGUAGE: url.language or localization.language,
                    REPLACER_COUNTRY: url.country or localization.country,
                    REPLACER_LOCALIZATION: localization.locale(DASH),
                }
                self._build_url_full_match(entries, portal, url, replacers, localization)

        self._build_url_partial_match(entries, portal, url)

    def _build_url_full_match(
        self,
        entries: dict[str, PortalInformation],
        portal: Portal,
        url: Url,
        replacers: dict[str, str | None],
        localization: Localization | None,
    ) -> None:
        url_result = self._generate_url_address(url.url, replacers)
        entries[url_result] = FullMatch(
            webspace_key=portal.webspace_key,
            portal_key=portal.key,
            url=url_result,
            url_template=url.url,
            localization=localization,
            main=url.main,
            priority=PRIORITY_FULL_WITH_REPLACER if self.replacer.has_host_replacer(url_result) else PRIORITY_FULL,
        )

    def _build_url_partial_match(self, entries: dict[str, PortalInformation], portal: Portal, url: Url) -> None:
        url_result = self.replacer.cleanup(url.url, LOCALE_REPLACERS)

        if url_result in entries:
            logger.debug("Skipping partial match %s, url already taken by %s", url_result, url.url)
            return
        if url_result.endswith("."):
            logger.debug("Skipping partial match %s of %s, url ends with a dot", url_result, url.url)
            return

        entries[url_result] = PartialMatch(
            webspace_key=portal.webspace_key,
            portal_key=portal.key,
            url=url_result,
            url_template=url.url,
            redirect=url.url,
            priority=(
                PRIORITY_PARTIAL_WITH_REPLACER if self.replacer.has_host_replacer(url_result) else PRIORITY_PARTIAL
            ),
        )

    def _generate_url_address(self, pattern: str, replacers: dict[str, str | None]) -> str:
        for token, value in replacers.items():
            pattern = self.replacer.replace(pattern, token, value)
        return pattern
