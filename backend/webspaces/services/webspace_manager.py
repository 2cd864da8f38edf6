from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from webspaces.core.config import Settings, get_settings
from webspaces.models.collection import WebspaceCollection
from webspaces.models.localization import Localization
from webspaces.models.portal_information import MATCH_TYPE_FULL, PortalInformation
from webspaces.models.webspace import Portal, Webspace
from webspaces.routing.url_matcher import UrlResolution, match_url, normalize_url, resolve_url
from webspaces.services.webspace_loader_service import build_collection
from webspaces.url.replacer import Replacer

logger = logging.getLogger(__name__)


class WebspaceManager:
    """
    Read side of the webspace configuration.

    The collection is built on first use and published with a single assignment, so
    readers see either no collection or a complete one.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        loader: Callable[[], WebspaceCollection] | None = None,
        replacer: Replacer | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.replacer = replacer or Replacer()
        self._loader = loader or self._load_from_settings
        self._collection: WebspaceCollection | None = None
        self._lock = threading.Lock()

    def _load_from_settings(self) -> WebspaceCollection:
        return build_collection(
            self.settings.config_path,
            self.settings.available_templates,
            replacer=self.replacer,
        )

    def get_collection(self) -> WebspaceCollection:
        collection = self._collection
        if collection is not None:
            return collection

        with self._lock:
            if self._collection is None:
                logger.info("Building webspace collection")
                self._collection = self._loader()
            return self._collection

    def reset(self) -> None:
        with self._lock:
            self._collection = None

    def _environment(self, environment: str | None) -> str:
        return environment or self.settings.WEBSPACE_ENVIRONMENT

    def find_webspace_by_key(self, key: str) -> Webspace | None:
        return self.get_collection().get_webspace(key)

    def find_portal_by_key(self, key: str) -> Portal | None:
        return self.get_collection().get_portal(key)

    def find_portal_informations_by_url(self, url: str, environment: str | None = None) -> list[PortalInformation]:
        host, normalized = normalize_url(url)
        entries = self.get_collection().get_portal_informations(self._environment(environment))
        return [info for key, info in entries.items() if match_url(normalized, key, host)]

    def find_portal_information_by_url(self, url: str, environment: str | None = None) -> UrlResolution | None:
        entries = self.get_collection().get_portal_informations(self._environment(environment))
        return resolve_url(url, entries)

    def find_portal_informations_by_webspace_key(
        self,
        webspace_key: str,
        environment: str | None = None,
    ) -> list[PortalInformation]:
        entries = self.get_collection().get_portal_informations(self._environment(environment))
        return [info for info in entries.values() if info.webspace_key == webspace_key]

    def find_urls_by_resource_locator(
        self,
        resource_locator: str,
        locale: str,
        environment: str | None = None,
        webspace_key: str | None = None,
    ) -> list[str]:
        entries = self.get_collection().get_portal_informations(
            self._environment(environment),
            types=[MATCH_TYPE_FULL],
        )
        path = resource_locator if resource_locator.startswith("/") else f"/{resource_locator}"

        urls: list[str] = []
        for info in entries.values():
            if webspace_key is not None and info.webspace_key != webspace_key:
                continue
            if info.localization is None or info.localization.locale() != locale:
                continue
            if self.replacer.has_host_replacer(info.url):
                continue
            url = info.url if path == "/" else f"{info.url}{path}"
            if url not in urls:
                urls.append(url)
        return urls

    def get_all_localizations(self) -> list[Localization]:
        localizations: list[Localization] = []
        for portal in self.get_collection().portals:
            for localization in portal.localizations:
                if localization not in localizations:
                    localizations.append(localization)
        return localizations
