from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from webspaces.core.errors import InvalidWebspaceConfigError
from webspaces.models.collection import WebspaceCollection
from webspaces.models.localization import Localization
from webspaces.models.webspace import CustomUrl, Environment, Portal, Url, Webspace
from webspaces.schemas.webspace import (
    EnvironmentConfig,
    LocalizationConfig,
    PortalConfig,
    WebspaceConfig,
)
from webspaces.services.collection_builder import WebspaceCollectionBuilder
from webspaces.url.replacer import Replacer

logger = logging.getLogger(__name__)

CONFIG_FILE_PATTERN = "*.json"


@dataclass(frozen=True)
class WebspaceSource:
    resource: str
    webspace: Webspace


def discover_config_files(path: Path | str) -> list[Path]:
    directory = Path(path)
    if not directory.is_dir():
        raise InvalidWebspaceConfigError(directory, "configuration directory does not exist")
    return sorted((item for item in directory.glob(CONFIG_FILE_PATTERN) if item.is_file()), key=lambda item: item.name)


def _to_localizations(items: Iterable[LocalizationConfig]) -> tuple[Localization, ...]:
    return tuple(Localization(language=item.language, country=item.country, default=item.default) for item in items)


def _to_environment(config: EnvironmentConfig) -> Environment:
    return Environment(
        type=config.type,
        urls=tuple(
            Url(
                url=item.url,
                language=item.language,
                country=item.country,
                segment=item.segment,
                redirect=item.redirect,
                main=item.main,
            )
            for item in config.urls
        ),
        custom_urls=tuple(CustomUrl(url=item.url) for item in config.custom_urls),
    )


def _to_portal(config: PortalConfig, webspace_key: str, fallback: tuple[Localization, ...]) -> Portal:
    # portals without own localizations serve every localization of their webspace
    localizations = _to_localizations(config.localizations) or fallback
    return Portal(
        key=config.key,
        name=config.name,
        webspace_key=webspace_key,
        localizations=localizations,
        environments=tuple(_to_environment(item) for item in config.environments),
    )


def to_webspace(config: WebspaceConfig) -> Webspace:
    localizations = _to_localizations(config.localizations)
    return Webspace(
        key=config.key,
        name=config.name,
        localizations=localizations,
        segments=tuple(config.segments),
        default_templates=dict(config.default_templates),
        excluded_templates=tuple(config.excluded_templates),
        portals=tuple(_to_portal(item, config.key, localizations) for item in config.portals),
    )


def load_webspace(path: Path | str) -> Webspace:
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidWebspaceConfigError(file_path, str(exc)) from exc

    try:
        config = WebspaceConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidWebspaceConfigError(file_path, str(exc)) from exc

    return to_webspace(config)


def load_webspaces(path: Path | str) -> list[WebspaceSource]:
    sources: list[WebspaceSource] = []
    for file_path in discover_config_files(path):
        logger.debug("Loading webspace configuration %s", file_path)
        sources.append(WebspaceSource(resource=str(file_path.resolve()), webspace=load_webspace(file_path)))
    return sources


def build_collection(
    path: Path | str,
    available_templates: Iterable[str],
    *,
    replacer: Replacer | None = None,
) -> WebspaceCollection:
    sources = load_webspaces(path)
    builder = WebspaceCollectionBuilder(replacer or Replacer(), available_templates)
    return builder.build(
        [source.webspace for source in sources],
        resources=[source.resource for source in sources],
    )
