import json
from collections.abc import Callable
from pathlib import Path

import pytest

from webspaces.models import CustomUrl, Environment, Localization, Portal, Url, Webspace
from webspaces.services.collection_builder import WebspaceCollectionBuilder
from webspaces.url.replacer import Replacer

AVAILABLE_TEMPLATES = ['default', 'homepage', 'article']

EN_US = Localization(language='en', country='us', default=True)
DE_DE = Localization(language='de', country='de')


@pytest.fixture()
def replacer() -> Replacer:
    return Replacer()


@pytest.fixture()
def builder(replacer: Replacer) -> WebspaceCollectionBuilder:
    return WebspaceCollectionBuilder(replacer, AVAILABLE_TEMPLATES)


def make_webspace(
    key: str,
    urls: list[Url],
    *,
    environment: str = 'prod',
    custom_urls: list[CustomUrl] | None = None,
    localizations: tuple[Localization, ...] = (EN_US, DE_DE),
    default_templates: dict[str, str] | None = None,
    excluded_templates: tuple[str, ...] = (),
) -> Webspace:
    portal = Portal(
        key=f'{key}-portal',
        name=key.title(),
        webspace_key=key,
        localizations=localizations,
        environments=(
            Environment(type=environment, urls=tuple(urls), custom_urls=tuple(custom_urls or [])),
        ),
    )
    return Webspace(
        key=key,
        name=key.title(),
        portals=(portal,),
        localizations=localizations,
        default_templates=default_templates if default_templates is not None else {'page': 'default'},
        excluded_templates=excluded_templates,
    )


@pytest.fixture()
def acme_webspace() -> Webspace:
    return make_webspace('acme', [Url(url='{language}.acme.com')])


def acme_config(**overrides) -> dict:
    config = {
        'key': 'acme',
        'name': 'ACME',
        'localizations': [
            {'language': 'en', 'country': 'us', 'default': True},
            {'language': 'de', 'country': 'de'},
        ],
        'default-templates': {'page': 'default', 'home': 'homepage'},
        'excluded-templates': ['article'],
        'portals': [
            {
                'key': 'acme-portal',
                'name': 'ACME Portal',
                'environments': [
                    {
                        'type': 'prod',
                        'urls': [
                            {'url': 'acme.com/{localization}', 'main': True},
                            {'url': 'old.acme.com', 'redirect': 'acme.com'},
                        ],
                        'custom-urls': [{'url': 'acme.com/campaign/*'}],
                    },
                    {
                        'type': 'dev',
                        'urls': [{'url': 'acme.lo/{localization}'}],
                    },
                ],
            }
        ],
    }
    config.update(overrides)
    return config


@pytest.fixture()
def write_config(tmp_path: Path) -> Callable[[str, dict], Path]:
    def _write(filename: str, payload: dict) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(payload), encoding='utf-8')
        return path

    return _write
