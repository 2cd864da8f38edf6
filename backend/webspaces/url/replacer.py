from __future__ import annotations

import re
from collections.abc import Iterable

REPLACER_LANGUAGE = '{language}'
REPLACER_COUNTRY = '{country}'
REPLACER_LOCALIZATION = '{localization}'
REPLACER_SEGMENT = '{segment}'
REPLACER_HOST = '{host}'

REPLACER_VALUES = [
    REPLACER_LANGUAGE,
    REPLACER_COUNTRY,
    REPLACER_LOCALIZATION,
    REPLACER_SEGMENT,
    REPLACER_HOST,
]

# Tokens stripped when a url template is reduced to its host-only partial match.
LOCALE_REPLACERS = (
    REPLACER_LANGUAGE,
    REPLACER_COUNTRY,
    REPLACER_LOCALIZATION,
    REPLACER_SEGMENT,
)

_JOINERS = '-_'
_FOLLOWING_SEPARATORS = '.-_'
_MULTI_SLASH_RE = re.compile(r'/{2,}')


def _remove_token(url: str, token: str) -> str:
    """
    Remove ``token`` from ``url`` together with the separator it introduces.

    A dash or underscore joining the token to what comes before goes first, so
    ``{language}-{country}.acme.com`` keeps its dot and becomes
    ``{language}.acme.com``. Without such a joiner the separator after the token
    goes (``{language}.acme.com`` -> ``acme.com``), and failing that the slash
    before it (``acme.com/{localization}`` -> ``acme.com``). A dot in front of a
    token is left in place.
    """

    escaped = re.escape(token)
    url = re.sub(f'[{re.escape(_JOINERS)}]{escaped}', '', url)
    url = re.sub(f'{escaped}[{re.escape(_FOLLOWING_SEPARATORS)}]', '', url)
    url = re.sub(f'/{escaped}', '', url)
    return url.replace(token, '')


class Replacer:
    """Placeholder handling for webspace url templates. Stateless, safe to share."""

    def has_replacer(self, url: str, token: str) -> bool:
        return token in url

    def has_host_replacer(self, url: str) -> bool:
        return any(token in url for token in REPLACER_VALUES)

    def has_language_replacer(self, url: str) -> bool:
        return self.has_replacer(url, REPLACER_LANGUAGE)

    def has_country_replacer(self, url: str) -> bool:
        return self.has_replacer(url, REPLACER_COUNTRY)

    def has_localization_replacer(self, url: str) -> bool:
        return self.has_replacer(url, REPLACER_LOCALIZATION)

    def has_segment_replacer(self, url: str) -> bool:
        return self.has_replacer(url, REPLACER_SEGMENT)

    def replace(self, pattern: str, token: str, value: str | None) -> str:
        if not self.has_replacer(pattern, token):
            return pattern
        if not value:
            return _remove_token(pattern, token)
        return pattern.replace(token, value)

    def replace_host(self, pattern: str, host: str | None) -> str:
        return self.replace(pattern, REPLACER_HOST, host)

    def cleanup(self, pattern: str, tokens: Iterable[str] = LOCALE_REPLACERS) -> str:
        for token in tokens:
            if self.has_replacer(pattern, token):
                pattern = _remove_token(pattern, token)
        return _MULTI_SLASH_RE.sub('/', pattern).rstrip('/')

    def append_localization_replacer(self, url: str) -> str:
        if self.has_localization_replacer(url) or self.has_language_replacer(url):
            return url
        return f'{url.rstrip("/")}/{REPLACER_LOCALIZATION}'
