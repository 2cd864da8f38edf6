from webspaces.url.replacer import (
    REPLACER_COUNTRY,
    REPLACER_HOST,
    REPLACER_LANGUAGE,
    REPLACER_LOCALIZATION,
    REPLACER_SEGMENT,
    Replacer,
)


def test_has_host_replacer_detects_any_placeholder(replacer: Replacer) -> None:
    assert replacer.has_host_replacer('{host}/en')
    assert replacer.has_host_replacer('{segment}.acme.com')
    assert replacer.has_host_replacer('acme.com/{localization}')
    assert not replacer.has_host_replacer('acme.com/en')


def test_replace_substitutes_every_occurrence(replacer: Replacer) -> None:
    url = replacer.replace('{language}.acme.com/{language}', REPLACER_LANGUAGE, 'de')

    assert url == 'de.acme.com/de'


def test_replace_absent_token_is_noop(replacer: Replacer) -> None:
    assert replacer.replace('acme.com/blog/', REPLACER_COUNTRY, 'at') == 'acme.com/blog/'
    assert replacer.replace('acme.com/blog/', REPLACER_COUNTRY, None) == 'acme.com/blog/'


def test_replace_with_empty_value_drops_separator(replacer: Replacer) -> None:
    assert replacer.replace('acme.com/{language}-{country}', REPLACER_COUNTRY, None) == 'acme.com/{language}'
    assert replacer.replace('{country}.acme.com', REPLACER_COUNTRY, '') == 'acme.com'


def test_replace_with_empty_value_drops_joiner_before_host_token(replacer: Replacer) -> None:
    url = replacer.replace('{language}-{country}.acme.com', REPLACER_COUNTRY, None)

    assert url == '{language}.acme.com'
    assert replacer.cleanup('{language}-{country}.acme.com') == 'acme.com'


def test_replace_host(replacer: Replacer) -> None:
    assert replacer.replace_host('{host}/{localization}', 'acme.lo') == 'acme.lo/{localization}'


def test_cleanup_strips_leading_host_token_with_dot(replacer: Replacer) -> None:
    assert replacer.cleanup('{language}.acme.com') == 'acme.com'


def test_cleanup_strips_path_tokens_with_slash(replacer: Replacer) -> None:
    assert replacer.cleanup('acme.com/{localization}') == 'acme.com'
    assert replacer.cleanup('acme.com/{language}/{country}/shop') == 'acme.com/shop'
    assert replacer.cleanup('acme.com/{language}-{country}') == 'acme.com'


def test_cleanup_strips_segment(replacer: Replacer) -> None:
    assert replacer.cleanup('{segment}.acme.com/{localization}') == 'acme.com'


def test_cleanup_keeps_dot_in_front_of_token(replacer: Replacer) -> None:
    assert replacer.cleanup('www.acme.{language}') == 'www.acme.'


def test_cleanup_only_removes_given_tokens(replacer: Replacer) -> None:
    url = replacer.cleanup('{host}/{language}', [REPLACER_LANGUAGE, REPLACER_SEGMENT])

    assert url == '{host}'
    assert REPLACER_HOST in url


def test_cleanup_is_idempotent(replacer: Replacer) -> None:
    once = replacer.cleanup('{language}.acme.com/{localization}')

    assert replacer.cleanup(once) == once


def test_append_localization_replacer(replacer: Replacer) -> None:
    assert replacer.append_localization_replacer('acme.com/') == f'acme.com/{REPLACER_LOCALIZATION}'
    assert replacer.append_localization_replacer('{language}.acme.com') == '{language}.acme.com'
