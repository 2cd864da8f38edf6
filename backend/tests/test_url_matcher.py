from webspaces.models import FullMatch, PartialMatch, WildcardMatch
from webspaces.routing.url_matcher import _portal_url_regex, match_url, normalize_url, resolve_url


def _full(url: str, priority: int = 10) -> FullMatch:
    return FullMatch(
        webspace_key='acme',
        portal_key='acme-portal',
        url=url,
        url_template=url,
        localization=None,
        priority=priority,
    )


def test_normalize_url_strips_scheme_port_and_query() -> None:
    assert normalize_url('https://ACME.com:8080/en/about/?page=2') == ('acme.com', 'acme.com/en/about')
    assert normalize_url('acme.com') == ('acme.com', 'acme.com')


def test_match_url_requires_segment_boundary() -> None:
    assert match_url('acme.com/en/about', 'acme.com/en')
    assert match_url('acme.com/en', 'acme.com/en')
    assert not match_url('acme.com/english', 'acme.com/en')
    assert not match_url('www.acme.com', 'acme.com')


def test_match_url_expands_host_and_wildcards() -> None:
    assert match_url('acme.lo/en', '{host}/en', host='acme.lo')
    assert not match_url('other.lo/en', 'acme.lo/en', host='other.lo')
    assert match_url('blog.acme.com/post', '*.acme.com')
    assert match_url('winter.acme.com/en', '{segment}.acme.com/en')


def test_match_url_keeps_path_case() -> None:
    assert match_url('acme.com/Shop', 'acme.com/Shop')
    assert match_url('acme.com/Shop', 'ACME.com/Shop')
    assert not match_url('acme.com/shop', 'acme.com/Shop')


def test_resolve_url_matches_mixed_case_path() -> None:
    entries = {'acme.com/Shop': _full('acme.com/Shop')}

    resolution = resolve_url('https://ACME.com/Shop/shoes', entries)

    assert resolution is not None
    assert resolution.resource_locator == '/shoes'


def test_portal_url_patterns_are_compiled_once() -> None:
    first = _portal_url_regex('{host}/en', 'acme.lo')

    assert _portal_url_regex('{host}/en', 'acme.lo') is first
    assert _portal_url_regex('acme.lo/en', None) is first


def test_resolve_url_prefers_longest_key() -> None:
    entries = {
        'acme.com/en': _full('acme.com/en'),
        'acme.com': PartialMatch(
            webspace_key='acme',
            portal_key='acme-portal',
            url='acme.com',
            url_template='acme.com/{localization}',
            redirect='acme.com/{localization}',
            priority=9,
        ),
    }

    resolution = resolve_url('https://acme.com/en/products/shoes', entries)

    assert resolution is not None
    assert resolution.portal_information.url == 'acme.com/en'
    assert resolution.resource_locator == '/products/shoes'
    assert resolution.host == 'acme.com'

    partial = resolve_url('acme.com', entries)
    assert partial is not None
    assert isinstance(partial.portal_information, PartialMatch)
    assert partial.resource_locator == '/'


def test_resolve_url_uses_priority_between_equal_lengths() -> None:
    low = WildcardMatch(webspace_key='acme', portal_key='p', url='*.acme.com/de', url_template='*.acme.com/de')
    high = _full('a.acme.com/de')
    entries = {'*.acme.com/de': low, 'a.acme.com/de': high}

    resolution = resolve_url('a.acme.com/de', entries)

    assert resolution is not None
    assert resolution.portal_information is high


def test_resolve_url_without_match() -> None:
    assert resolve_url('unknown.com/en', {'acme.com': _full('acme.com')}) is None
