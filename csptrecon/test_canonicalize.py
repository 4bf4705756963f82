from .canonicalize import canonicalize_url, canonicalize_urls, canonical_keys, normalize_path

def test_simple_query():
    assert canonicalize_url('https://x.com/a?b=1&c=2') == 'https://x.com/a?b=magun4&c=magun4_1'

def test_keys_sorted_with_repeats():
    """Original key order is dropped, multiplicity is kept"""
    assert canonicalize_url('https://x.com/p?b=1&a=2&b=3') == 'https://x.com/p?a=magun4&b=magun4_1&b=magun4_2'

def test_canonical_keys():
    assert canonical_keys([('b', '1'), ('a', '2'), ('b', '3')]) == ['a', 'b', 'b']

def test_skipped_lines():
    for line in ['', '   ', 'not-a-url', 'https://x.com/path', 'ftp://x.com/?a=1',
                 'https://x.com/a?', 'https://x.com/#frag?a=1', 'https://x.com:abc/a?q=1',
                 'https:///a?q=1']:
        assert canonicalize_url(line) is None, line

def test_scheme_case_insensitive():
    assert canonicalize_url('HTTPS://X.com/a?b=1') == 'https://x.com/a?b=magun4'

def test_fragment_preserved():
    assert canonicalize_url('https://x.com/a?b=1#top') == 'https://x.com/a?b=magun4#top'

def test_empty_path_becomes_slash():
    assert canonicalize_url('https://x.com?q=1') == 'https://x.com/?q=magun4'

def test_ports():
    assert canonicalize_url('https://x.com:443/a?q=1') == 'https://x.com/a?q=magun4'
    assert canonicalize_url('http://x.com:8080/a?q=1') == 'http://x.com:8080/a?q=magun4'

def test_blank_values_and_encoding():
    assert canonicalize_url('https://x.com/a?flag') == 'https://x.com/a?flag=magun4'
    assert canonicalize_url('https://x.com/a?my+key=1') == 'https://x.com/a?my+key=magun4'
    assert canonicalize_url('https://x.com/a?k%2Fy=1') == 'https://x.com/a?k%2Fy=magun4'

def test_whitespace_trimmed():
    assert canonicalize_url('  https://x.com/a?b=1  ') == 'https://x.com/a?b=magun4'

def test_canonicalize_urls_dedupes():
    lines = ['https://x.com/a?b=1&c=2', 'https://x.com/a?c=9&b=8', 'junk', 'https://x.com/b?z=1']
    assert canonicalize_urls(lines) == ['https://x.com/a?b=magun4&c=magun4_1', 'https://x.com/b?z=magun4']

def test_invalid_host_skipped():
    """Hosts a browser rejects are dropped silently"""
    assert canonicalize_url('https://exa mple.com/?q=1') is None
    assert canonicalize_url('https://exa<mple.com/?q=1') is None
    assert canonicalize_url('https://exa|mple.com/?q=1') is None

def test_backslashes_become_slashes():
    assert canonicalize_url('https://x.com\\a?q=1') == 'https://x.com/a?q=magun4'
    assert canonicalize_url('https://x.com/a\\b?q=1') == 'https://x.com/a/b?q=magun4'
    assert canonicalize_url('https://x.com/a?q=\\1') == 'https://x.com/a?q=magun4'

def test_dot_segments_resolved():
    assert canonicalize_url('https://x.com/a/../b?q=1') == 'https://x.com/b?q=magun4'
    assert canonicalize_url('https://x.com/a/./b?q=1') == 'https://x.com/a/b?q=magun4'
    assert canonicalize_url('https://x.com/a/%2E%2E/b?q=1') == 'https://x.com/b?q=magun4'
    assert canonicalize_url('https://x.com/../../b?q=1') == 'https://x.com/b?q=magun4'

def test_dot_segment_variants_dedupe():
    urls = canonicalize_urls(['https://x.com/a/./b?q=1', 'https://x.com/a/b?q=2', 'https://x.com/a/c/../b?q=3'])
    assert urls == ['https://x.com/a/b?q=magun4']

def test_path_spaces_encoded():
    assert canonicalize_url('https://x.com/my file?q=1') == 'https://x.com/my%20file?q=magun4'
    assert canonicalize_url('https://x.com/my%20file?q=1') == 'https://x.com/my%20file?q=magun4'

def test_normalize_path():
    assert normalize_path('') == '/'
    assert normalize_path('/a/b/..') == '/a/'
    assert normalize_path('/a/.') == '/a/'
    assert normalize_path('/a/"b"') == '/a/%22b%22'
    assert normalize_path("/a;b=c/d:e@f") == "/a;b=c/d:e@f"
    assert normalize_path('/café') == '/caf%C3%A9'
