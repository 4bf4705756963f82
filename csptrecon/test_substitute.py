from .substitute import placeholder, substitute_params, replace_params, build_urls

def test_placeholder_sequence():
    assert [placeholder(i) for i in range(4)] == ['magun4', 'magun4_1', 'magun4_2', 'magun4_3']

def test_params_replaced_left_to_right():
    """Placeholders follow position, not parameter names"""
    assert substitute_params('/:z/x/:a/y/:m') == '/magun4/x/magun4_1/y/magun4_2'

def test_counter_resets_per_template():
    assert replace_params('/a/:x/:y', 'https://e.com') == 'https://e.com/a/magun4/magun4_1'
    assert replace_params('/b/:x', 'https://e.com') == 'https://e.com/b/magun4'

def test_domain_trailing_slash_stripped():
    assert replace_params('/download/:id', 'https://example.com/') == 'https://example.com/download/magun4'

def test_wildcard_removed():
    assert replace_params('/files/:name/*', 'https://e.com') == 'https://e.com/files/magun4'

def test_path_gets_leading_slash():
    assert replace_params('a/:id', 'https://e.com') == 'https://e.com/a/magun4'

def test_hyphen_ends_param_name():
    assert replace_params('/a/:foo-bar', 'https://e.com') == 'https://e.com/a/magun4-bar'

def test_build_urls_dedupes_in_order():
    paths = ['/a/:x', '/a/:y', '/b/:id']
    assert build_urls(paths, 'https://e.com') == ['https://e.com/a/magun4', 'https://e.com/b/magun4']
