from pathlib import Path

CONFIG = {
    'js_extension': '.js',
    'placeholder': 'magun4',
    'schemes': ('http://', 'https://'),
    'default_ports': {'http': 80, 'https': 443},
    'files': {
        'paths': 'paths.txt',
        'cspt_urls': 'CSPT_magun4.txt',
        'waymore_urls': 'CSPT_magun4_waymore.txt',
    },
    'encoding': 'utf-8',
}

def ensure_dir(path):
    Path(path).mkdir(parents=True, exist_ok=True)

def dedupe_preserve(items):
    return list(dict.fromkeys(items))

def read_lines(path, encoding=CONFIG['encoding']):
    with open(path, 'r', encoding=encoding, errors='replace', newline='') as f:
        return f.read().split('\n')

def write_lines(path, lines, encoding=CONFIG['encoding']):
    """Write all lines at once, newline-joined, without a trailing newline."""
    ensure_dir(Path(path).parent)
    with open(path, 'w', encoding=encoding, newline='') as f:
        f.write('\n'.join(lines))

def output_path(name):
    return Path(CONFIG['files'][name])
