import itertools
import re
from .utils import CONFIG, dedupe_preserve

PARAM_RE = re.compile(r':([a-zA-Z0-9_]+)')
WILDCARD_SUFFIX = '/*'

def placeholder(index, base=CONFIG['placeholder']):
    """magun4 for the first slot, magun4_N for the N-th one after it."""
    return base if index == 0 else f"{base}_{index}"

def substitute_params(path):
    counter = itertools.count()
    return PARAM_RE.sub(lambda m: placeholder(next(counter)), path)

def replace_params(path, domain):
    """
    Build a test URL from a path template.

    Every :param is replaced left to right with a placeholder, a trailing
    wildcard segment is dropped and the result is joined to the domain with
    exactly one slash.
    """
    replaced = substitute_params(path)
    if replaced.endswith(WILDCARD_SUFFIX):
        replaced = replaced[:-len(WILDCARD_SUFFIX)]
    clean_domain = domain[:-1] if domain.endswith('/') else domain
    clean_path = replaced if replaced.startswith('/') else '/' + replaced
    return clean_domain + clean_path

def build_urls(paths, domain):
    return dedupe_preserve(replace_params(p, domain) for p in paths)
