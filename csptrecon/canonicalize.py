from collections import Counter
from pathlib import Path
from urllib.parse import urlsplit, parse_qsl, quote, quote_plus
from .substitute import placeholder
from .utils import CONFIG, read_lines, output_path, write_lines

FORBIDDEN_HOST_CHARS = set(' \t\n\r\x00<>^|%"`{}')
# Unescaped in a path besides alphanumerics and _.-~
PATH_SAFE_CHARS = "/%!$&'()*+,;=:@[]^|"
SINGLE_DOT_SEGMENTS = ('.', '%2e')
DOUBLE_DOT_SEGMENTS = ('..', '.%2e', '%2e.', '%2e%2e')

def _form_quote(value):
    # application/x-www-form-urlencoded leaves only alphanumerics and *-._ unescaped
    return quote_plus(value, safe='*').replace('~', '%7E')

def _backslashes_to_slashes(url):
    # http(s) URLs read '\' as '/' everywhere before the query and fragment
    end = len(url)
    for sep in '?#':
        pos = url.find(sep)
        if pos != -1:
            end = min(end, pos)
    return url[:end].replace('\\', '/') + url[end:]

def _host(parts):
    host = parts.hostname
    if not host:
        raise ValueError("URL has no host")
    if ':' in host:
        return f"[{host}]"
    if FORBIDDEN_HOST_CHARS.intersection(host):
        raise ValueError(f"Forbidden character in host {host!r}")
    if not host.isascii():
        host = host.encode('idna').decode('ascii')
    return host

def _origin(parts):
    scheme = parts.scheme.lower()
    port = parts.port
    origin = f"{scheme}://{_host(parts)}"
    if port is not None and port != CONFIG['default_ports'].get(scheme):
        origin += f":{port}"
    return origin

def normalize_path(path):
    """Resolve dot segments and percent-encode the path the way a browser does."""
    segments = (path or '/').split('/')[1:]
    resolved = []
    for i, segment in enumerate(segments):
        last = i == len(segments) - 1
        lowered = segment.lower()
        if lowered in DOUBLE_DOT_SEGMENTS:
            if resolved:
                resolved.pop()
            if last:
                resolved.append('')
        elif lowered in SINGLE_DOT_SEGMENTS:
            if last:
                resolved.append('')
        else:
            resolved.append(segment)
    return quote('/' + '/'.join(resolved), safe=PATH_SAFE_CHARS)

def canonical_keys(entries):
    """Distinct keys in lexicographic order, each repeated as often as it occurred."""
    counts = Counter(key for key, _ in entries)
    return [key for key in sorted(counts) for _ in range(counts[key])]

def canonicalize_url(line):
    """
    Rewrite one URL so that its query values are placeholders.

    Returns None for anything that is not an http(s) URL with at least one
    query parameter. Keys come out sorted with their multiplicity preserved,
    so the original key order is intentionally lost.
    """
    url = line.strip()
    if not url or not url.lower().startswith(CONFIG['schemes']):
        return None
    if '?' not in url:
        return None
    try:
        parts = urlsplit(_backslashes_to_slashes(url))
        origin = _origin(parts)
    except ValueError:
        return None

    entries = parse_qsl(parts.query, keep_blank_values=True)
    if not entries:
        return None

    query = '&'.join(
        f"{_form_quote(key)}={placeholder(i)}"
        for i, key in enumerate(canonical_keys(entries))
    )
    fragment = f"#{parts.fragment}" if parts.fragment else ''
    return f"{origin}{normalize_path(parts.path)}?{query}{fragment}"

def canonicalize_urls(lines):
    output = {}
    for line in lines:
        url = canonicalize_url(line)
        if url is not None:
            output[url] = None
    return list(output)

def run(args, config, logger):
    """List mode: URL list -> CSPT_magun4_waymore.txt."""
    urls_file = Path(args.urls)
    logger.log('INFO', f"Processing URL list: {urls_file}")
    if not urls_file.is_file():
        logger.log('ERROR', f"URLs file {urls_file} does not exist")
        return 1

    try:
        lines = read_lines(urls_file)
    except OSError as e:
        logger.log('ERROR', f"Error reading {urls_file}: {e}")
        return 1

    urls = canonicalize_urls(lines)
    if not urls:
        logger.log('INFO', "No URLs with query parameters found in the provided list.")
    else:
        out_file = output_path('waymore_urls')
        try:
            write_lines(out_file, urls)
        except OSError as e:
            logger.log('ERROR', f"Failed to write {out_file}: {e}")
            return 1
        logger.log('SUCCESS', f"Created {out_file} with {len(urls)} URL(s)")
    logger.log('SUCCESS', "Done!")
    return 0
