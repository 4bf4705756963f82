import re
from pathlib import Path
from tqdm import tqdm
from .collect import collect_js_files
from .substitute import build_urls
from .utils import CONFIG, output_path, write_lines

# Heuristics for telling route templates apart from other string literals
QUOTE_CHARS = '\'"`'
PATH_CHARS = r'a-zA-Z0-9\-_/*'
PARAM_NAME_CHARS = r'a-zA-Z0-9\-_'
FORBIDDEN_SUBSTRINGS = (' ', '(', ')', '[', ']', '\\', '?!', '|')
MIN_PATH_LENGTH = 2    # exclusive
MAX_PATH_LENGTH = 200  # exclusive
PARAM_MARKER = '/:'

PATH_RE = re.compile(
    r'([' + QUOTE_CHARS + r'])'
    r'(/[' + PATH_CHARS + r']*/:[' + PARAM_NAME_CHARS + r']+[' + PATH_CHARS + r':]*?)'
    r'\1'
)
PARAM_NAME_RE = re.compile(r'/:[a-zA-Z][' + PARAM_NAME_CHARS + r']*')
TRAILING_WILDCARD_RE = re.compile(r'/\*$')

def is_route_path(path):
    return (
        path.startswith('/')
        and PARAM_MARKER in path
        and not any(s in path for s in FORBIDDEN_SUBSTRINGS)
        and MIN_PATH_LENGTH < len(path) < MAX_PATH_LENGTH
        and PARAM_NAME_RE.search(path) is not None
    )

def extract_paths(content):
    """Return the unique parameterized route templates quoted in content."""
    paths = set()
    for match in PATH_RE.finditer(content):
        path = match.group(2)
        if is_route_path(path):
            paths.add(TRAILING_WILDCARD_RE.sub('/*', path))
    return list(paths)

def extract_from_files(js_files, logger):
    all_paths = set()
    with tqdm(total=len(js_files), desc="Extracting paths", unit="file", disable=logger.quiet) as pbar:
        for js_file in js_files:
            try:
                with open(js_file, 'r', encoding=CONFIG['encoding'], errors='replace') as f:
                    content = f.read()
            except OSError as e:
                logger.log('ERROR', f"Error reading {js_file}: {e}")
                pbar.update(1)
                continue
            paths = extract_paths(content)
            if paths:
                logger.log('INFO', f"Found {len(paths)} path(s) in {Path(js_file).name}")
                all_paths.update(paths)
            else:
                logger.log('DEBUG', f"No paths in {js_file}")
            pbar.update(1)
    return all_paths

def run(args, config, logger):
    """Extraction mode: JS directory -> paths.txt and CSPT_magun4.txt."""
    logger.log('INFO', f"Scanning JS files in: {args.js}")
    logger.log('INFO', f"Domain: {args.domain}")

    js_files = collect_js_files(args.js, logger, config['js_extension'])
    logger.log('INFO', f"Found {len(js_files)} JS file(s)")

    all_paths = extract_from_files(js_files, logger)
    if not all_paths:
        logger.log('INFO', "No paths with parameters found!")
        return 0

    paths = sorted(all_paths)
    paths_file = output_path('paths')
    urls = build_urls(paths, args.domain)
    urls_file = output_path('cspt_urls')
    try:
        write_lines(paths_file, paths)
        logger.log('SUCCESS', f"Created {paths_file} with {len(paths)} path(s)")
        write_lines(urls_file, urls)
        logger.log('SUCCESS', f"Created {urls_file} with {len(urls)} URL(s)")
    except OSError as e:
        logger.log('ERROR', f"Failed to write output: {e}")
        return 1
    logger.log('SUCCESS', "Done!")
    return 0
