from pathlib import Path
from .utils import CONFIG

def collect_js_files(root, logger, extension=CONFIG['js_extension']):
    """
    Recursively list every file under root whose name ends with the JS extension.

    Symlinked directories are followed and there is no loop protection or
    exclusion list. A missing root is logged and yields an empty list.
    """
    root = Path(root)
    if not root.is_dir():
        logger.log('ERROR', f"Directory {root} does not exist")
        return []
    return _walk(root, extension, logger)

def _walk(directory, extension, logger):
    files = []
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        logger.log('ERROR', f"Cannot list {directory}: {e}")
        return files
    for entry in entries:
        if entry.is_dir():
            files.extend(_walk(entry, extension, logger))
        elif entry.name.endswith(extension):
            files.append(entry)
    return files
