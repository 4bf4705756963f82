import logging
import sys
from pathlib import Path

from tqdm import tqdm

from .utils import ensure_dir

class Colors:
    RED = '\033[0;31m'
    GREEN = '\033[0;32m'
    YELLOW = '\033[1;33m'
    BLUE = '\033[0;34m'
    NC = '\033[0m'

class Logger:
    def __init__(self, log_file=None, verbose: bool = False, quiet: bool = False, color: bool = None):
        # Set log level based on verbosity
        if quiet:
            log_level = logging.WARNING
        elif verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        self.logger = logging.getLogger(__name__)
        self.logger.setLevel(log_level)
        self.logger.propagate = False
        self.handler = None
        if log_file:
            log_file = Path(log_file)
            ensure_dir(str(log_file.parent))
            self.handler = logging.FileHandler(str(log_file), encoding='utf-8')
            self.handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            self.logger.addHandler(self.handler)

        self.verbose = verbose
        self.quiet = quiet
        self.color = sys.stdout.isatty() if color is None else color

    def log(self, level: str, message: str):
        level = level.upper()

        # Skip debug messages if not verbose
        if level == 'DEBUG' and not self.verbose:
            return

        # Skip info messages if quiet mode
        if level in ['INFO', 'SUCCESS'] and self.quiet:
            return

        color_map = {
            'INFO': Colors.BLUE,
            'WARN': Colors.YELLOW,
            'ERROR': Colors.RED,
            'SUCCESS': Colors.GREEN,
            'DEBUG': Colors.NC
        }
        color = color_map.get(level, Colors.NC)
        tag = f"{color}{level}{Colors.NC}" if self.color else level

        # Errors and warnings go to stderr, everything else to stdout
        stream = sys.stderr if level in ['ERROR', 'WARN'] else sys.stdout
        tqdm.write(f"[{tag}] {message}", file=stream)

        if self.handler:
            log_method = getattr(self.logger, {'WARN': 'warning', 'SUCCESS': 'info'}.get(level, level.lower()), self.logger.info)
            log_method(message)

    def close(self):
        if self.handler:
            self.logger.removeHandler(self.handler)
            self.handler.close()
            self.handler = None
