import argparse
import sys
from .utils import CONFIG
from .logger import Logger
from . import extract, canonicalize

USAGE = """Usage: cspt -js <js_files_directory> -d <domain>
       cspt -urls <file_with_urls>
Examples:
  cspt -js ./JS_files -d https://example.com
  cspt -urls Waymore.txt"""

def build_parser():
    parser = argparse.ArgumentParser(
        prog='cspt',
        description="Generate CSPT test URLs from JS route templates or URL lists",
        allow_abbrev=False,
        add_help=False,
    )
    # A flag given without a value is treated as absent
    parser.add_argument('-js', dest='js', nargs='?', help='Directory of JS files to scan')
    parser.add_argument('-d', dest='domain', nargs='?', help='Domain prepended to extracted paths')
    parser.add_argument('-urls', dest='urls', nargs='?', help='File with URLs whose query values get placeholders')

    # Logging options
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging (debug level)')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress info messages (warning level only)')
    parser.add_argument('--log-file', help='Also write log messages to this file')
    return parser

def main(argv=None):
    parser = build_parser()
    # Unknown flags are ignored
    args, _ = parser.parse_known_args(argv)

    logger = Logger(args.log_file, verbose=args.verbose, quiet=args.quiet)
    try:
        if args.urls:
            status = canonicalize.run(args, CONFIG, logger)
        elif args.js and args.domain:
            status = extract.run(args, CONFIG, logger)
        else:
            print(USAGE)
            return 1
        return status
    finally:
        logger.close()

if __name__ == "__main__":
    sys.exit(main())
