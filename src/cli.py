import argparse
import logging
from pathlib import Path
import sys
from typing import NoReturn, Optional

from urlargs.config import Settings, load_settings
from urlargs.errors import ConfigurationError, MalformedEscapeError
from urlargs.percent_code import decode, encode
from urlargs.query import query_string

logger: logging.Logger = logging.getLogger(__name__)

def parse_pair(pair: str) -> tuple[str, str]:
    (name, _, value) = pair.partition('=')
    return (name, value)

def run(args: argparse.Namespace, settings: Settings) -> None:
    charset = args.charset or settings.charset
    logger.debug(f'Charset: {charset}')

    if args.command == 'encode':
        for s in args.strings:
            print(encode(s, charset))
    elif args.command == 'decode':
        for s in args.strings:
            print(decode(s, charset))
    elif args.command == 'query':
        settings = Settings(charset, settings.always_encoded and not args.raw, settings.metadata)
        arguments = [settings.argument(name, value, args.pre_encoded) for (name, value) in map(parse_pair, args.pairs)]
        print(query_string(arguments))
    else:
        raise AssertionError(f'unknown command: {args.command}')

# Command-line interface.
def cli(argv: Optional[list[str]] = None) -> NoReturn:
    parser = argparse.ArgumentParser(
        description = 'Percent-encode and decode HTTP request arguments.',
        add_help = False,
    )
    parser.add_argument('--config', type = Path, metavar = 'FILE', help = '''
INI file with an [arguments] section (keys: charset, always_encoded, metadata).
''')
    parser.add_argument('--charset', type = str, help = '''
Charset for escaping non-ASCII content.
Overrides the configuration file.
Defaults to UTF-8.
''')

    g = parser.add_argument_group(title = 'help and debugging')
    g.add_argument('-h', '--help', action = 'help', help = 'Show this help message and exit.')
    g.add_argument('-v', '--verbose', action = 'count', default = 0, help = '''
Print informational (specify once) or debug (specify twice) messages on stderr.
''')

    commands = parser.add_subparsers(dest = 'command', required = True, metavar = 'COMMAND')
    p = commands.add_parser('encode', help = 'Escape raw strings.')
    p.add_argument('strings', nargs = '+', metavar = 'STRING')
    p = commands.add_parser('decode', help = 'Unescape escaped strings.')
    p.add_argument('strings', nargs = '+', metavar = 'STRING')
    p = commands.add_parser('query', help = 'Assemble a query string from NAME=VALUE pairs.')
    p.add_argument('pairs', nargs = '*', metavar = 'NAME=VALUE')
    p.add_argument('--pre-encoded', action = 'store_true', help = 'The pairs are already escaped.')
    p.add_argument('--raw', action = 'store_true', help = 'Write names and values without escaping them.')

    # Parse arguments.
    args = parser.parse_args(argv)

    # Configure logging.
    logging.basicConfig()
    logging.getLogger('urlargs').setLevel({
        0: logging.WARNING,
        1: logging.INFO,
    }.get(args.verbose, logging.DEBUG))

    try:
        settings = load_settings(args.config)
        run(args, settings)
    except (ConfigurationError, MalformedEscapeError) as e:
        logger.error(e)
        sys.exit(1)
    sys.exit(0)
