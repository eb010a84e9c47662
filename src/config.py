import configparser
import logging
from pathlib import Path
from typing import Optional

from urlargs.argument import Argument
from urlargs.errors import ConfigurationError
from urlargs.percent_code import DEFAULT_CHARSET, lookup_charset

logger: logging.Logger = logging.getLogger(__name__)

SECTION = 'arguments'

DEFAULTS: dict[str, str] = {
    'charset': DEFAULT_CHARSET,
    'always_encoded': 'yes',
    'metadata': '=',
}

class Settings:
    '''Argument defaults, passed explicitly to whatever builds arguments.'''

    def __init__(self, charset: str = DEFAULT_CHARSET, always_encoded: bool = True, metadata: str = '='):
        lookup_charset(charset)
        self.charset = charset
        self.always_encoded = always_encoded
        self.metadata = metadata

    def argument(self, name: str, value: str, pre_encoded: bool = False) -> Argument:
        argument = Argument.create(name, value, pre_encoded, charset = self.charset, metadata = self.metadata)
        argument.always_encoded = self.always_encoded
        return argument

    def __repr__(self) -> str:
        return f'Settings(charset = {self.charset!r}, always_encoded = {self.always_encoded}, metadata = {self.metadata!r})'

def load_settings(path: Optional[Path] = None) -> Settings:
    '''
    Load settings from the [arguments] section of an INI file.
    Without a path, the defaults are used.

    Keys:
    * charset: charset for escaping non-ASCII content (default UTF-8).
    * always_encoded: whether arguments escape their name and value on read (default yes).
    * metadata: separator between name and value (default '=').
    '''
    parser = configparser.ConfigParser(defaults = DEFAULTS, interpolation = None)
    if path is not None:
        logger.debug(f'Reading configuration from {path}.')
        try:
            with open(path, encoding = 'utf8') as file:
                parser.read_file(file)
        except OSError as e:
            raise ConfigurationError(f'cannot read configuration file {path}: {e}') from e
        except configparser.Error as e:
            raise ConfigurationError(f'invalid configuration file {path}: {e}') from e

    section = parser[SECTION] if parser.has_section(SECTION) else parser[configparser.DEFAULTSECT]
    try:
        always_encoded = section.getboolean('always_encoded')
    except ValueError as e:
        raise ConfigurationError(f'invalid always_encoded value: {e}') from e

    settings = Settings(section['charset'], always_encoded, section['metadata'])
    logger.info(f'Settings: {settings}')
    return settings
