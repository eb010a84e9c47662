from urlargs.argument import Argument, convert_to_encoded_form
from urlargs.errors import ConfigurationError, MalformedEscapeError, UnsupportedCharsetError
from urlargs.percent_code import DEFAULT_CHARSET, decode, encode
