class MalformedEscapeError(ValueError):
    '''A percent sign not followed by two hexadecimal digits.'''

    def __init__(self, sequence: str):
        super().__init__(f'invalid URL encoding: not a valid digit in {sequence!r}')
        self.sequence = sequence

class UnsupportedCharsetError(BaseException):
    '''
    The named charset is not available, or names a codec that is not a text encoding.
    This indicates a misconfigured deployment rather than bad input.
    It is not an Exception subclass so that ordinary handlers let it through.
    Do not catch it with `except BaseException` either: let it end the program like SystemExit.
    '''

    def __init__(self, charset: str):
        super().__init__(f'unsupported charset: {charset}')
        self.charset = charset

class ConfigurationError(Exception):
    '''Settings could not be loaded.'''
