import codecs
from collections.abc import Iterable
import functools
import itertools
import logging
import re
from typing import Optional

from urlargs.errors import MalformedEscapeError, UnsupportedCharsetError

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_CHARSET: str = 'UTF-8'

# Bytes left alone in form encoding.
UNRESERVED: bytes = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.*'

HEX_DIGITS = frozenset(b'0123456789ABCDEFabcdef')

class PercentCode:
    '''
    Percent coding operating on bytes.
    Bytes outside the unreserved set are written as the special byte followed by two uppercase hex digits.
    If a space byte is given, the space character is coded as that byte instead.
    '''

    def __init__(
        self,
        *,
        special: int = ord('%'),
        space: Optional[int] = ord('+'),
        unreserved: Iterable[int] = UNRESERVED,
    ):
        self.special = special
        self.space = space
        self.unreserved = frozenset(unreserved)

    def escape_iterable(self, it: Iterable[int]) -> Iterable[int]:
        '''Escape every byte, reserved or not.'''
        for x in it:
            yield self.special
            yield from f'{x:02X}'.encode()

    def decode_iterable(self, jt: Iterable[int]) -> Iterable[int]:
        jt = iter(jt)
        for b in jt:
            if b == self.special:
                digits = bytes(itertools.islice(jt, 2))
                if not (len(digits) == 2 and HEX_DIGITS.issuperset(digits)):
                    raise MalformedEscapeError((bytes([b]) + digits).decode('ascii', 'replace'))
                yield int(digits, 16)
            elif b == self.space:
                yield ord(' ')
            else:
                yield b

    def encode_iterable(self, it: Iterable[int]) -> Iterable[int]:
        for x in it:
            if x in self.unreserved:
                yield x
            elif x == ord(' ') and self.space is not None:
                yield self.space
            else:
                yield from self.escape_iterable((x,))

    def decode(self, xs: Iterable[int]) -> bytes:
        return bytes(self.decode_iterable(xs))

    def encode(self, xs: Iterable[int]) -> bytes:
        return bytes(self.encode_iterable(xs))

    def escape(self, xs: Iterable[int]) -> bytes:
        return bytes(self.escape_iterable(xs))

# Coding of names and values in application/x-www-form-urlencoded data.
form_code = PercentCode()

# Used by encode: runs of characters passed through (or turned into '+') and runs of characters to escape.
plain_run_regex = re.compile(r'[A-Za-z0-9\-_.* ]+|[^A-Za-z0-9\-_.* ]+')

# Used by decode: runs of ASCII characters, which may contain escapes, and runs of other characters.
ascii_run_regex = re.compile(r'[\x00-\x7f]+|[^\x00-\x7f]+')

# Used by decode for charsets that are not ASCII-compatible: runs of consecutive escapes.
escape_run_regex = re.compile(r'((?:%[0-9A-Fa-f]{2})+)')

ASCII: str = ''.join(map(chr, range(0x80)))

def lookup_charset(charset: str) -> codecs.CodecInfo:
    '''
    Look up a text charset by its IANA or Python name.
    Raises UnsupportedCharsetError if the runtime does not know it
    or if it names a codec that does not convert between text and bytes (such as hex or base64).
    '''
    try:
        info = codecs.lookup(charset)
        ''.encode(info.name)
        b''.decode(info.name)
    except LookupError:
        logger.debug(f'Charset lookup failed: {charset}')
        raise UnsupportedCharsetError(charset) from None
    return info

@functools.lru_cache(maxsize = None)
def ascii_compatible(name: str) -> bool:
    '''Whether the charset writes every ASCII character as the single byte of its code.'''
    try:
        return ASCII.encode(name) == ASCII.encode('ascii')
    except UnicodeEncodeError:
        return False

@functools.lru_cache(maxsize = 1000)
def _encode(raw: str, charset: str) -> str:
    name = lookup_charset(charset).name

    def f(run: str) -> bytes:
        if run[0] in ' *-._' or run[0].isascii() and run[0].isalnum():
            return form_code.encode(run.encode('ascii'))
        # Characters of a run are converted together for multi-byte and stateful charsets.
        return form_code.escape(run.encode(name, 'replace'))

    return b''.join(map(f, plain_run_regex.findall(raw))).decode('ascii')

def encode(raw: str, charset: str = DEFAULT_CHARSET) -> str:
    '''
    Escape a raw name or value for a query string or form body.
    Letters, digits and '-_.*' are kept, space becomes '+'.
    Every other character is converted to bytes in the given charset and each byte written as %XX.
    Characters the charset cannot represent are replaced by its replacement character first.
    '''
    return _encode(raw, charset)

def _decode_escape_runs(escaped: str, name: str) -> Iterable[str]:
    '''
    Decode each run of consecutive escapes as one byte buffer, keeping literal characters.
    Used for charsets such as UTF-16 in which ASCII characters are not single bytes.
    '''
    for (i, piece) in enumerate(escape_run_regex.split(escaped)):
        if i % 2:
            yield form_code.decode(piece.encode('ascii')).decode(name, 'replace')
            continue
        if '%' in piece:
            start = piece.index('%')
            raise MalformedEscapeError(piece[start:start + 3])
        yield piece.replace('+', ' ')

def decode(escaped: str, charset: str = DEFAULT_CHARSET) -> str:
    '''
    Unescape an escaped name or value.
    Escapes and the ASCII characters around them are decoded together as one byte buffer,
    so a multi-byte character may be split between an escape and a literal byte (Shift_JIS '%92l').
    For charsets that are not ASCII-compatible, only the runs of escapes are decoded through the charset.
    Byte sequences invalid in the charset become U+FFFD.
    Non-ASCII characters pass through unchanged.
    Raises MalformedEscapeError on a '%' without two hex digits.
    '''
    name = lookup_charset(charset).name
    if '%' not in escaped and '+' not in escaped:
        return escaped
    if not ascii_compatible(name):
        return ''.join(_decode_escape_runs(escaped, name))

    def f(run: str) -> str:
        if not run.isascii():
            return run
        return form_code.decode(run.encode('ascii')).decode(name, 'replace')

    return ''.join(map(f, ascii_run_regex.findall(escaped)))
