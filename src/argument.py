from collections.abc import Iterable
import logging
from typing import Tuple, Union

from urlargs.percent_code import DEFAULT_CHARSET, decode, encode, lookup_charset

logger: logging.Logger = logging.getLogger(__name__)

class Argument:
    '''
    A name/value parameter of an HTTP request (query string or form body).

    The name and value are always stored raw (decoded).
    The escaped forms are computed on every read:
    through the percent codec if always_encoded is set, otherwise the raw strings are returned verbatim.

    Attributes:
    * metadata: separator written between encoded name and value (usually '=').
    * use_equals: if unset, the separator is left out for an empty value.
    * always_encoded: the encoding policy, may be changed at any time.
    '''

    def __init__(
        self,
        name: str,
        value: str,
        metadata: str = '=',
        *,
        charset: str = DEFAULT_CHARSET,
        always_encoded: bool = True,
        use_equals: bool = True,
    ):
        lookup_charset(charset)
        self._name = name
        self._value = value
        self._charset = charset
        self.metadata = metadata
        self.always_encoded = always_encoded
        self.use_equals = use_equals

    @classmethod
    def from_raw(cls, name: str, value: str, metadata: str = '=', charset: str = DEFAULT_CHARSET) -> 'Argument':
        return cls(name, value, metadata, charset = charset)

    @classmethod
    def from_encoded(cls, name: str, value: str, metadata: str = '=', charset: str = DEFAULT_CHARSET) -> 'Argument':
        '''
        Construct from an escaped name and value, decoding them once.
        Raises MalformedEscapeError if either is not validly escaped.
        '''
        logger.debug(f'Decoding argument {name!r} in {charset}.')
        return cls(decode(name, charset), decode(value, charset), metadata, charset = charset)

    @classmethod
    def create(
        cls,
        name: str,
        value: str,
        pre_encoded: bool = False,
        charset: str = DEFAULT_CHARSET,
        metadata: str = '=',
    ) -> 'Argument':
        if pre_encoded:
            return cls.from_encoded(name, value, metadata, charset)
        return cls.from_raw(name, value, metadata, charset)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    @property
    def charset(self) -> str:
        return self._charset

    @property
    def encoded_name(self) -> str:
        return encode(self._name, self._charset) if self.always_encoded else self._name

    @property
    def encoded_value(self) -> str:
        return encode(self._value, self._charset) if self.always_encoded else self._value

    def set_always_encoded(self, always_encoded: bool) -> None:
        self.always_encoded = always_encoded

    def is_skippable(self) -> bool:
        '''An argument without name and value is left out of query strings.'''
        return not self._name and not self._value

    def clone(self) -> 'Argument':
        return type(self)(
            self._name,
            self._value,
            self.metadata,
            charset = self._charset,
            always_encoded = self.always_encoded,
            use_equals = self.use_equals,
        )

    __copy__ = clone

    def _key(self) -> Tuple:
        return (self._name, self._value, self.metadata, self._charset, self.always_encoded, self.use_equals)

    def __eq__(self, other):
        if not isinstance(other, Argument):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None

    def __repr__(self) -> str:
        return f'Argument({self._name!r}, {self._value!r}, charset = {self._charset!r}, always_encoded = {self.always_encoded})'

def convert_to_encoded_form(
    arguments: Iterable[Union[Argument, Tuple[str, str]]],
    charset: str = DEFAULT_CHARSET,
) -> list[Argument]:
    '''
    Turn generic (name, value) parameters into HTTP-ready arguments.
    Order is preserved and duplicates are kept.
    Elements that already are arguments are copied, so the input is neither mutated nor aliased.
    '''
    def f(argument: Union[Argument, Tuple[str, str]]) -> Argument:
        if isinstance(argument, Argument):
            return argument.clone()
        (name, value) = argument
        return Argument(name, value, charset = charset)

    return list(map(f, arguments))
