from collections.abc import Iterable
import logging

import requests

from urlargs.argument import Argument
from urlargs.percent_code import DEFAULT_CHARSET

logger: logging.Logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'

def query_string(arguments: Iterable[Argument]) -> str:
    '''
    Join the encoded forms of the given arguments with '&'.
    Each argument is written as its encoded name, metadata and encoded value.
    Arguments without name and value are skipped.
    '''
    def f(argument: Argument) -> str:
        if not argument.value and not argument.use_equals:
            return argument.encoded_name
        return argument.encoded_name + argument.metadata + argument.encoded_value

    return '&'.join(f(argument) for argument in arguments if not argument.is_skippable())

def parse_query_string(query: str, charset: str = DEFAULT_CHARSET) -> list[Argument]:
    '''
    Split an escaped query string into arguments.
    Each part is split at its first '='; a part without one has an empty value and does not use equals.
    Raises MalformedEscapeError for an invalid escape in any part.
    '''
    def f(part: str) -> Argument:
        (name, sep, value) = part.partition('=')
        argument = Argument.from_encoded(name, value, charset = charset)
        argument.use_equals = bool(sep)
        return argument

    arguments = [f(part) for part in query.split('&') if part]
    logger.debug(f'Parsed {len(arguments)} arguments.')
    return arguments

def prepare_request(
    method: str,
    url: str,
    arguments: Iterable[Argument],
    *,
    as_body: bool = False,
) -> requests.PreparedRequest:
    '''
    Prepare (but do not send) a request carrying the given arguments.
    By default they are appended to the query of the URL.
    With as_body, they form a URL-encoded form body instead.
    '''
    query = query_string(arguments)
    logger.debug(f'Query: {query}')
    if as_body:
        request = requests.Request(method, url, data = query, headers = {'Content-Type': FORM_CONTENT_TYPE})
    else:
        if query:
            url = url + ('&' if '?' in url else '?') + query
        request = requests.Request(method, url)
    return request.prepare()
