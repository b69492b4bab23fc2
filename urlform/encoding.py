#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

r"""
This module implements the `application/x-www-form-urlencoded` wire format for a `Form`.

Key-value pairs get encoded to `key=value` and separated by `&`, always in sorted-key order:

>>> encode_form(Form([('name', 'Julian'), ('lastname', 'Arni')]))
b'lastname=Arni&name=Julian'

Keys with empty values get encoded to just `key` (without the `=` sign), and empty keys are allowed too:

>>> encode_form(Form([('is_test', '')]))
b'is_test'
>>> encode_form(Form([('', 'foobar')]))
b'=foobar'

However, if both key and value are empty, the pair is ignored. This prevents `decode_form(encode_form(f))` from being
a true isomorphism for that single degenerate pair:

>>> encode_form(Form([('', '')]))
b''

Everything that is not an unreserved character (letters, digits and `-_.~`) is percent-escaped, non-ASCII text is
escaped byte by byte from its UTF-8 representation:

>>> encode_form(Form([('fullname', 'Andres Löh')]))
b'fullname=Andres%20L%C3%B6h'

Decoding reverses it, `+` is also accepted as a space:

>>> decode_form(b'fullname=Andres%20L%C3%B6h&city=Utrecht+NL')
Ok(Form([('city', 'Utrecht NL'), ('fullname', 'Andres Löh')]))
>>> decode_form(b'')
Ok(Form([]))

Improperly formed pairs result in an error:

>>> decode_form(b'this=has=too=many=equals')
Err('not a valid pair: this=has=too=many=equals')
"""

from typing import Optional
from urllib.parse import quote, unquote

from structlog import get_logger

from urlform.form import Form, Pair
from urlform.utils.result import Err, Ok, Result, propagate_result

logger = get_logger()

PAIR_SEPARATOR = b'&'
KEY_VALUE_SEPARATOR = '='


def escape(text: str) -> str:
    """ Percent-escape every character that is not unreserved, using its UTF-8 bytes.

    >>> escape('a b&c=d/é~')
    'a%20b%26c%3Dd%2F%C3%A9~'
    """
    # XXX: lone surrogates have no UTF-8 representation, they are replaced instead of failing the whole encoding
    return quote(text, safe='', encoding='utf-8', errors='replace')


def unescape(text: str) -> str:
    """ Reverse of `escape`, `+` is decoded as a space and malformed UTF-8 is replaced instead of rejected.

    >>> unescape('a+b%20c%3D%C3%A9')
    'a b c=é'
    >>> unescape('100%')
    '100%'
    """
    return unquote(text.replace('+', '%20'), encoding='utf-8', errors='replace')


def encode_pair(key: str, value: str) -> str:
    """ Encode a single pair, an empty value results in the bare escaped key.
    """
    if not value:
        return escape(key)
    return escape(key) + KEY_VALUE_SEPARATOR + escape(value)


def encode_form(form: Form) -> bytes:
    """ Encode a `Form` to `application/x-www-form-urlencoded` bytes.

    This modules's docstring has more details and examples.
    """
    tokens: list[str] = []
    for key, value in form.to_pairs():
        if not key and not value:
            logger.debug('empty form pair dropped')
            continue
        tokens.append(encode_pair(key, value))
    # escaped text is always ASCII
    return PAIR_SEPARATOR.join(token.encode('ascii') for token in tokens)


def parse_pair(token: str) -> Result[Pair, str]:
    """ Parse a single `key=value` token, which has already been decoded from UTF-8 but is still escaped.

    The token is split before unescaping, so an escaped `=` (`%3D`) is data and not a separator.

    >>> parse_pair('is_test')
    Ok(('is_test', ''))
    >>> parse_pair('eq%3D=%3D')
    Ok(('eq=', '='))
    """
    parts = token.split(KEY_VALUE_SEPARATOR)
    match parts:
        case [key, value]:
            return Ok((unescape(key), unescape(value)))
        case [key]:
            return Ok((unescape(key), ''))
        case _:
            logger.debug('invalid form pair', token=token)
            return Err(f'not a valid pair: {token}')


@propagate_result
def decode_form(
    data: bytes,
    /,
    *,
    max_bytes: Optional[int] = None,
    max_pairs: Optional[int] = None,
) -> Result[Form, str]:
    """ Decode `application/x-www-form-urlencoded` bytes to a `Form`.

    Decoding stops at the first invalid pair, no partial form is ever returned. When the optional limits are given,
    inputs that exceed them are rejected before any pair is parsed.

    This modules's docstring has more details and examples.
    """
    data = bytes(data)
    if max_bytes is not None and len(data) > max_bytes:
        return Err(f'form is too long: {len(data)} bytes, the maximum is {max_bytes}')

    if not data:
        return Ok(Form())

    tokens = data.split(PAIR_SEPARATOR)
    if max_pairs is not None and len(tokens) > max_pairs:
        return Err(f'form has too many pairs: {len(tokens)}, the maximum is {max_pairs}')

    pairs = [parse_pair(token.decode('utf-8', errors='replace')).unwrap_or_propagate() for token in tokens]
    return Ok(Form.from_pairs(pairs))
