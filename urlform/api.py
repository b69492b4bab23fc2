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

from typing import Any, Optional, TypeVar

from structlog import get_logger

from urlform.conf.get_settings import get_global_settings
from urlform.conf.settings import UrlFormSettings
from urlform.encoding import decode_form, encode_form
from urlform.form_types import from_form, to_form
from urlform.utils.result import Result

logger = get_logger()

T = TypeVar('T')


def decode_as_form(type_: type[T], data: bytes, /, *, settings: Optional[UrlFormSettings] = None) -> Result[T, str]:
    """ Decode `application/x-www-form-urlencoded` bytes directly to a value of the given type.

    This is effectively `from_form(type_, decode_form(data))`, it fails at the first stage that fails. The decoding
    limits come from the given settings, or the global settings when none are given.

    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Person:
    ...     name: str
    ...     age: int
    >>> decode_as_form(Person, b'name=Dennis&age=22')
    Ok(Person(name='Dennis', age=22))
    """
    if settings is None:
        settings = get_global_settings()
    result = decode_form(data, max_bytes=settings.MAX_FORM_BYTES, max_pairs=settings.MAX_FORM_PAIRS)
    result = result.and_then(lambda form: from_form(type_, form))
    if result.is_err():
        logger.debug('form decoding failed', type=getattr(type_, '__name__', str(type_)), error=result.unwrap_err())
    return result


def encode_as_form(value: Any, /) -> bytes:
    """ Encode a value directly to `application/x-www-form-urlencoded` bytes.

    This is effectively `encode_form(to_form(value))`.

    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Person:
    ...     name: str
    ...     age: int
    >>> encode_as_form(Person(name='Dennis', age=22))
    b'age=22&name=Dennis'
    """
    return encode_form(to_form(value))
