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

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from typing_extensions import Self, override

from urlform.scalars.scalar_codec import ScalarCodec, TypeToScalarMap
from urlform.utils.result import Err, Ok, Result

E = TypeVar('E', bound=Enum)


class EnumScalar(ScalarCodec[E]):
    """ Represents members of an `Enum` subclass by the text of their value.

    >>> from enum import IntEnum
    >>> class Color(IntEnum):
    ...     RED = 1
    ...     BLUE = 2
    >>> codec = EnumScalar(Color)
    >>> codec.render(Color.BLUE)
    '2'
    >>> codec.parse('1')
    Ok(<Color.RED: 1>)
    """

    __slots__ = ('_enum_class', '_members')

    _enum_class: type[E]
    _members: dict[str, E]

    def __init__(self, enum_class: type[E]) -> None:
        self._enum_class = enum_class
        # XXX: aliases share a value, so they are mapped to their canonical member
        self._members = {str(member.value): member for member in enum_class}

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, scalars_map: TypeToScalarMap) -> Self:
        if not isinstance(type_, type) or not issubclass(type_, Enum):
            raise TypeError('expected Enum subclass')
        return cls(type_)

    @override
    def _check_value(self, value: E, /) -> None:
        if not isinstance(value, self._enum_class):
            raise TypeError(f'expected {self._enum_class.__name__}')

    @override
    def _render(self, value: E, /) -> str:
        return str(value.value)

    @override
    def _parse(self, text: str, /) -> Result[E, str]:
        member = self._members.get(text)
        if member is None:
            return Err(f'invalid {self._enum_class.__name__} value: {text!r}')
        return Ok(member)
