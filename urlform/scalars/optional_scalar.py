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

from types import NoneType, UnionType
from typing import Any, TypeVar, Union, get_args, get_origin

from typing_extensions import Self, override

from urlform.scalars.scalar_codec import ScalarCodec, TypeToScalarMap
from urlform.utils.result import Ok, Result

V = TypeVar('V')


class OptionalScalar(ScalarCodec[V | None]):
    """ Represents a value that is either `V` or `None`.

    `None` is rendered as the empty text and the empty text is parsed as `None`, which means that for `str | None` an
    empty string can't be told apart from `None`.
    """

    __slots__ = ('_value',)

    _value: ScalarCodec[V]

    def __init__(self, codec: ScalarCodec[V]) -> None:
        self._value = codec

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, scalars_map: TypeToScalarMap) -> Self:
        if get_origin(type_) not in (Union, UnionType):
            raise TypeError('expected type union')
        args = get_args(type_)
        assert args, 'union always has args'
        if len(args) != 2 or NoneType not in args:
            raise TypeError('type must be either `None | T` or `T | None`')
        not_none_type, = tuple(arg for arg in args if arg is not NoneType)
        return cls(ScalarCodec.from_type(not_none_type, scalars_map=scalars_map))

    @override
    def _check_value(self, value: V | None, /) -> None:
        if value is None:
            return
        self._value._check_value(value)

    @override
    def _render(self, value: V | None, /) -> str:
        if value is None:
            return ''
        return self._value._render(value)

    @override
    def _parse(self, text: str, /) -> Result[V | None, str]:
        if not text:
            return Ok(None)
        return self._value.parse(text)
