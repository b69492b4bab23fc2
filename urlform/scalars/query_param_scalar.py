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

from typing import Any, TypeVar

from typing_extensions import Self, override

from urlform.scalars.scalar_codec import ScalarCodec, TypeToScalarMap, is_query_param_class
from urlform.utils.result import Err, OkErr, Result

Q = TypeVar('Q')


class QueryParamScalar(ScalarCodec[Q]):
    """ Delegates to a class that knows how to convert its own instances.

    The class must implement `to_query_param(self) -> str` and a classmethod `parse_query_param(text) -> Result`:

    >>> from urlform.utils.result import Ok
    >>> class Cents:
    ...     def __init__(self, amount: int) -> None:
    ...         self.amount = amount
    ...     def to_query_param(self) -> str:
    ...         return f'{self.amount / 100:.2f}'
    ...     @classmethod
    ...     def parse_query_param(cls, text: str) -> 'Result[Cents, str]':
    ...         return Ok(cls(round(float(text) * 100)))
    >>> codec = QueryParamScalar(Cents)
    >>> codec.render(Cents(1250))
    '12.50'
    >>> codec.parse('0.99').unwrap().amount
    99
    """

    __slots__ = ('_class',)

    _class: type[Q]

    def __init__(self, class_: type[Q]) -> None:
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, scalars_map: TypeToScalarMap) -> Self:
        if not is_query_param_class(type_):
            raise TypeError('expected a class with `to_query_param` and `parse_query_param`')
        return cls(type_)

    @override
    def _check_value(self, value: Q, /) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__name__} instance')

    @override
    def _render(self, value: Q, /) -> str:
        text = value.to_query_param()  # type: ignore[attr-defined]
        if not isinstance(text, str):
            raise TypeError(f'{self._class.__name__}.to_query_param must return str')
        return text

    @override
    def _parse(self, text: str, /) -> Result[Q, str]:
        result = self._class.parse_query_param(text)  # type: ignore[attr-defined]
        if not isinstance(result, OkErr):
            return Err(f'{self._class.__name__}.parse_query_param did not return a Result')
        return result
