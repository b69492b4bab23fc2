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

from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from types import UnionType
from typing import Any, Generic, TypeAlias, TypeVar, Union, final, get_origin

from typing_extensions import Self

from urlform.utils.result import Result

T = TypeVar('T')

TypeToScalarMap: TypeAlias = Mapping[type, type['ScalarCodec']]


class ScalarCodec(ABC, Generic[T]):
    """ This class models how a single field value is turned into a wire-safe text token and back.

    A codec is built from the field's type annotation, using a map from concrete types to codec classes. Rendering a
    value never fails for a value of the right type, parsing text returns an `Err` with a message when the text is
    malformed.
    """

    __slots__ = ()

    @final
    @staticmethod
    def from_type(type_: Any, /, *, scalars_map: TypeToScalarMap) -> ScalarCodec:
        """ Instantiate a ScalarCodec from a type annotation using the given map.

        A `TypeError` is raised if no codec class supports the given type.
        """
        codec_class = get_scalar_codec_class(type_, scalars_map=scalars_map)
        return codec_class._from_type(type_, scalars_map=scalars_map)

    @classmethod
    def _from_type(cls, type_: Any, /, *, scalars_map: TypeToScalarMap) -> Self:
        """ Instantiate a codec from a type annotation, implementations check that the type is compatible.

        The default implementation is for codecs that take no arguments and support exactly one type.
        """
        raise TypeError(f'{cls} is not compatible with use in a scalars map')

    @final
    def render(self, value: T, /) -> str:
        """ Render a value as text, a value of an incompatible type raises a `TypeError`.
        """
        # XXX: subclasses must implement ScalarCodec._render, not ScalarCodec.render
        self._check_value(value)
        return self._render(value)

    @final
    def parse(self, text: str, /) -> Result[T, str]:
        """ Parse text into a value, malformed text results in an `Err` with a message.
        """
        # XXX: subclasses must implement ScalarCodec._parse, not ScalarCodec.parse
        return self._parse(text)

    @abstractmethod
    def _check_value(self, value: T, /) -> None:
        """ Raise a `TypeError` if the value is not compatible with this codec."""
        raise NotImplementedError

    @abstractmethod
    def _render(self, value: T, /) -> str:
        raise NotImplementedError

    @abstractmethod
    def _parse(self, text: str, /) -> Result[T, str]:
        raise NotImplementedError


def is_query_param_class(type_: Any) -> bool:
    """ Whether a class provides its own text conversion through `to_query_param` and `parse_query_param`.
    """
    return (
        isinstance(type_, type)
        and callable(getattr(type_, 'to_query_param', None))
        and callable(getattr(type_, 'parse_query_param', None))
    )


def get_scalar_codec_class(type_: Any, /, *, scalars_map: TypeToScalarMap) -> type[ScalarCodec]:
    """ Choose the codec class for a type annotation.

    Unions (`T | None`), classes with their own query param conversion and enums are recognized first, then the type
    itself is looked up in the map, subclasses of mapped types are not matched.
    """
    from urlform.scalars.enum_scalar import EnumScalar
    from urlform.scalars.optional_scalar import OptionalScalar
    from urlform.scalars.query_param_scalar import QueryParamScalar

    if isinstance(type_, str):
        raise NotImplementedError('string annotations are not currently supported')

    origin = get_origin(type_) or type_
    if origin is UnionType or origin is Union:
        return OptionalScalar

    if is_query_param_class(type_):
        return QueryParamScalar

    if isinstance(type_, type) and issubclass(type_, Enum):
        return EnumScalar

    if type_ in scalars_map:
        return scalars_map[type_]

    raise TypeError(f'type {type_} is not supported by any ScalarCodec class')


def has_number_padding(text: str) -> bool:
    """ Whether numeric text has surrounding whitespace or `_` digit separators.

    Python's own number constructors accept both, but they are not valid in a form value.

    >>> has_number_padding('1_000')
    True
    >>> has_number_padding(' 1.5')
    True
    >>> has_number_padding('-1.5e3')
    False
    """
    return text != text.strip() or '_' in text
