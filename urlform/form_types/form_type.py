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
from typing import Any, Generic, NamedTuple, TypeAlias, TypeVar, final

from structlog import get_logger
from typing_extensions import Self

from urlform.form import Form
from urlform.scalars import TypeToScalarMap
from urlform.utils.result import Result

logger = get_logger()

T = TypeVar('T')

TypeToFormTypeMap: TypeAlias = Mapping[Any, type['FormType']]


class FormType(ABC, Generic[T]):
    """ This class models how values of a type are converted to and from a `Form`.

    An instance is built once per type from its annotations (see `FormType.from_type`) and then used for every value,
    it holds everything that is needed to do the conversion: for records, the ordered field descriptors with the codec
    of each field; for unions of records, the ordered alternatives.

    Converting a well typed value to a form never fails, a value of an unexpected type raises a `TypeError`.
    Converting a form to a value returns an `Err` with a message on the first failure.
    """

    class TypeMap(NamedTuple):
        form_types_map: TypeToFormTypeMap
        scalars_map: TypeToScalarMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    @staticmethod
    def from_type(type_: Any, /, *, type_map: TypeMap) -> FormType:
        """ Instantiate a FormType instance from a type signature using the given maps.

        The `form_types_map` associates concrete types to FormType classes for types that aren't records, records
        (dataclasses, NamedTuples and pydantic models), unions of records and classes that implement `to_form` and
        `from_form` themselves are recognized without being listed. The `scalars_map` is used for the fields of
        records.
        """
        from urlform.form_types.utils import get_form_type_class, pretty_type
        form_type_class = get_form_type_class(type_, type_map=type_map)
        form_type = form_type_class._from_type(type_, type_map=type_map)
        logger.debug('form type built', type=pretty_type(type_), form_type=form_type_class.__name__)
        return form_type

    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeMap) -> Self:
        """ Instantiate a FormType instance from a type signature.

        The implementation is expected to inspect the given type to check for compatibility and to build the codecs it
        needs with the given `type_map`.
        """
        raise TypeError(f'{cls} is not compatible with use in a FormType.TypeMap')

    @final
    def to_form(self, value: T, /) -> Form:
        """ Convert a value to a `Form`, a value of an incompatible type raises a `TypeError`.
        """
        # XXX: subclasses must implement FormType._to_form, not FormType.to_form
        self._check_value(value)
        return self._to_form(value)

    @final
    def from_form(self, form: Form, /) -> Result[T, str]:
        """ Reconstruct a value from a `Form`, on failure an `Err` with a description is returned.

        Nothing is partially built, either the whole value is reconstructed or an error is returned.
        """
        # XXX: subclasses must implement FormType._from_form, not FormType.from_form
        if not isinstance(form, Form):
            raise TypeError('expected a Form')
        return self._from_form(form)

    @abstractmethod
    def _check_value(self, value: T, /) -> None:
        """ Inner implementation of the type check made by `to_form`, raises a `TypeError`."""
        raise NotImplementedError

    @abstractmethod
    def _to_form(self, value: T, /) -> Form:
        raise NotImplementedError

    @abstractmethod
    def _from_form(self, form: Form, /) -> Result[T, str]:
        raise NotImplementedError
