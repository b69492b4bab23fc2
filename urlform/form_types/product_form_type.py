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

from abc import abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from typing_extensions import Self, override

from urlform.form import Form
from urlform.form_types.field import FormField
from urlform.form_types.form_type import FormType
from urlform.utils.result import Ok, Result, propagate_result

R = TypeVar('R')


class ProductFormType(FormType[R]):
    """ Base class for records, values made of named fields that are each converted with a scalar codec.

    Each field is a single key in the form. Converting to a form combines the singleton form of each field in the
    declared order, when two fields share a key the later one wins. Converting from a form reads every field from the
    same whole form and stops at the first field that fails.
    """

    __slots__ = ('_class', '_fields')

    _class: type[R]
    _fields: tuple[FormField, ...]

    def __init__(self, class_: type[R], fields_: Iterable[FormField]) -> None:
        self._class = class_
        self._fields = tuple(fields_)

    @property
    def fields(self) -> tuple[FormField, ...]:
        return self._fields

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: FormType.TypeMap) -> Self:
        # XXX: the order is important, the declaration order of the fields is kept
        fields_ = [
            FormField.create(name, field_type, has_default=has_default, scalars_map=type_map.scalars_map)
            for name, field_type, has_default in cls._iter_fields(type_)
        ]
        return cls(type_, fields_)

    @classmethod
    @abstractmethod
    def _iter_fields(cls, type_: Any, /) -> Iterator[tuple[str, Any, bool]]:
        """ Yield `(name, type, has_default)` for each field that is given to the constructor, in declared order.

        Implementations raise a `TypeError` if the given type is not supported.
        """
        raise NotImplementedError

    @override
    def _check_value(self, value: R, /) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__name__} instance')

    @override
    def _to_form(self, value: R, /) -> Form:
        return Form.combine(*(field.to_form(getattr(value, field.name)) for field in self._fields))

    @override
    @propagate_result
    def _from_form(self, form: Form, /) -> Result[R, str]:
        kwargs: dict[str, Any] = {}
        for field in self._fields:
            if field.name in form:
                kwargs[field.name] = field.from_form(form).unwrap_or_propagate()
            elif field.has_default:
                # the constructor fills it in
                continue
            else:
                kwargs[field.name] = field.value_when_missing().unwrap_or_propagate()
        return self._build(kwargs)

    def _build(self, kwargs: dict[str, Any]) -> Result[R, str]:
        """ Create the record from the parsed fields."""
        return Ok(self._class(**kwargs))
