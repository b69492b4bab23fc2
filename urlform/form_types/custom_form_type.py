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

from typing import Any

from typing_extensions import Self, override

from urlform.form import Form
from urlform.form_types.form_type import FormType
from urlform.form_types.utils import is_form_class
from urlform.utils.result import Err, OkErr, Result


class CustomFormType(FormType[Any]):
    """ Used for classes that implement the conversion themselves instead of relying on the generic derivation.

    The class must implement `to_form(self) -> Form` and a classmethod `from_form(cls, form) -> Result[Self, str]`:

    >>> from urlform.utils.result import Ok
    >>> class Flag:
    ...     def __init__(self, name: str) -> None:
    ...         self.name = name
    ...     def to_form(self) -> Form:
    ...         return Form([(self.name, '')])
    ...     @classmethod
    ...     def from_form(cls, form: Form) -> 'Result[Flag, str]':
    ...         return Ok(cls(next(iter(form))))
    >>> form_type = CustomFormType(Flag)
    >>> form_type.to_form(Flag('is_test'))
    Form([('is_test', '')])
    >>> form_type.from_form(Form([('debug', '')])).unwrap().name
    'debug'
    """

    __slots__ = ('_class',)

    _class: type

    def __init__(self, class_: type) -> None:
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: FormType.TypeMap) -> Self:
        if not is_form_class(type_):
            raise TypeError('expected a class with `to_form` and `from_form`')
        return cls(type_)

    @override
    def _check_value(self, value: Any, /) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__name__} instance')

    @override
    def _to_form(self, value: Any, /) -> Form:
        form = value.to_form()
        if not isinstance(form, Form):
            raise TypeError(f'{self._class.__name__}.to_form must return a Form')
        return form

    @override
    def _from_form(self, form: Form, /) -> Result[Any, str]:
        result = self._class.from_form(form)  # type: ignore[attr-defined]
        if not isinstance(result, OkErr):
            return Err(f'{self._class.__name__}.from_form did not return a Result')
        return result
