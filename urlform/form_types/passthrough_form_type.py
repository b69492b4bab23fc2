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

"""
FormType classes for types that already are a flat collection of text pairs, they are converted directly without
using any scalar codec.
"""

from __future__ import annotations

from typing import Any, get_args, get_origin

from typing_extensions import Self, override

from urlform.form import Form, Pair
from urlform.form_types.form_type import FormType
from urlform.utils.result import Ok, Result


def _check_str(value: Any) -> None:
    if not isinstance(value, str):
        raise TypeError(f'expected str, got {type(value).__name__}')


class FormFormType(FormType[Form]):
    """ A `Form` converts to itself.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: FormType.TypeMap) -> Self:
        if type_ is not Form:
            raise TypeError('expected Form type')
        return cls()

    @override
    def _check_value(self, value: Form, /) -> None:
        if not isinstance(value, Form):
            raise TypeError('expected Form instance')

    @override
    def _to_form(self, value: Form, /) -> Form:
        return value

    @override
    def _from_form(self, form: Form, /) -> Result[Form, str]:
        return Ok(form)


class DictFormType(FormType[dict[str, str]]):
    """ A `dict[str, str]`, the reconstructed dict has its keys in sorted order.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: FormType.TypeMap) -> Self:
        if (get_origin(type_) or type_) is not dict:
            raise TypeError('expected dict type')
        args = get_args(type_)
        if args and args != (str, str):
            raise TypeError('only `dict[str, str]` can be converted to a form')
        return cls()

    @override
    def _check_value(self, value: dict[str, str], /) -> None:
        if not isinstance(value, dict):
            raise TypeError('expected dict instance')
        for key, item in value.items():
            _check_str(key)
            _check_str(item)

    @override
    def _to_form(self, value: dict[str, str], /) -> Form:
        return Form(value)

    @override
    def _from_form(self, form: Form, /) -> Result[dict[str, str], str]:
        return Ok(dict(form.items()))


class PairsFormType(FormType[list[Pair]]):
    """ A `list[tuple[str, str]]`, later pairs win over earlier ones with the same key.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: FormType.TypeMap) -> Self:
        if (get_origin(type_) or type_) is not list:
            raise TypeError('expected list type')
        args = get_args(type_)
        if args and args != (tuple[str, str],):
            raise TypeError('only `list[tuple[str, str]]` can be converted to a form')
        return cls()

    @override
    def _check_value(self, value: list[Pair], /) -> None:
        if not isinstance(value, list):
            raise TypeError('expected list instance')
        for pair in value:
            if not isinstance(pair, tuple) or len(pair) != 2:
                raise TypeError('expected (key, value) pairs')
            _check_str(pair[0])
            _check_str(pair[1])

    @override
    def _to_form(self, value: list[Pair], /) -> Form:
        return Form.from_pairs(value)

    @override
    def _from_form(self, form: Form, /) -> Result[list[Pair], str]:
        return Ok(form.to_pairs())
