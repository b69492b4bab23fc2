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

from collections.abc import Iterator
from dataclasses import MISSING, fields, is_dataclass
from typing import Any, get_type_hints

from typing_extensions import override

from urlform.form_types.product_form_type import ProductFormType


class DataclassFormType(ProductFormType[Any]):
    """ Records declared as dataclasses.

    Fields declared with `init=False` are not part of the form, since they can't be given to the constructor.

    >>> from dataclasses import dataclass
    >>> from urlform.form import Form
    >>> from urlform.form_types import make_form_type
    >>> @dataclass
    ... class Person:
    ...     name: str
    ...     age: int
    >>> form_type = make_form_type(Person)
    >>> form_type.to_form(Person(name='Dennis', age=22))
    Form([('age', '22'), ('name', 'Dennis')])
    >>> form_type.from_form(Form([('name', 'Dennis')]))
    Err('Could not find key "age"')
    """

    __slots__ = ()

    @override
    @classmethod
    def _iter_fields(cls, type_: Any, /) -> Iterator[tuple[str, Any, bool]]:
        if not isinstance(type_, type) or not is_dataclass(type_):
            raise TypeError('expected a dataclass')
        # string annotations (from `from __future__ import annotations`) are resolved here
        type_hints = get_type_hints(type_)
        for field in fields(type_):
            if not field.init:
                continue
            has_default = field.default is not MISSING or field.default_factory is not MISSING
            yield field.name, type_hints[field.name], has_default
