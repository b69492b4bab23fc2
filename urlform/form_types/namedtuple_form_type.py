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
from typing import Any, get_type_hints

from typing_extensions import override

from urlform.form_types.product_form_type import ProductFormType
from urlform.form_types.utils import is_namedtuple_class


class NamedTupleFormType(ProductFormType[Any]):
    """ Records declared with `typing.NamedTuple`, fields are converted by name, not by position.
    """

    __slots__ = ()

    @override
    @classmethod
    def _iter_fields(cls, type_: Any, /) -> Iterator[tuple[str, Any, bool]]:
        if not is_namedtuple_class(type_):
            raise TypeError('expected NamedTuple type')
        type_hints = get_type_hints(type_)
        defaults = getattr(type_, '_field_defaults', {})
        for field_name in type_._fields:
            if field_name not in type_hints:
                # collections.namedtuple has no annotations
                raise TypeError(f'field {field_name!r} of {type_.__name__} has no type annotation')
            yield field_name, type_hints[field_name], field_name in defaults
