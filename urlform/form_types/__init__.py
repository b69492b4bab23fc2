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

from functools import cache
from typing import Any, Optional, TypeVar

from urlform.form import Form
from urlform.form_types.custom_form_type import CustomFormType
from urlform.form_types.dataclass_form_type import DataclassFormType
from urlform.form_types.field import FormField
from urlform.form_types.form_type import FormType, TypeToFormTypeMap
from urlform.form_types.namedtuple_form_type import NamedTupleFormType
from urlform.form_types.passthrough_form_type import DictFormType, FormFormType, PairsFormType
from urlform.form_types.product_form_type import ProductFormType
from urlform.form_types.pydantic_form_type import PydanticFormType
from urlform.form_types.union_form_type import UnionFormType
from urlform.scalars import DEFAULT_SCALARS_MAP, TypeToScalarMap
from urlform.utils.result import Result

__all__ = [
    'DEFAULT_FORM_TYPES_MAP',
    'CustomFormType',
    'DataclassFormType',
    'DictFormType',
    'FormField',
    'FormFormType',
    'FormType',
    'NamedTupleFormType',
    'PairsFormType',
    'ProductFormType',
    'PydanticFormType',
    'TypeToFormTypeMap',
    'UnionFormType',
    'from_form',
    'make_form_type',
    'to_form',
]

T = TypeVar('T')

# Mapping between types and FormType classes, records and unions of records are recognized without being listed here.
DEFAULT_FORM_TYPES_MAP: TypeToFormTypeMap = {
    Form: FormFormType,
    dict: DictFormType,
    list: PairsFormType,
}

_DEFAULT_TYPE_MAP = FormType.TypeMap(DEFAULT_FORM_TYPES_MAP, DEFAULT_SCALARS_MAP)


@cache
def _make_default_form_type(type_: Any, /) -> FormType:
    return FormType.from_type(type_, type_map=_DEFAULT_TYPE_MAP)


def make_form_type(type_: Any, /, *, extra_scalars_map: Optional[TypeToScalarMap] = None) -> FormType:
    """ Like FormType.from_type, but with the default maps.

    With the default maps the result is built only once per type and then reused. Passing `extra_scalars_map` adds
    codecs for field types that aren't supported by default, the result is not cached in that case.
    """
    if extra_scalars_map is None:
        return _make_default_form_type(type_)
    type_map = FormType.TypeMap(DEFAULT_FORM_TYPES_MAP, {**DEFAULT_SCALARS_MAP, **extra_scalars_map})
    return FormType.from_type(type_, type_map=type_map)


def to_form(value: Any, /) -> Form:
    """ Convert a value to a `Form` using the FormType of its class.
    """
    return make_form_type(type(value)).to_form(value)


def from_form(type_: type[T], form: Form, /) -> Result[T, str]:
    """ Reconstruct a value of the given type (or union of types) from a `Form`.
    """
    return make_form_type(type_).from_form(form)
