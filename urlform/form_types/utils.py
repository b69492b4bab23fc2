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

from dataclasses import is_dataclass
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, Union, get_args, get_origin

from pydantic import BaseModel

if TYPE_CHECKING:
    from urlform.form_types.form_type import FormType


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(int)
    'int'
    >>> pretty_type(int | None)
    'int | None'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif is_union_type(type_):
        return ' | '.join(pretty_type(arg) for arg in get_args(type_))
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', str(type_))


def is_union_type(type_: Any) -> bool:
    """ Whether the type is `A | B` or `typing.Union[A, B]`.

    >>> is_union_type(int | str)
    True
    >>> is_union_type(int)
    False
    """
    return get_origin(type_) in (Union, UnionType)


def is_namedtuple_class(type_: Any) -> bool:
    """ Whether the type is a class created with `typing.NamedTuple` (or `collections.namedtuple`).
    """
    return isinstance(type_, type) and issubclass(type_, tuple) and hasattr(type_, '_fields')


def is_pydantic_model_class(type_: Any) -> bool:
    return isinstance(type_, type) and issubclass(type_, BaseModel)


def is_form_class(type_: Any) -> bool:
    """ Whether a class converts itself, by implementing `to_form(self)` and a classmethod `from_form(form)`.
    """
    return (
        isinstance(type_, type)
        and callable(getattr(type_, 'to_form', None))
        and callable(getattr(type_, 'from_form', None))
    )


def get_form_type_class(type_: Any, /, *, type_map: 'FormType.TypeMap') -> 'type[FormType]':
    """ Choose the FormType class for a type signature.

    Classes that convert themselves always take precedence over the generic derivation. A `TypeError` is raised if no
    FormType class supports the given type.
    """
    from urlform.form_types.custom_form_type import CustomFormType
    from urlform.form_types.dataclass_form_type import DataclassFormType
    from urlform.form_types.namedtuple_form_type import NamedTupleFormType
    from urlform.form_types.pydantic_form_type import PydanticFormType
    from urlform.form_types.union_form_type import UnionFormType

    if isinstance(type_, str):
        raise NotImplementedError('string annotations are not currently supported')

    if is_union_type(type_):
        return UnionFormType

    if is_form_class(type_):
        return CustomFormType

    # if we have a `dict[str, str]` we use `get_origin()` to get the `dict` part, since it's a different instance
    origin_type = get_origin(type_) or type_
    if origin_type in type_map.form_types_map:
        return type_map.form_types_map[origin_type]

    if is_dataclass(type_) and isinstance(type_, type):
        return DataclassFormType

    if is_namedtuple_class(type_):
        return NamedTupleFormType

    if is_pydantic_model_class(type_):
        return PydanticFormType

    raise TypeError(f'type {pretty_type(type_)} is not supported by any FormType class')
