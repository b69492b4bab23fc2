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

from types import NoneType
from typing import Any, get_args, get_origin

from structlog import get_logger
from typing_extensions import Self, override

from urlform.form import Form
from urlform.form_types.form_type import FormType
from urlform.form_types.utils import is_union_type, pretty_type
from urlform.utils.result import Err, Result

logger = get_logger()


class UnionFormType(FormType[Any]):
    """ Represents a value that is exactly one of several declared alternatives, written as `A | B | ...`.

    To build a form, the alternative the value is an instance of is used (the first one, if more than one matches). To
    reconstruct a value, the alternatives are tried in the declared order and the first one that succeeds is used, even
    if a later one would also succeed. The errors of the alternatives that failed are discarded, if none succeeds the
    error of the last one is reported.
    """

    __slots__ = ('_type', '_alternatives')

    _type: Any
    _alternatives: tuple[tuple[type, FormType], ...]

    def __init__(self, union_type: Any, alternatives: tuple[tuple[type, FormType], ...]) -> None:
        self._type = union_type
        self._alternatives = alternatives

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: FormType.TypeMap) -> Self:
        if not is_union_type(type_):
            raise TypeError('expected type union')
        args = get_args(type_)
        if NoneType in args:
            raise TypeError('`None` is not a valid alternative, only record fields can be optional')
        alternatives = tuple(
            (get_origin(arg) or arg, FormType.from_type(arg, type_map=type_map))
            for arg in args
        )
        return cls(type_, alternatives)

    @override
    def _check_value(self, value: Any, /) -> None:
        if not isinstance(value, tuple(class_ for class_, _ in self._alternatives)):
            raise TypeError(f'expected an instance of {pretty_type(self._type)}')

    @override
    def _to_form(self, value: Any, /) -> Form:
        for class_, form_type in self._alternatives:
            if isinstance(value, class_):
                return form_type.to_form(value)
        raise AssertionError('unreachable, the value was checked')

    @override
    def _from_form(self, form: Form, /) -> Result[Any, str]:
        last_error: str = 'no alternatives'
        for class_, form_type in self._alternatives:
            result = form_type.from_form(form)
            if result.is_ok():
                return result
            last_error = result.unwrap_err()
            logger.debug('alternative discarded', alternative=pretty_type(class_), error=last_error)
        return Err(f'no alternative of {pretty_type(self._type)} matched: {last_error}')
