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

import re
from typing import Any

from typing_extensions import Self, override

from urlform.scalars.scalar_codec import ScalarCodec, TypeToScalarMap
from urlform.utils.result import Err, Ok, Result

# no sign other than `-`, no whitespace and no digit separators
_INT_RE = re.compile(r'-?[0-9]+')


class IntScalar(ScalarCodec[int]):
    """ Represents builtin `int` values as decimal text.

    >>> IntScalar().parse('-42')
    Ok(-42)
    >>> IntScalar().parse('4_2')
    Err("could not parse int: '4_2'")
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, scalars_map: TypeToScalarMap) -> Self:
        if type_ is not int:
            raise TypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /) -> None:
        # XXX: bool is a subclass of int, but it has its own codec
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected int type')

    @override
    def _render(self, value: int, /) -> str:
        return str(value)

    @override
    def _parse(self, text: str, /) -> Result[int, str]:
        if _INT_RE.fullmatch(text) is None:
            return Err(f'could not parse int: {text!r}')
        try:
            return Ok(int(text))
        except ValueError as e:
            # too many digits
            return Err(f'could not parse int: {e}')
