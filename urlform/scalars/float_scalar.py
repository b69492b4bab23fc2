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

from urlform.scalars.scalar_codec import ScalarCodec, TypeToScalarMap, has_number_padding
from urlform.utils.result import Err, Ok, Result


class FloatScalar(ScalarCodec[float]):
    """ Represents builtin `float` values, `int` values are accepted when rendering.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, scalars_map: TypeToScalarMap) -> Self:
        if type_ is not float:
            raise TypeError('expected float type')
        return cls()

    @override
    def _check_value(self, value: float, /) -> None:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeError('expected float type')

    @override
    def _render(self, value: float, /) -> str:
        return repr(float(value))

    @override
    def _parse(self, text: str, /) -> Result[float, str]:
        if has_number_padding(text):
            return Err(f'could not parse float: {text!r}')
        try:
            return Ok(float(text))
        except ValueError:
            return Err(f'could not parse float: {text!r}')
