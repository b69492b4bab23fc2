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

from urlform.scalars.scalar_codec import ScalarCodec, TypeToScalarMap
from urlform.utils.result import Ok, Result


class StrScalar(ScalarCodec[str]):
    """ Represents builtin `str` values, the text is used as is.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, scalars_map: TypeToScalarMap) -> Self:
        if type_ is not str:
            raise TypeError('expected str type')
        return cls()

    @override
    def _check_value(self, value: str, /) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str type')

    @override
    def _render(self, value: str, /) -> str:
        return value

    @override
    def _parse(self, text: str, /) -> Result[str, str]:
        return Ok(text)
