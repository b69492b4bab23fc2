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

from decimal import Decimal, InvalidOperation
from typing import Any

from typing_extensions import Self, override

from urlform.scalars.scalar_codec import ScalarCodec, TypeToScalarMap, has_number_padding
from urlform.utils.result import Err, Ok, Result


class DecimalScalar(ScalarCodec[Decimal]):
    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, scalars_map: TypeToScalarMap) -> Self:
        if type_ is not Decimal:
            raise TypeError('expected Decimal type')
        return cls()

    @override
    def _check_value(self, value: Decimal, /) -> None:
        if not isinstance(value, Decimal):
            raise TypeError('expected Decimal type')

    @override
    def _render(self, value: Decimal, /) -> str:
        return str(value)

    @override
    def _parse(self, text: str, /) -> Result[Decimal, str]:
        if has_number_padding(text):
            return Err(f'could not parse decimal: {text!r}')
        try:
            return Ok(Decimal(text))
        except InvalidOperation:
            return Err(f'could not parse decimal: {text!r}')
