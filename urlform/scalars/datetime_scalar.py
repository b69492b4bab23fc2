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

from datetime import date, datetime
from typing import Any

from typing_extensions import Self, override

from urlform.scalars.scalar_codec import ScalarCodec, TypeToScalarMap
from urlform.utils.result import Err, Ok, Result


class DateScalar(ScalarCodec[date]):
    """ Represents `datetime.date` values in ISO 8601 format, `YYYY-MM-DD`.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, scalars_map: TypeToScalarMap) -> Self:
        if type_ is not date:
            raise TypeError('expected date type')
        return cls()

    @override
    def _check_value(self, value: date, /) -> None:
        # XXX: datetime is a subclass of date, but rendering it as a date would silently drop the time
        if not isinstance(value, date) or isinstance(value, datetime):
            raise TypeError('expected date type')

    @override
    def _render(self, value: date, /) -> str:
        return value.isoformat()

    @override
    def _parse(self, text: str, /) -> Result[date, str]:
        try:
            return Ok(date.fromisoformat(text))
        except ValueError:
            return Err(f'could not parse date: {text!r}')


class DateTimeScalar(ScalarCodec[datetime]):
    """ Represents `datetime.datetime` values in ISO 8601 format, the timezone offset is kept when there is one.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, scalars_map: TypeToScalarMap) -> Self:
        if type_ is not datetime:
            raise TypeError('expected datetime type')
        return cls()

    @override
    def _check_value(self, value: datetime, /) -> None:
        if not isinstance(value, datetime):
            raise TypeError('expected datetime type')

    @override
    def _render(self, value: datetime, /) -> str:
        return value.isoformat()

    @override
    def _parse(self, text: str, /) -> Result[datetime, str]:
        try:
            return Ok(datetime.fromisoformat(text))
        except ValueError:
            return Err(f'could not parse datetime: {text!r}')
