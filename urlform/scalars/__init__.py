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

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, TypeVar
from uuid import UUID

from urlform.scalars.bool_scalar import BoolScalar
from urlform.scalars.datetime_scalar import DateScalar, DateTimeScalar
from urlform.scalars.decimal_scalar import DecimalScalar
from urlform.scalars.enum_scalar import EnumScalar
from urlform.scalars.float_scalar import FloatScalar
from urlform.scalars.int_scalar import IntScalar
from urlform.scalars.optional_scalar import OptionalScalar
from urlform.scalars.query_param_scalar import QueryParamScalar
from urlform.scalars.scalar_codec import ScalarCodec, TypeToScalarMap
from urlform.scalars.str_scalar import StrScalar
from urlform.scalars.uuid_scalar import UUIDScalar

__all__ = [
    'DEFAULT_SCALARS_MAP',
    'BoolScalar',
    'DateScalar',
    'DateTimeScalar',
    'DecimalScalar',
    'EnumScalar',
    'FloatScalar',
    'IntScalar',
    'OptionalScalar',
    'QueryParamScalar',
    'ScalarCodec',
    'StrScalar',
    'TypeToScalarMap',
    'UUIDScalar',
    'make_scalar_codec',
]

T = TypeVar('T')

# Mapping between types and ScalarCodec classes, unions, enums and classes with `to_query_param` are recognized
# without being listed here.
DEFAULT_SCALARS_MAP: TypeToScalarMap = {
    # builtin types:
    bool: BoolScalar,
    float: FloatScalar,
    int: IntScalar,
    str: StrScalar,
    # other Python types:
    Decimal: DecimalScalar,
    UUID: UUIDScalar,
    date: DateScalar,
    datetime: DateTimeScalar,
}


def make_scalar_codec(type_: Any, /, *, extra_scalars_map: Optional[TypeToScalarMap] = None) -> ScalarCodec:
    """ Like ScalarCodec.from_type, but with the default map, optionally extended.
    """
    scalars_map = {**DEFAULT_SCALARS_MAP, **(extra_scalars_map or {})}
    return ScalarCodec.from_type(type_, scalars_map=scalars_map)
