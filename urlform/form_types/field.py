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

from typing import Any, NamedTuple

from urlform.form import Form
from urlform.form_types.utils import is_union_type
from urlform.scalars import ScalarCodec, TypeToScalarMap
from urlform.utils.result import Err, Ok, Result


class FormField(NamedTuple):
    """ Describes a single record field: its declared name, which is also the form key, and how to convert its value.
    """
    name: str
    codec: ScalarCodec
    has_default: bool
    is_optional: bool

    @classmethod
    def create(cls, name: str, type_: Any, *, has_default: bool, scalars_map: TypeToScalarMap) -> FormField:
        codec = ScalarCodec.from_type(type_, scalars_map=scalars_map)
        return cls(name=name, codec=codec, has_default=has_default, is_optional=is_union_type(type_))

    def to_form(self, value: Any) -> Form:
        """ Singleton form with this field's key and the rendered value.
        """
        return Form({self.name: self.codec.render(value)})

    def from_form(self, form: Form) -> Result[Any, str]:
        """ Look up this field's key and parse its value.

        Callers are expected to deal with missing keys of fields that have a default value or are optional before
        calling this.
        """
        text = form.get(self.name)
        if text is None:
            return Err(f'Could not find key "{self.name}"')
        return self.codec.parse(text).map_err(lambda message: f'could not parse key "{self.name}": {message}')

    def value_when_missing(self) -> Result[Any, str]:
        """ `Ok(None)` for optional fields without a default, `Err` for required fields.
        """
        if self.is_optional:
            return Ok(None)
        return Err(f'Could not find key "{self.name}"')
