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

from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError
from typing_extensions import override

from urlform.form_types.product_form_type import ProductFormType
from urlform.form_types.utils import is_pydantic_model_class
from urlform.utils.result import Err, Ok, Result


class PydanticFormType(ProductFormType[Any]):
    """ Records declared as pydantic models.

    The declared field names are used as keys, so models with aliases must allow population by name. Each field is
    parsed with its scalar codec and the model's own validation runs when the instance is created, a validation failure
    is reported as an `Err`.
    """

    __slots__ = ()

    @override
    @classmethod
    def _iter_fields(cls, type_: Any, /) -> Iterator[tuple[str, Any, bool]]:
        if not is_pydantic_model_class(type_):
            raise TypeError('expected a pydantic model')
        for field_name, field_info in type_.model_fields.items():
            yield field_name, field_info.annotation, not field_info.is_required()

    @override
    def _build(self, kwargs: dict[str, Any]) -> Result[Any, str]:
        try:
            return Ok(self._class.model_validate(kwargs))  # type: ignore[attr-defined]
        except ValidationError as e:
            return Err(f'invalid {self._class.__name__}: {e}')
