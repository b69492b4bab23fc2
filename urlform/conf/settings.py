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

from pathlib import Path
from typing import Optional, Union

from pydantic import field_validator

from urlform.utils import pydantic
from urlform.utils.yaml import dict_from_yaml


class UrlFormSettings(pydantic.BaseModel):
    # Maximum length in bytes of an encoded form accepted when decoding, `None` means no limit.
    MAX_FORM_BYTES: Optional[int] = None

    # Maximum number of `&`-separated tokens accepted when decoding, `None` means no limit.
    MAX_FORM_PAIRS: Optional[int] = None

    @field_validator('MAX_FORM_BYTES', 'MAX_FORM_PAIRS')
    @classmethod
    def _validate_limit(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError('limit must be a non-negative integer or null')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'UrlFormSettings':
        """Takes a filepath to a yaml file and returns a validated UrlFormSettings instance."""
        settings_dict = dict_from_yaml(filepath=filepath)
        return cls(**settings_dict)
