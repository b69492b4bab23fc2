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

"""
Encoding and decoding of `application/x-www-form-urlencoded` data, with conversions derived from record types.

>>> from dataclasses import dataclass
>>> @dataclass
... class Person:
...     name: str
...     age: int
>>> encode_as_form(Person(name='Andres Löh', age=22))
b'age=22&name=Andres%20L%C3%B6h'
"""

from urlform.api import decode_as_form, encode_as_form
from urlform.encoding import decode_form, encode_form
from urlform.form import Form
from urlform.form_types import from_form, make_form_type, to_form
from urlform.utils.result import Err, Ok, Result
from urlform.version import __version__

__all__ = [
    'Err',
    'Form',
    'Ok',
    'Result',
    'decode_as_form',
    'decode_form',
    'encode_as_form',
    'encode_form',
    'from_form',
    'make_form_type',
    'to_form',
    '__version__',
]
