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

import doctest
import importlib

import pytest

MODULES_WITH_EXAMPLES = [
    'urlform',
    'urlform.api',
    'urlform.encoding',
    'urlform.form',
    'urlform.form_types.custom_form_type',
    'urlform.form_types.dataclass_form_type',
    'urlform.form_types.utils',
    'urlform.scalars.enum_scalar',
    'urlform.scalars.int_scalar',
    'urlform.scalars.query_param_scalar',
    'urlform.scalars.scalar_codec',
    'urlform.utils.result',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_EXAMPLES)
def test_docstring_examples(module_name) -> None:
    module = importlib.import_module(module_name)
    failures, tried = doctest.testmod(module)
    assert tried > 0
    assert failures == 0
