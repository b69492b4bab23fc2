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

import shutil
import tempfile
import unittest
from typing import Any

from urlform.conf.get_settings import _reset_settings_singleton
from urlform.utils.result import Result


class TestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdirs: list[str] = []
        _reset_settings_singleton()

    def tearDown(self) -> None:
        self.clean_tmpdirs()
        _reset_settings_singleton()

    def mkdtemp(self) -> str:
        tmpdir = tempfile.mkdtemp()
        self.tmpdirs.append(tmpdir)
        return tmpdir

    def clean_tmpdirs(self) -> None:
        for tmpdir in self.tmpdirs:
            shutil.rmtree(tmpdir)
        self.tmpdirs = []

    def assertOk(self, result: Result[Any, Any], value: Any) -> None:
        """ Assert that the result is an `Ok` holding the given value."""
        self.assertTrue(result.is_ok(), f'expected Ok({value!r}), got {result!r}')
        self.assertEqual(result.unwrap(), value)

    def assertErr(self, result: Result[Any, Any], message: str) -> None:
        """ Assert that the result is an `Err` with exactly the given message."""
        self.assertTrue(result.is_err(), f'expected Err({message!r}), got {result!r}')
        self.assertEqual(result.unwrap_err(), message)
