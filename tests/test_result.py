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

import pytest

from urlform.utils.result import Err, Ok, OkErr, Result, UnwrapError, is_err, is_ok, propagate_result


def test_ok() -> None:
    result: Result[int, str] = Ok(1)
    assert result.is_ok() and not result.is_err()
    assert is_ok(result) and not is_err(result)
    assert result.ok() == 1
    assert result.err() is None
    assert result.unwrap() == 1
    assert result.unwrap_or(2) == 1
    assert result.unwrap_or_raise_another(ValueError) == 1
    assert result.map(str) == Ok('1')
    assert result.map_err(str.upper) == Ok(1)
    assert result.and_then(lambda x: Err(f'{x} is odd')) == Err('1 is odd')
    assert result.or_else(lambda e: Ok(0)) == Ok(1)
    with pytest.raises(UnwrapError):
        result.unwrap_err()


def test_err() -> None:
    result: Result[int, str] = Err('boom')
    assert result.is_err() and not result.is_ok()
    assert is_err(result) and not is_ok(result)
    assert result.ok() is None
    assert result.err() == 'boom'
    assert result.unwrap_err() == 'boom'
    assert result.unwrap_or(2) == 2
    assert result.map(str) == Err('boom')
    assert result.map_err(str.upper) == Err('BOOM')
    assert result.and_then(lambda x: Ok(x + 1)) == Err('boom')
    assert result.or_else(lambda e: Ok(len(e))) == Ok(4)
    with pytest.raises(UnwrapError) as exc_info:
        result.unwrap()
    assert exc_info.value.result is result
    with pytest.raises(ValueError, match='boom'):
        result.unwrap_or_raise_another(ValueError)


def test_equality_and_matching() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
    assert hash(Ok('a')) == hash(Ok('a'))
    assert isinstance(Err('x'), OkErr)
    assert repr(Ok('a')) == "Ok('a')"
    assert repr(Err('a')) == "Err('a')"

    match Ok(3):
        case Ok(value):
            assert value == 3
        case Err():
            pytest.fail('unreachable')


def test_propagate_result() -> None:
    calls = []

    def step(result: Result[int, str]) -> Result[int, str]:
        calls.append(result)
        return result

    @propagate_result
    def pipeline(*results: Result[int, str]) -> Result[int, str]:
        return Ok(sum(step(result).unwrap_or_propagate() for result in results))

    assert pipeline(Ok(1), Ok(2)) == Ok(3)
    calls.clear()
    assert pipeline(Ok(1), Err('second'), Err('third')) == Err('second')
    # stops at the first error
    assert calls == [Ok(1), Err('second')]


def test_propagate_without_decorator() -> None:
    with pytest.raises(Exception, match='propagate_result'):
        Err('boom').unwrap_or_propagate()
