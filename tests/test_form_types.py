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

from collections import namedtuple
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional

import pytest
from pydantic import BaseModel, Field
from structlog.testing import capture_logs

from tests import unittest
from urlform.form import Form
from urlform.form_types import (
    CustomFormType,
    DataclassFormType,
    DictFormType,
    FormFormType,
    NamedTupleFormType,
    PairsFormType,
    PydanticFormType,
    UnionFormType,
    from_form,
    make_form_type,
    to_form,
)
from urlform.utils.result import Err, Ok, Result


@dataclass
class Person:
    name: str
    age: int


@dataclass
class Cat:
    name: str
    lives: int


@dataclass
class Dog:
    name: str
    good: bool


@dataclass
class Search:
    q: str
    tag: Optional[str]
    page: int = 1
    lang: str | None = 'en'
    seen: list[str] = field(default_factory=list, init=False)


class Size(Enum):
    SMALL = 's'
    LARGE = 'l'


@dataclass
class Order:
    size: Size
    price: float
    gift: bool = False


class Point(NamedTuple):
    x: int
    y: int = 0


class User(BaseModel):
    name: str
    age: int = Field(default=0, ge=0)


class Flags:
    """ Every key of the form is a flag that is set."""

    def __init__(self, *names: str) -> None:
        self.names = frozenset(names)

    def to_form(self) -> Form:
        return Form((name, '') for name in self.names)

    @classmethod
    def from_form(cls, form: Form) -> Result['Flags', str]:
        if any(form.values()):
            return Err('flags have no values')
        return Ok(cls(*form))


class RecordTest(unittest.TestCase):
    def test_to_form(self) -> None:
        self.assertEqual(to_form(Person(name='Dennis', age=22)), Form([('name', 'Dennis'), ('age', '22')]))

    def test_from_form(self) -> None:
        form = Form([('name', 'Dennis'), ('age', '22')])
        self.assertOk(from_form(Person, form), Person(name='Dennis', age=22))

    def test_extra_keys_are_ignored(self) -> None:
        form = Form([('name', 'Dennis'), ('age', '22'), ('city', 'Utrecht')])
        self.assertOk(from_form(Person, form), Person(name='Dennis', age=22))

    def test_missing_key(self) -> None:
        self.assertErr(from_form(Person, Form([('name', 'Dennis')])), 'Could not find key "age"')
        # fields are read in declared order
        self.assertErr(from_form(Person, Form()), 'Could not find key "name"')

    def test_invalid_value(self) -> None:
        form = Form([('name', 'Dennis'), ('age', 'old')])
        self.assertErr(from_form(Person, form), 'could not parse key "age": could not parse int: \'old\'')

    def test_keys_are_case_sensitive(self) -> None:
        form = Form([('Name', 'Dennis'), ('age', '22')])
        self.assertErr(from_form(Person, form), 'Could not find key "name"')

    def test_round_trip(self) -> None:
        person = Person(name='Andres Löh & co', age=-1)
        self.assertOk(from_form(Person, to_form(person)), person)

    def test_wrong_value_type(self) -> None:
        with self.assertRaises(TypeError):
            make_form_type(Person).to_form(Cat(name='Tom', lives=9))
        with self.assertRaises(TypeError):
            to_form(Person(name='Dennis', age='22'))  # type: ignore[arg-type]

    def test_from_form_requires_form(self) -> None:
        with self.assertRaises(TypeError):
            make_form_type(Person).from_form({'name': 'Dennis', 'age': '22'})  # type: ignore[arg-type]

    def test_fields(self) -> None:
        form_type = make_form_type(Search)
        self.assertIsInstance(form_type, DataclassFormType)
        self.assertEqual([f.name for f in form_type.fields], ['q', 'tag', 'page', 'lang'])
        self.assertEqual([f.has_default for f in form_type.fields], [False, False, True, True])
        self.assertEqual([f.is_optional for f in form_type.fields], [False, True, False, True])

    def test_scalar_fields(self) -> None:
        order = Order(size=Size.LARGE, price=9.5)
        self.assertEqual(to_form(order), Form([('size', 'l'), ('price', '9.5'), ('gift', 'false')]))
        self.assertOk(from_form(Order, Form([('size', 's'), ('price', '1')])), Order(size=Size.SMALL, price=1.0))
        self.assertErr(from_form(Order, Form([('size', 'm'), ('price', '1')])),
                       'could not parse key "size": invalid Size value: \'m\'')


class DefaultsTest(unittest.TestCase):
    def test_defaults_when_missing(self) -> None:
        self.assertOk(from_form(Search, Form([('q', 'python')])), Search(q='python', tag=None))

    def test_optional_empty_value(self) -> None:
        form = Form([('q', 'python'), ('tag', ''), ('lang', '')])
        self.assertOk(from_form(Search, form), Search(q='python', tag=None, lang=None))

    def test_given_values(self) -> None:
        form = Form([('q', 'python'), ('tag', 'web'), ('page', '3'), ('lang', 'nl')])
        self.assertOk(from_form(Search, form), Search(q='python', tag='web', page=3, lang='nl'))

    def test_invalid_default_field(self) -> None:
        form = Form([('q', 'python'), ('page', 'last')])
        self.assertErr(from_form(Search, form), 'could not parse key "page": could not parse int: \'last\'')

    def test_to_form(self) -> None:
        search = Search(q='python', tag=None)
        search.seen.append('ignored')
        self.assertEqual(to_form(search), Form([('q', 'python'), ('tag', ''), ('page', '1'), ('lang', 'en')]))


class UnionTest(unittest.TestCase):
    def test_first_matching_alternative(self) -> None:
        form_type = make_form_type(Cat | Dog)
        self.assertIsInstance(form_type, UnionFormType)
        self.assertOk(form_type.from_form(Form([('name', 'Rex'), ('good', 'true')])), Dog(name='Rex', good=True))
        self.assertOk(form_type.from_form(Form([('name', 'Tom'), ('lives', '9')])), Cat(name='Tom', lives=9))

    def test_declared_order_wins(self) -> None:
        form = Form([('name', 'Both'), ('lives', '9'), ('good', 'true')])
        self.assertOk(from_form(Cat | Dog, form), Cat(name='Both', lives=9))
        self.assertOk(from_form(Dog | Cat, form), Dog(name='Both', good=True))

    def test_no_alternative_matches(self) -> None:
        with capture_logs() as logs:
            result = from_form(Cat | Dog, Form([('name', 'Nemo')]))
        self.assertErr(result, 'no alternative of Cat | Dog matched: Could not find key "good"')
        self.assertEqual([log['alternative'] for log in logs if log['event'] == 'alternative discarded'],
                         ['Cat', 'Dog'])

    def test_to_form_uses_the_value_class(self) -> None:
        form_type = make_form_type(Cat | Dog)
        self.assertEqual(form_type.to_form(Dog(name='Rex', good=False)), Form([('name', 'Rex'), ('good', 'false')]))
        with self.assertRaises(TypeError):
            form_type.to_form(Person(name='Dennis', age=22))

    def test_nested_alternatives(self) -> None:
        self.assertOk(from_form(Cat | Dog | Person, Form([('name', 'Dennis'), ('age', '22')])),
                      Person(name='Dennis', age=22))

    def test_none_is_not_an_alternative(self) -> None:
        with self.assertRaises(TypeError):
            make_form_type(Person | None)


class NamedTupleTest(unittest.TestCase):
    def test_namedtuple(self) -> None:
        self.assertIsInstance(make_form_type(Point), NamedTupleFormType)
        self.assertEqual(to_form(Point(x=1, y=2)), Form([('x', '1'), ('y', '2')]))
        self.assertOk(from_form(Point, Form([('x', '3')])), Point(x=3, y=0))
        self.assertErr(from_form(Point, Form([('y', '3')])), 'Could not find key "x"')

    def test_untyped_namedtuple(self) -> None:
        Untyped = namedtuple('Untyped', ['a', 'b'])
        with self.assertRaises(TypeError):
            make_form_type(Untyped)


class PydanticModelTest(unittest.TestCase):
    def test_model(self) -> None:
        self.assertIsInstance(make_form_type(User), PydanticFormType)
        self.assertEqual(to_form(User(name='Ann', age=30)), Form([('name', 'Ann'), ('age', '30')]))
        self.assertOk(from_form(User, Form([('name', 'Ann')])), User(name='Ann', age=0))
        self.assertErr(from_form(User, Form()), 'Could not find key "name"')

    def test_model_validation(self) -> None:
        result = from_form(User, Form([('name', 'Ann'), ('age', '-1')]))
        self.assertTrue(result.is_err())
        self.assertTrue(result.unwrap_err().startswith('invalid User: '))


class PassthroughTest(unittest.TestCase):
    def test_form(self) -> None:
        form = Form([('a', '1')])
        self.assertIsInstance(make_form_type(Form), FormFormType)
        self.assertIs(to_form(form), form)
        self.assertOk(from_form(Form, form), form)

    def test_dict(self) -> None:
        self.assertIsInstance(make_form_type(dict[str, str]), DictFormType)
        self.assertEqual(to_form({'b': '2', 'a': '1'}), Form([('a', '1'), ('b', '2')]))
        self.assertOk(from_form(dict[str, str], Form([('b', '2'), ('a', '1')])), {'a': '1', 'b': '2'})
        with self.assertRaises(TypeError):
            to_form({'a': 1})

    def test_pairs(self) -> None:
        self.assertIsInstance(make_form_type(list[tuple[str, str]]), PairsFormType)
        self.assertEqual(to_form([('a', '1'), ('a', '2')]), Form([('a', '2')]))
        self.assertOk(from_form(list[tuple[str, str]], Form([('b', '2'), ('a', '1')])), [('a', '1'), ('b', '2')])
        with self.assertRaises(TypeError):
            to_form([('a',)])

    def test_other_containers(self) -> None:
        with self.assertRaises(TypeError):
            make_form_type(dict[str, int])
        with self.assertRaises(TypeError):
            make_form_type(list[str])


class CustomTest(unittest.TestCase):
    def test_custom_class(self) -> None:
        self.assertIsInstance(make_form_type(Flags), CustomFormType)
        self.assertEqual(to_form(Flags('debug', 'verbose')), Form([('debug', ''), ('verbose', '')]))
        self.assertEqual(from_form(Flags, Form([('debug', '')])).unwrap().names, frozenset({'debug'}))
        self.assertErr(from_form(Flags, Form([('debug', '1')])), 'flags have no values')

    def test_custom_class_in_union(self) -> None:
        result = from_form(Person | Flags, Form([('is_test', '')]))
        self.assertEqual(result.unwrap().names, frozenset({'is_test'}))


def test_form_types_are_cached() -> None:
    assert make_form_type(Person) is make_form_type(Person)


def test_extra_scalars_map_is_not_cached() -> None:
    from tests.test_scalars import HexScalar

    @dataclass
    class Blob:
        data: bytes

    with pytest.raises(TypeError):
        make_form_type(Blob)
    form_type = make_form_type(Blob, extra_scalars_map={bytes: HexScalar})
    assert form_type is not make_form_type(Blob, extra_scalars_map={bytes: HexScalar})
    assert form_type.to_form(Blob(data=b'\x00\x01')) == Form([('data', '0001')])
    assert form_type.from_form(Form([('data', 'ff')])) == Ok(Blob(data=b'\xff'))


@pytest.mark.parametrize('type_', [
    int,
    str,
    bytes,
    object,
    Person | None,
    Optional[Person],
])
def test_unsupported_types(type_) -> None:
    with pytest.raises(TypeError):
        make_form_type(type_)


def test_unsupported_field_type() -> None:
    @dataclass
    class WithBytes:
        payload: bytes

    with pytest.raises(TypeError):
        make_form_type(WithBytes)
