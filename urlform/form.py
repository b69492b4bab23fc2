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

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, TypeAlias, Union

Pair: TypeAlias = tuple[str, str]


class Form(Mapping[str, str]):
    """ The contents of a form, not yet URL-encoded.

    A `Form` maps text keys to text values, there is at most one value per key. It can be built from a sequence of
    pairs, in which case later pairs overwrite earlier ones that share the same key, or from another mapping:

    >>> Form([('name', 'Julian'), ('lastname', 'Arni'), ('name', 'Greg')])
    Form([('lastname', 'Arni'), ('name', 'Greg')])

    Iteration is always in sorted-key order, which is also the order used when encoding. Forms are immutable, combining
    two forms with `|` creates a new one where the right operand wins on key collisions:

    >>> Form({'a': '1', 'b': '2'}) | Form({'b': '3'})
    Form([('a', '1'), ('b', '3')])
    """

    __slots__ = ('_data', '_keys')

    _data: dict[str, str]
    _keys: tuple[str, ...]

    def __init__(self, source: Union[Mapping[str, str], Iterable[Pair], None] = None, /) -> None:
        data: dict[str, str] = {}
        if source is None:
            pass
        elif isinstance(source, Mapping):
            data.update(source)
        else:
            for key, value in source:
                data[key] = value
        for key, value in data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(f'form keys and values must be str, got {key!r}: {value!r}')
        self._data = data
        self._keys = tuple(sorted(data))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair], /) -> Form:
        """ Build a form from a sequence of pairs, the last pair wins when a key is repeated.
        """
        return cls(pairs)

    @classmethod
    def combine(cls, *forms: Form) -> Form:
        """ Right-biased union of all the given forms, `Form.combine()` is the empty form.
        """
        result = cls()
        for form in forms:
            result = result | form
        return result

    def to_pairs(self) -> list[Pair]:
        """ List of (key, value) pairs sorted by key.
        """
        return [(key, self._data[key]) for key in self._keys]

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __or__(self, other: Any) -> Form:
        if not isinstance(other, Form):
            return NotImplemented
        if not other:
            return self
        if not self:
            return other
        return Form({**self._data, **other._data})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Form):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f'Form({self.to_pairs()!r})'
