"""Argument types shared by the request builders."""

from typing import Iterable, Mapping, Union

KeyValuePairs = Union[Mapping[str, str], Iterable[tuple[str, str]]]
