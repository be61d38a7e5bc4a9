#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import re
import sys
from collections import UserDict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, overload

from .interfaces import PropertyKey as _PropertyKey
from .interfaces import TypedProperties as _TypedProperties

_GREEDY_LABEL_RE = re.compile(r"\{(\w+)\+\}")

type Document = (
    Mapping[str, "Document"] | Sequence["Document"] | str | int | float | bool | None
)


@dataclass(init=False, frozen=True)
class PathPattern:
    """A formattable URI path pattern, such as ``/global-networks/{GlobalNetworkId}``.

    Normal labels forbid path separators, greedy labels (``{Key+}``) allow them.
    """

    pattern: str
    greedy_labels: set[str]

    def __init__(self, pattern: str) -> None:
        object.__setattr__(self, "pattern", pattern)
        object.__setattr__(
            self, "greedy_labels", set(_GREEDY_LABEL_RE.findall(pattern))
        )

    @property
    def labels(self) -> list[str]:
        """The names of the labels in the pattern, in order."""
        return [name.rstrip("+") for name in re.findall(r"\{([\w+]+)\}", self.pattern)]

    def format(self, **kwargs: str) -> str:
        for key, value in kwargs.items():
            if "/" in value and key not in self.greedy_labels:
                raise ValueError(
                    'Non-greedy labels must not contain path separators ("/").'
                )

        result = self.pattern.replace("+}", "}").format(**kwargs)
        if "//" in result:
            raise ValueError(
                f'Path must not contain empty segments, but was "{result}".'
            )
        return result


@dataclass(kw_only=True, frozen=True, slots=True, init=False)
class PropertyKey[T](_PropertyKey[T]):
    """A typed property key."""

    key: str
    """The string key used to access the value."""

    value_type: type[T]
    """The type of the associated value in the property bag."""

    def __init__(self, *, key: str, value_type: type[T]) -> None:
        object.__setattr__(self, "key", sys.intern(key))
        object.__setattr__(self, "value_type", value_type)

    def __str__(self) -> str:
        return self.key


class TypedProperties(UserDict[str, Any], _TypedProperties):
    """A map with typed setters and getters.

    Keys can be either a string or a :py:class:`PropertyKey`. No runtime type
    assertion is performed.

    ..code-block:: python

        config = PropertyKey(key="config", value_type=Config)
        properties = TypedProperties()
        properties[config] = Config(region="us-west-2")
    """

    @overload
    def __getitem__[T](self, key: _PropertyKey[T]) -> T: ...
    @overload
    def __getitem__(self, key: str) -> Any: ...
    def __getitem__(self, key: str | _PropertyKey[Any]) -> Any:
        return self.data[key if isinstance(key, str) else key.key]

    @overload
    def __setitem__[T](self, key: _PropertyKey[T], value: T) -> None: ...
    @overload
    def __setitem__(self, key: str, value: Any) -> None: ...
    def __setitem__(self, key: str | _PropertyKey[Any], value: Any) -> None:
        self.data[key if isinstance(key, str) else key.key] = value

    def __delitem__(self, key: str | _PropertyKey[Any]) -> None:
        del self.data[key if isinstance(key, str) else key.key]

    def __contains__(self, key: object) -> bool:
        return super().__contains__(key.key if isinstance(key, _PropertyKey) else key)

    @overload
    def get[T](self, key: _PropertyKey[T], default: None = None) -> T | None: ...
    @overload
    def get[T](self, key: _PropertyKey[T], default: T) -> T: ...
    @overload
    def get(self, key: str, default: Any = None) -> Any: ...

    def get(self, key: str | _PropertyKey[Any], default: Any = None) -> Any:  # type: ignore
        return self.data.get(key if isinstance(key, str) else key.key, default)
