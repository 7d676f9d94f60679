# topmark:header:start
#
#   project      : TOML Maid
#   file         : colored_enum.py
#   file_relpath : src/tomlmaid/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

`ColoredStrEnum` is a ``str, Enum`` whose members store their textual value
and, separately, a colorizer (typically a ``yachalk`` style):

```python
from yachalk import chalk

class Cluster(ColoredStrEnum):
    OK    = ("ok", chalk.green)
    ERROR = ("error", chalk.red_bright)

print(Cluster.OK.value)            # 'ok'
print(Cluster.OK.color("hello"))   # green "hello"
```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`.
    """

    def __call__(self, *args: object, sep: str = " ") -> str: ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def colored(self) -> str:
        """Return the member's text rendered with its colorizer."""
        return self._color(self._value_)
