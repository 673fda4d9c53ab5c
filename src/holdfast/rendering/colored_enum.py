# holdfast:header:start
#
#   project      : Holdfast
#   file         : colored_enum.py
#   file_relpath : src/holdfast/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Color-aware enum primitives for human-facing rendering.

`ColoredStrEnum` stores a textual value while attaching a colorizer (a
callable that decorates strings, typically a yachalk style). The enum `.value`
stays a plain string; the colorizer is exposed via `.color`.

Example:
    ```python
    from yachalk import chalk

    class ScenarioStatus(ColoredStrEnum):
        OK = ("ok", chalk.green)
        REJECTED = ("rejected", chalk.red_bright)

    print(ScenarioStatus.OK.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic
    list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join the provided arguments into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
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

    def render(self, text: str | None = None, *, enable_color: bool = True) -> str:
        """Return ``text`` (default: the member value), colorized if enabled."""
        shown: str = self._value_ if text is None else text
        return self._color(shown) if enable_color else shown
