"""Nested inline style scopes."""

from rich.style import Style


class StyleStack:
    """LIFO of active styles that never drops below its base style.

    Each pushed layer is combined with the current top, so nested scopes
    accumulate (bold inside a heading keeps the heading colour's siblings
    unless the layer overrides them).
    """

    def __init__(self, base: Style):
        self._stack: list[Style] = [base]

    @property
    def base(self) -> Style:
        return self._stack[0]

    @property
    def current(self) -> Style:
        return self._stack[-1]

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, style: Style) -> None:
        """Push ``style`` as-is, replacing the current style."""
        self._stack.append(style)

    def push_layer(self, layer: Style) -> None:
        """Push ``layer`` composed onto the current top."""
        self._stack.append(self.current + layer)

    def pop(self) -> Style:
        """Drop the top scope; the base style is never removed."""
        if len(self._stack) > 1:
            return self._stack.pop()
        return self._stack[0]
