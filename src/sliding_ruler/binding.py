from dataclasses import dataclass
from typing import Callable


@dataclass
class ValueBinding:
    """Read/write access to a value owned elsewhere."""
    get: Callable[[], float]
    set: Callable[[float], None]

    @property
    def value(self) -> float:
        return self.get()

    @value.setter
    def value(self, new_value: float) -> None:
        self.set(new_value)


class ValueHolder:
    """Minimal value owner, handy when the host has no model of its own."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def binding(self) -> ValueBinding:
        def _set(new_value: float) -> None:
            self.value = new_value
        return ValueBinding(get=lambda: self.value, set=_set)
