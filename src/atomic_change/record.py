"""Sample value type used by the CLI demo."""

from __future__ import annotations

from dataclasses import dataclass

from atomic_change.domain import CheckedMethod, FieldRef, GuardedMethod


@dataclass(kw_only=True)
class Record:
    position: str = ""
    _name: str = ""
    _age: int = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    def set_name(self, value: str) -> bool:
        if not value:
            return False
        self._name = value
        return True

    def set_age(self, value: int) -> None:
        if value < 0:
            raise ValueError("Invalid age")
        self._age = value

    def dump(self) -> str:
        return f"name={self._name} age={self._age} position={self.position}"


position = FieldRef[Record, str]("position")
name = CheckedMethod[Record, str](Record.set_name)
age = GuardedMethod[Record, int](Record.set_age, catch=(ValueError,))
