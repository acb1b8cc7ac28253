from __future__ import annotations

"""修饰键组合：Alt/Shift/Ctrl 三态匹配（按下/松开/不关心）。"""

from dataclasses import dataclass
from enum import Enum


class Tristate(Enum):
    OFF = "off"
    ON = "on"
    ANY = "any"

    def matches(self, pressed: bool) -> bool:
        if self is Tristate.ANY:
            return True
        return (self is Tristate.ON) == pressed


@dataclass(frozen=True)
class ModifierState:
    alt: bool = False
    shift: bool = False
    ctrl: bool = False

    @property
    def any_pressed(self) -> bool:
        return self.alt or self.shift or self.ctrl


@dataclass(frozen=True)
class ModifiersSpec:
    alt: Tristate = Tristate.ANY
    shift: Tristate = Tristate.ANY
    ctrl: Tristate = Tristate.ANY

    @staticmethod
    def parse(text: str) -> "ModifiersSpec":
        """Parse a three letter combo in Alt, Shift, Ctrl order.

        ``A``/``S``/``C`` = pressed, lowercase = released, ``?`` = don't care,
        e.g. ``"?sC"`` means "Ctrl down, Shift up, Alt either way".
        """
        if len(text) != 3:
            raise ValueError(f"modifier combo must have 3 characters: {text!r}")
        states = []
        for char, letter in zip(text, "ASC"):
            if char == "?":
                states.append(Tristate.ANY)
            elif char == letter:
                states.append(Tristate.ON)
            elif char == letter.lower():
                states.append(Tristate.OFF)
            else:
                raise ValueError(f"invalid modifier combo {text!r}")
        return ModifiersSpec(*states)

    def matches(self, state: ModifierState) -> bool:
        return (
            self.alt.matches(state.alt)
            and self.shift.matches(state.shift)
            and self.ctrl.matches(state.ctrl)
        )
