from enum import Enum, unique
from typing import NamedTuple, Tuple


@unique
class ActionKind(Enum):
    transmit = 0
    push = 1
    pop = 2


_height_delta = {ActionKind.transmit: 0, ActionKind.push: 1, ActionKind.pop: -1}


# Push and pop variants are named by the pair (lower cell, upper cell): push_4_6 reads 4 on top and pushes 6,
# pop_4_6 removes 6 from the top and exposes 4
@unique
class Action(Enum):
    TRANSMIT_4 = "transmit_4"
    TRANSMIT_6 = "transmit_6"
    PUSH_4_4 = "push_4_4"
    PUSH_4_6 = "push_4_6"
    PUSH_6_4 = "push_6_4"
    PUSH_6_6 = "push_6_6"
    POP_4_4 = "pop_4_4"
    POP_4_6 = "pop_4_6"
    POP_6_4 = "pop_6_4"
    POP_6_6 = "pop_6_6"

    @property
    def kind(self) -> ActionKind:
        return ActionKind[self.value.split("_")[0]]

    @property
    def symbols(self) -> Tuple[int, ...]:
        return tuple(int(symbol) for symbol in self.value.split("_")[1:])

    @property
    def height_delta(self) -> int:
        return _height_delta[self.kind]

    @classmethod
    def transmit(cls, symbol: int) -> 'Action':
        return cls(f"transmit_{symbol}")

    @classmethod
    def push(cls, lower: int, upper: int) -> 'Action':
        return cls(f"push_{lower}_{upper}")

    @classmethod
    def pop(cls, lower: int, upper: int) -> 'Action':
        return cls(f"pop_{lower}_{upper}")

    def __str__(self):
        return self.value


class Step(NamedTuple):
    """
    One transition of a path: the action applied to the stack while moving from source to target
    """
    action: Action
    source: int
    target: int
