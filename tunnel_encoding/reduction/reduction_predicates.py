import global_params.constants as constants
from tunnel_encoding.constraints.connector_factory import add_and, add_or, add_not, add_eq, add_atmost1
from tunnel_encoding.constraints.formula import Formula_T
from tunnel_encoding.reduction.reduction_variables import ReductionVariables
from typing import List, Sequence


def at_least_one(formulas: Sequence[Formula_T]) -> Formula_T:
    return add_or(*formulas)


def at_most_one(formulas: Sequence[Formula_T]) -> Formula_T:
    return add_atmost1(*formulas)


def exactly_one(formulas: Sequence[Formula_T]) -> List[Formula_T]:
    return [at_least_one(formulas), at_most_one(formulas)]


def occupied(sf: ReductionVariables, node: int, pos: int, capacity: int) -> Formula_T:
    # The walk is at node at position pos, whatever the stack height
    return add_or(*(sf.x(node, pos, height) for height in range(capacity)))


def cell_holds_symbol(sf: ReductionVariables, pos: int, height: int) -> Formula_T:
    return add_or(*(sf.y(pos, height, symbol) for symbol in constants.stack_alphabet))


def cell_empty(sf: ReductionVariables, pos: int, height: int) -> Formula_T:
    return add_and(*(add_not(sf.y(pos, height, symbol)) for symbol in constants.stack_alphabet))


def stack_shape(sf: ReductionVariables, pos: int, height: int, capacity: int) -> Formula_T:
    # Cells 0..height hold a symbol and every cell above is empty
    return add_and(*(cell_holds_symbol(sf, pos, h) for h in range(height + 1)),
                   *(cell_empty(sf, pos, h) for h in range(height + 1, capacity)))


def move(sf: ReductionVariables, pos: int, below: int) -> Formula_T:
    # Cells 0..below-1 keep their content from pos to pos + 1. Move can be empty
    if below <= 0:
        return True
    return add_and(*(add_eq(sf.y(pos + 1, h, symbol), sf.y(pos, h, symbol))
                     for h in range(below) for symbol in constants.stack_alphabet))
