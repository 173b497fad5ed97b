import global_params.constants as constants
from tunnel_encoding.constraints.variable import BoolVar, VariableFactory
from typing import List, Optional


def stack_capacity(length: int) -> int:
    """
    Number of stack cells the reduction allocates for a path of the given length. A stack of height h needs
    at least 2h moves to be built and unwound, so cells 0..length // 2 are enough

    :param length: length of the sought path
    :return: the number of cells, i.e. heights range over 0..stack_capacity(length) - 1
    """
    if length < 0:
        raise ValueError(f"Path length must be non-negative, got {length}")
    return length // 2 + 1


class ReductionVariables:
    """
    Class that generates the propositions of the reduction. Asking twice for the same indexes returns the same
    variable, so the encoder and the decoder can rebuild them independently
    """

    def __init__(self, factory: Optional[VariableFactory] = None):
        self._factory = factory if factory is not None else VariableFactory()

    def x(self, node: int, pos: int, height: int) -> BoolVar:
        """
        Position variable: the walk is at node at position pos, and the topmost occupied stack cell is height
        """
        return self._factory.create_variable("x", node, pos, height)

    def y(self, pos: int, height: int, symbol: int) -> BoolVar:
        """
        Symbol variable: the stack cell at height holds symbol at position pos
        """
        return self._factory.create_variable("y", pos, height, symbol)

    def y4(self, pos: int, height: int) -> BoolVar:
        return self.y(pos, height, constants.symbol_4)

    def y6(self, pos: int, height: int) -> BoolVar:
        return self.y(pos, height, constants.symbol_6)

    def created_variables(self) -> List[BoolVar]:
        return self._factory.variables_created()
