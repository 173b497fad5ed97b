from abc import ABC, abstractmethod
from enum import Enum, unique
from tunnel_encoding.constraints.formula import Formula_T
from tunnel_encoding.solver.assignment import Assignment


@unique
class SolveOutcome(Enum):
    sat = 0
    unsat = 1
    unknown = 2


class Solver(ABC):
    """
    Interface the reduction expects from a satisfiability backend: hard formulas are asserted, satisfiability is
    checked and, if a model exists, the truth value of each variable can be queried through an Assignment
    """

    @abstractmethod
    def assert_hard(self, *formulas: Formula_T) -> None:
        pass

    @abstractmethod
    def check_sat(self) -> SolveOutcome:
        pass

    @abstractmethod
    def get_assignment(self) -> Assignment:
        pass
