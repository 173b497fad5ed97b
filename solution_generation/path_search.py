from network.tunnel_network import TunnelNetwork
from solution_generation.path_extraction import extract_path
from solution_generation.steps import Step
from tunnel_encoding.constraints.formula import Formula_T
from tunnel_encoding.reduction.reduction_encoding import reduction_constraints
from tunnel_encoding.reduction.reduction_variables import ReductionVariables
from tunnel_encoding.solver.assignment import Assignment
from tunnel_encoding.solver.solver import Solver, SolveOutcome
from typing import Callable, List, Optional, Sequence, Tuple

Search_T = Callable[[TunnelNetwork, int, Solver], Optional[List[Step]]]


def solve_constraints(constraints: Sequence[Formula_T], solver: Solver) -> Optional[Assignment]:
    """
    Asserts the constraints in the solver. Returns the model found, or None if they are unsatisfiable
    """
    solver.assert_hard(*constraints)
    outcome = solver.check_sat()
    if outcome == SolveOutcome.sat:
        return solver.get_assignment()
    elif outcome == SolveOutcome.unsat:
        return None
    raise RuntimeError("Solver could not decide the reduction")


def solve_reduction(network: TunnelNetwork, length: int, solver: Solver,
                    sf: Optional[ReductionVariables] = None) -> Optional[Assignment]:
    """
    Asserts the reduction for the given length in the solver. Returns the model found, or None if there is no path
    of that length
    """
    return solve_constraints(reduction_constraints(network, length, sf), solver)


def find_path(network: TunnelNetwork, length: int, solver: Solver) -> Optional[List[Step]]:
    sf = ReductionVariables()
    assignment = solve_reduction(network, length, solver, sf)
    if assignment is None:
        return None
    return extract_path(assignment, network, length, sf)


def find_shortest_path(network: TunnelNetwork, new_solver: Callable[[], Solver], max_length: Optional[int] = None,
                       search: Search_T = find_path) -> Optional[Tuple[int, List[Step]]]:
    """
    Tries every length from 0 up to max_length with a fresh solver each time. A simple path has at most
    num_nodes - 1 steps, which is the default upper limit

    :param search: looks for a path of one length with the given solver
    :return: the first length with a path together with the path, or None
    """
    max_length = max_length if max_length is not None else network.num_nodes - 1
    for length in range(max_length + 1):
        path = search(network, length, new_solver())
        if path is not None:
            return length, path
    return None
