import global_params.constants as constants
from network.tunnel_network import TunnelNetwork
from solution_generation.steps import Action, Step
from tunnel_encoding.reduction.reduction_variables import ReductionVariables, stack_capacity
from tunnel_encoding.solver.assignment import Assignment
from typing import List, Optional, Tuple


class InconsistentModelError(ValueError):
    """
    The assignment breaks an invariant the reduction enforces, so no path can be read from it
    """
    pass


def occupied_pairs(assignment: Assignment, network: TunnelNetwork, pos: int, capacity: int,
                   sf: ReductionVariables) -> List[Tuple[int, int]]:
    return [(node, height) for node in range(network.num_nodes) for height in range(capacity)
            if assignment.value(sf.x(node, pos, height))]


def configuration_at(assignment: Assignment, network: TunnelNetwork, pos: int, capacity: int,
                     sf: ReductionVariables) -> Tuple[int, int]:
    pairs = occupied_pairs(assignment, network, pos, capacity, sf)
    if len(pairs) != 1:
        raise InconsistentModelError(f"Expected exactly one pair (node, height) at position {pos}, found {pairs}")
    return pairs[0]


def symbol_at(assignment: Assignment, pos: int, height: int, sf: ReductionVariables) -> int:
    symbols = [symbol for symbol in constants.stack_alphabet if assignment.value(sf.y(pos, height, symbol))]
    if len(symbols) != 1:
        raise InconsistentModelError(f"Cell at height {height} in position {pos} holds {len(symbols)} symbols")
    return symbols[0]


def classify_action(assignment: Assignment, pos: int, src_height: int, tgt_height: int,
                    sf: ReductionVariables) -> Action:
    if src_height == tgt_height:
        return Action.transmit(symbol_at(assignment, pos, src_height, sf))
    elif tgt_height == src_height + 1:
        return Action.push(symbol_at(assignment, pos, src_height, sf),
                           symbol_at(assignment, pos + 1, tgt_height, sf))
    elif tgt_height == src_height - 1:
        return Action.pop(symbol_at(assignment, pos + 1, tgt_height, sf),
                          symbol_at(assignment, pos, src_height, sf))
    raise InconsistentModelError(f"Stack height goes from {src_height} to {tgt_height} at position {pos}")


def extract_path(assignment: Assignment, network: TunnelNetwork, bound: int,
                 sf: Optional[ReductionVariables] = None) -> List[Step]:
    """
    Reads the path encoded in a satisfying assignment of the reduction for the given bound

    :param assignment: truth values of the reduction variables
    :param network: network the reduction was built from
    :param bound: length of the path
    :param sf: variables used by the reduction. A fresh set denotes the same propositions
    :return: one step per position 0..bound-1
    """
    sf = sf if sf is not None else ReductionVariables()
    capacity = stack_capacity(bound)

    path = []
    src, src_height = configuration_at(assignment, network, 0, capacity, sf)
    for pos in range(bound):
        tgt, tgt_height = configuration_at(assignment, network, pos + 1, capacity, sf)
        action = classify_action(assignment, pos, src_height, tgt_height, sf)
        path.append(Step(action, src, tgt))
        src, src_height = tgt, tgt_height
    return path
