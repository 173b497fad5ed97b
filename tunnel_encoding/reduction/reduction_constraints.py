import global_params.constants as constants
from tunnel_encoding.constraints.connector_factory import add_and, add_or, add_not, add_implies
from tunnel_encoding.constraints.formula import Formula_T
from tunnel_encoding.reduction.reduction_predicates import exactly_one, occupied, stack_shape, move, at_most_one
from tunnel_encoding.reduction.reduction_variables import ReductionVariables, stack_capacity
from typing import List, Dict


def _configuration_at(network, sf: ReductionVariables, pos: int, node: int, capacity: int) -> List[Formula_T]:
    # (node, pos, 0) holds and any other pair (node', pos, h) does not. The stack is the base symbol alone
    constraints = [sf.x(node, pos, 0)]
    constraints.extend(add_not(sf.x(other, pos, height)) for other in range(network.num_nodes)
                       for height in range(capacity) if other != node or height != 0)

    constraints.append(sf.y(pos, 0, constants.base_symbol))
    constraints.extend(add_not(sf.y(pos, 0, symbol)) for symbol in constants.stack_alphabet
                       if symbol != constants.base_symbol)
    constraints.extend(add_not(sf.y(pos, height, symbol)) for height in range(1, capacity)
                       for symbol in constants.stack_alphabet)
    return constraints


def boundary_constraints(network, length: int, sf: ReductionVariables) -> List[Formula_T]:
    """
    Initial and final configurations: the walk starts at the source and ends at the destination, in both cases
    with the stack reduced to the base symbol. When length = 0 both blocks constrain position 0
    """
    capacity = stack_capacity(length)
    return _configuration_at(network, sf, 0, network.source, capacity) + \
        _configuration_at(network, sf, length, network.destination, capacity)


def uniqueness_constraints(network, length: int, sf: ReductionVariables) -> List[Formula_T]:
    """
    Exactly one pair (node, height) is occupied at each position
    """
    capacity = stack_capacity(length)
    constraints = []
    for pos in range(length + 1):
        pairs = [sf.x(node, pos, height) for node in range(network.num_nodes) for height in range(capacity)]
        constraints.extend(exactly_one(pairs))
    return constraints


def simple_path_constraints(network, length: int, sf: ReductionVariables) -> List[Formula_T]:
    """
    No node is occupied at two different positions, whatever the heights. When the source is also the destination
    the walk may close a cycle: the source is then shared by the first and the last position, and only by them
    """
    capacity = stack_capacity(length)
    constraints = []
    for node in range(network.num_nodes):
        node_positions = [occupied(sf, node, pos, capacity) for pos in range(length + 1)]
        if length > 0 and node == network.source == network.destination:
            # Every pair of positions except (0, length)
            constraints.append(at_most_one(node_positions[:-1]))
            constraints.append(at_most_one(node_positions[1:]))
        else:
            constraints.append(at_most_one(node_positions))
    return constraints


def stack_constraints(network, length: int, sf: ReductionVariables) -> List[Formula_T]:
    """
    Each cell holds at most one symbol, and the occupied height determines which cells are populated
    """
    capacity = stack_capacity(length)
    constraints = []
    for pos in range(length + 1):
        for height in range(capacity):
            constraints.append(at_most_one([sf.y(pos, height, symbol) for symbol in constants.stack_alphabet]))

        shapes = [stack_shape(sf, pos, height, capacity) for height in range(capacity)]
        for node in range(network.num_nodes):
            for height in range(capacity):
                constraints.append(add_implies(sf.x(node, pos, height), shapes[height]))
    return constraints


def transmit_shape(sf: ReductionVariables, target: int, pos: int, height: int, symbol: int,
                   moves: Dict[int, Formula_T]) -> Formula_T:
    return add_and(sf.x(target, pos + 1, height), sf.y(pos, height, symbol), sf.y(pos + 1, height, symbol),
                   moves[height])


def push_shape(sf: ReductionVariables, target: int, pos: int, height: int, lower: int, upper: int,
               moves: Dict[int, Formula_T]) -> Formula_T:
    # lower is read at the current top and kept, upper is written on top of it
    return add_and(sf.x(target, pos + 1, height + 1), sf.y(pos, height, lower), sf.y(pos + 1, height, lower),
                   sf.y(pos + 1, height + 1, upper), moves[height])


def pop_shape(sf: ReductionVariables, target: int, pos: int, height: int, lower: int, upper: int,
              moves: Dict[int, Formula_T]) -> Formula_T:
    # upper is removed from the top and lower is exposed below it
    return add_and(sf.x(target, pos + 1, height - 1), sf.y(pos, height, upper), sf.y(pos, height - 1, lower),
                   sf.y(pos + 1, height - 1, lower), moves[height - 1])


def transition_shapes(network, sf: ReductionVariables, node: int, pos: int, height: int, capacity: int,
                      moves: Dict[int, Formula_T]) -> List[Formula_T]:
    """
    Every configuration at pos + 1 reachable from (node, pos, height) through an edge leaving node
    """
    shapes = []
    for target in network.successors(node):
        shapes.extend(transmit_shape(sf, target, pos, height, symbol, moves)
                      for symbol in constants.stack_alphabet)
        if height < capacity - 1:
            shapes.extend(push_shape(sf, target, pos, height, lower, upper, moves)
                          for lower in constants.stack_alphabet for upper in constants.stack_alphabet)
        if height >= 1:
            shapes.extend(pop_shape(sf, target, pos, height, lower, upper, moves)
                          for lower in constants.stack_alphabet for upper in constants.stack_alphabet)
    return shapes


def transition_constraints(network, length: int, sf: ReductionVariables) -> List[Formula_T]:
    """
    Consecutive positions are linked by an edge of the network together with a transmit, push or pop. A node
    without successors cannot be occupied before the last position
    """
    capacity = stack_capacity(length)
    constraints = []
    for pos in range(length):
        # Shared by every shape at this position
        moves = {below: move(sf, pos, below) for below in range(capacity)}
        for node in range(network.num_nodes):
            for height in range(capacity):
                shapes = transition_shapes(network, sf, node, pos, height, capacity, moves)
                constraints.append(add_implies(sf.x(node, pos, height), add_or(*shapes)))
    return constraints
