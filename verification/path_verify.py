import global_params.constants as constants
from network.tunnel_network import TunnelNetwork
from solution_generation.path_report import stack_heights
from solution_generation.steps import ActionKind, Step
from tunnel_encoding.reduction.reduction_variables import stack_capacity
from typing import List


def verify_path(network: TunnelNetwork, path: List[Step], length: int) -> List[str]:
    """
    Checks a decoded path against the network without using the solver

    :return: description of every problem found. An empty list means the path is valid
    """
    problems = []
    if len(path) != length:
        problems.append(f"Path has {len(path)} steps instead of {length}")

    nodes = [path[0].source] if path else [network.source]
    for pos, step in enumerate(path):
        if step.source != nodes[-1]:
            problems.append(f"Step {pos} starts at {step.source} but the previous one ends at {nodes[-1]}")
        if not network.has_edge(step.source, step.target):
            problems.append(f"Step {pos} uses the missing edge {step.source} -> {step.target}")
        nodes.append(step.target)

    if nodes[0] != network.source:
        problems.append(f"Path starts at {nodes[0]} instead of the source {network.source}")
    if nodes[-1] != network.destination:
        problems.append(f"Path ends at {nodes[-1]} instead of the destination {network.destination}")
    # A walk from the source back to itself may repeat its first node at the end, and only there
    closes_cycle = len(nodes) > 1 and network.source == network.destination and nodes[0] == nodes[-1]
    visited = nodes[1:] if closes_cycle else nodes
    if len(set(visited)) != len(visited):
        problems.append("Path visits some node more than once")

    heights = stack_heights(path)
    capacity = stack_capacity(length)
    if any(height < 0 or height >= capacity for height in heights):
        problems.append(f"Stack height leaves the range [0, {capacity - 1}]")
    if heights[-1] != 0:
        problems.append(f"Stack ends at height {heights[-1]}")

    # Replay the stack from the base symbol
    stack = [constants.base_symbol]
    for pos, step in enumerate(path):
        kind, symbols = step.action.kind, step.action.symbols
        top = symbols[-1] if kind == ActionKind.pop else symbols[0]
        if stack[-1] != top:
            problems.append(f"Step {pos} reads {top} but the stack top is {stack[-1]}")
        if kind == ActionKind.push:
            stack.append(symbols[1])
        elif kind == ActionKind.pop and len(stack) > 1:
            stack.pop()
            if stack[-1] != symbols[0]:
                problems.append(f"Step {pos} exposes {symbols[0]} but the cell below holds {stack[-1]}")
    if stack != [constants.base_symbol]:
        problems.append(f"Stack ends as {stack} instead of the base symbol alone")
    return problems
