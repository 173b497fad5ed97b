import io
import sys
import global_params.constants as constants
from network.tunnel_network import TunnelNetwork
from tunnel_encoding.reduction.reduction_variables import ReductionVariables, stack_capacity
from tunnel_encoding.solver.assignment import Assignment
from solution_generation.path_extraction import occupied_pairs
from typing import Optional


def cell_marker(assignment: Assignment, pos: int, height: int, sf: ReductionVariables) -> str:
    holds_4 = assignment.value(sf.y4(pos, height))
    holds_6 = assignment.value(sf.y6(pos, height))
    if holds_4 and holds_6:
        return "|X"
    elif holds_4:
        return f"|{constants.symbol_4}"
    elif holds_6:
        return f"|{constants.symbol_6}"
    return "| "


def render(assignment: Assignment, network: TunnelNetwork, bound: int, fp=None,
           sf: Optional[ReductionVariables] = None) -> None:
    """
    Prints, for each position, the occupied pairs (node, height) and the stack from the bottom cell up, warning
    about every inconsistency found. Malformed models are reported, never rejected
    """
    fp = fp if fp is not None else sys.stdout
    sf = sf if sf is not None else ReductionVariables()
    capacity = stack_capacity(bound)

    for pos in range(bound + 1):
        print(f"At pos {pos}:", file=fp)
        pairs = occupied_pairs(assignment, network, pos, capacity, sf)
        if pairs:
            print("State: " + " ".join(f"({network.node_name(node)},{height})" for node, height in pairs), file=fp)
        else:
            print("State: No node at that position!", file=fp)
        if len(pairs) > 1:
            print("Several pairs node,height!", file=fp)

        ill_defined = False
        above_top = False
        markers = []
        for height in range(capacity):
            marker = cell_marker(assignment, pos, height, sf)
            markers.append(marker)
            if marker == "|X":
                ill_defined = True
            elif marker == "| ":
                above_top = True
            elif above_top:
                # a populated cell above an empty one
                ill_defined = True
        print("Stack: " + "".join(markers), file=fp)

        if ill_defined:
            print("Warning: ill-defined stack", file=fp)


def render_to_string(assignment: Assignment, network: TunnelNetwork, bound: int,
                     sf: Optional[ReductionVariables] = None) -> str:
    output = io.StringIO()
    render(assignment, network, bound, output, sf)
    return output.getvalue()
