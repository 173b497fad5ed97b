from tunnel_encoding.constraints.connector_factory import add_and
from tunnel_encoding.constraints.formula import Formula_T
from tunnel_encoding.reduction.reduction_constraints import boundary_constraints, uniqueness_constraints, \
    simple_path_constraints, stack_constraints, transition_constraints
from tunnel_encoding.reduction.reduction_variables import ReductionVariables
from typing import List, Optional

# Sub-formulas of the reduction, in the order they are conjoined
reduction_parts = [boundary_constraints, uniqueness_constraints, simple_path_constraints, stack_constraints,
                   transition_constraints]


def reduction_constraints(network, length: int, sf: Optional[ReductionVariables] = None) -> List[Formula_T]:
    """
    Flat list of the constraints of the reduction. Their conjunction is satisfiable iff there is a simple path of
    the given length from the source to the destination whose stack operations start and end with the base symbol
    """
    if length < 0:
        raise ValueError(f"Path length must be non-negative, got {length}")
    sf = sf if sf is not None else ReductionVariables()

    constraints = []
    for part in reduction_parts:
        constraints.extend(part(network, length, sf))
    return constraints


def build_reduction(network, length: int, sf: Optional[ReductionVariables] = None) -> Formula_T:
    return add_and(*reduction_constraints(network, length, sf))
