#!/usr/bin/python3
import os
import sys
from functools import partial
from argparse import ArgumentParser
from timeit import default_timer as dtimer

import global_params.constants as constants
import global_params.paths as paths
from global_params.options import ReductionParams
from network.tunnel_network import TunnelNetwork
from solution_generation.model_printer import render
from solution_generation.path_extraction import extract_path
from solution_generation.path_report import format_path, path_to_dataframe
from solution_generation.path_search import solve_constraints, find_shortest_path
from solution_generation.steps import Step
from tunnel_encoding.constraints.connector_factory import add_and
from tunnel_encoding.reduction.reduction_encoding import reduction_constraints
from tunnel_encoding.reduction.reduction_variables import ReductionVariables, stack_capacity
from tunnel_encoding.solver.solver import Solver
from tunnel_encoding.solver.solver_from_executable import translate_formula
from tunnel_encoding.solver.z3_executable import Z3Executable
from tunnel_sat.oracle import Oracle
from verification.path_verify import verify_path
from typing import List, Optional


def new_solver(params: ReductionParams) -> Solver:
    if params.solver == "z3":
        return Z3Executable(paths.smt_encoding_path + "tunnel.smt2", solver_path=paths.z3_exec)
    return Oracle(solver=params.sat_solver, verbose=params.verbose)


def export_formula(params: ReductionParams, constraints, length: int) -> None:
    if params.dimacs_file is not None:
        with Oracle(solver=params.sat_solver) as oracle:
            oracle.assert_hard(*constraints)
            oracle.to_file(params.dimacs_file)
        if params.verbose:
            print(f"c DIMACS formula for length {length} written to {params.dimacs_file}")

    if params.smt2_file is not None:
        smt_writer = Z3Executable(params.smt2_file)
        smt_writer.assert_hard(*constraints)
        smt_writer.write_smt2()
        if params.verbose:
            print(f"c SMT-LIB2 formula for length {length} written to {params.smt2_file}")


def reduce_and_solve(network: TunnelNetwork, length: int, solver: Solver,
                     params: ReductionParams) -> Optional[List[Step]]:
    """
    Builds and solves the reduction for one length, printing the outcome. Returns the path found, if any
    """
    sf = ReductionVariables()
    start = dtimer()
    constraints = reduction_constraints(network, length, sf)
    if params.verbose:
        print(f"c length {length}: {len(constraints)} constraints, stack capacity {stack_capacity(length)}, "
              f"built in {dtimer() - start:.4f}s")

    if params.print_formula:
        print(translate_formula(add_and(*constraints)))

    export_formula(params, constraints, length)

    try:
        assignment = solve_constraints(constraints, solver)
    except RuntimeError:
        print(f"The solver could not decide whether a path of length {length} exists")
        return None
    if params.verbose and params.solver == "z3":
        print(f"c solving time: {solver.solving_time:.4f}")

    if assignment is None:
        print(f"No path of length {length} from {network.node_name(network.source)} "
              f"to {network.node_name(network.destination)}")
        return None

    if params.debug:
        render(assignment, network, length, sf=sf)

    path = extract_path(assignment, network, length, sf)
    print(f"There is a path of length {length} from {network.node_name(network.source)} "
          f"to {network.node_name(network.destination)}")
    if params.print_path:
        print(format_path(network, path))

    if params.verify:
        problems = verify_path(network, path, length)
        for problem in problems:
            print(f"Error: {problem}")
        if not problems:
            print("Path verified")

    if params.csv_file is not None:
        path_to_dataframe(network, path).to_csv(params.csv_file, index=False)
    return path


def options_tunnel(ap: ArgumentParser) -> None:
    input = ap.add_argument_group('Input options')
    input.add_argument('input_path', help='JSON file describing the tunnel network')

    search = ap.add_argument_group('Search options', 'Options for choosing which path lengths are tried')
    group = search.add_mutually_exclusive_group()
    group.add_argument('-l', '--length', dest='length', type=int, help='Length of the sought path')
    group.add_argument('-shortest', '--shortest', dest='shortest', action='store_true',
                       help='Try every length from 0 up to the number of nodes minus one')

    solver = ap.add_argument_group('Solver options')
    solver.add_argument('-solver', '--solver', help='Choose the solver', choices=['pysat', 'z3'], default='pysat')
    solver.add_argument('-sat-solver', '--sat-solver', dest='sat_solver', default=constants.default_sat_solver,
                        help='SAT solver used through python-sat (g3, g4, cd19, m22, ...)')

    output = ap.add_argument_group('Output options')
    output.add_argument('-F', '--formula', dest='print_formula', action='store_true',
                        help='Print the formula before solving it')
    output.add_argument('-q', '--quiet', action='store_true', help='Do not print the decoded path')
    output.add_argument('-d', '--debug', dest='debug_flag', action='store_true',
                        help='Print the configuration and the stack at each position of the model')
    output.add_argument('-v', '--verbose', action='count', default=0, help='Be verbose')
    output.add_argument('-dimacs', dest='dimacs_file', help='Write the formula in DIMACS to this file')
    output.add_argument('-smt2', dest='smt2_file', help='Write the formula in SMT-LIB2 to this file')
    output.add_argument('-csv', dest='csv_file', help='CSV file to store the decoded path')
    output.add_argument('-check', '--check', dest='verify', action='store_true',
                        help='Check the decoded path against the network')


def main(argv=None) -> int:
    ap = ArgumentParser(description='Bounded tunnel path search through a reduction to SAT')
    options_tunnel(ap)
    args = ap.parse_args(argv)

    params = ReductionParams()
    try:
        params.parse_args(args)
        network = TunnelNetwork.from_file(params.input_file)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if params.verbose > 1:
        print(f"c {params}")
    if params.verbose:
        print(f"c {network}")

    if params.solver == "z3":
        os.makedirs(paths.smt_encoding_path, exist_ok=True)

    make_solver = partial(new_solver, params)
    try:
        if params.shortest:
            found = find_shortest_path(network, make_solver, search=partial(reduce_and_solve, params=params))
        else:
            found = reduce_and_solve(network, params.length, make_solver(), params)
    except OSError as e:
        # Typically the external solver cannot be run
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0 if found is not None else 2


if __name__ == '__main__':
    sys.exit(main())
