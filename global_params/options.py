from argparse import Namespace

import global_params.constants as constants


class ReductionParams:
    """
    Parameters needed for the tunnel reduction pipeline
    """

    def __init__(self):
        # The fields declaration follow the same order as in tunnel_reduction's
        # argument parser

        # JSON file that describes the tunnel network
        self.input_file = None

        # Length of the sought path
        self.length = None

        # Try every length from 0 upwards until a path is found
        self.shortest = False

        # Backend that decides satisfiability: pysat or z3
        self.solver = "pysat"

        # Name of the pysat solver (g3, g4, cd19, m22, ...)
        self.sat_solver = constants.default_sat_solver

        # Print the formula before solving
        self.print_formula = False

        # Print the decoded path
        self.print_path = True

        # Print the diagnostic rendering of the model
        self.debug = False

        # Verbosity level for "c " comments
        self.verbose = 0

        # Files for exporting the formula
        self.dimacs_file = None
        self.smt2_file = None

        # CSV file to store the decoded path
        self.csv_file = None

        # Check the decoded path against the network
        self.verify = False

    def parse_args(self, args: Namespace) -> None:
        self.input_file = args.input_path
        self.length = args.length
        self.shortest = args.shortest
        self.solver = args.solver
        self.sat_solver = args.sat_solver
        self.print_formula = args.print_formula
        self.print_path = not args.quiet
        self.debug = args.debug_flag
        self.verbose = args.verbose
        self.dimacs_file = args.dimacs_file
        self.smt2_file = args.smt2_file
        self.csv_file = args.csv_file
        self.verify = args.verify

        if self.length is None and not self.shortest:
            raise ValueError("Either a length (-l) or -shortest must be given")
        if self.length is not None and self.length < 0:
            raise ValueError(f"Path length must be non-negative, got {self.length}")

    def __str__(self):
        return ', '.join(f"{field}={value}" for field, value in vars(self).items())
