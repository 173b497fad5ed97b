#!/usr/bin/env python
# -*- coding:utf-8 -*-
##
## oracle.py
##

#
# ==============================================================================
from pysat.solvers import Solver as SATSolver
import global_params.constants as constants
from tunnel_encoding.solver.solver import Solver, SolveOutcome
from tunnel_sat.cnf import CNFEncoding


#
# ==============================================================================
class Oracle(Solver):
    """
        SAT oracle deciding the reduction in-process with one of the
        solvers bundled with python-sat.
    """

    def __init__(self, solver=constants.default_sat_solver, verbose=0):
        """
            Initialiser.
        """

        self.oracle = None
        self.enc = CNFEncoding()
        self.solver = solver
        self.verbose = verbose
        self.model = None

    def __del__(self):
        """
            Destructor.
        """

        self.delete()

    def __enter__(self):
        """
            'with' constructor.
        """

        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """
            'with' destructor.
        """

        self.delete()

    def delete(self):
        """
            Explicit destructor of the solver.
        """

        if self.oracle:
            self.oracle.delete()
            self.oracle = None

    def assert_hard(self, *formulas):
        """
            Add formulas to the CNF encoding.
        """

        for formula in formulas:
            self.enc.add(formula)

    def check_sat(self):
        """
            Solve the problem.
        """

        # the clauses may have changed since the last call
        self.delete()
        self.model = None

        if self.verbose > 1:
            print('c formula: {0} vars, {1} clauses'.format(self.enc.vpool.top, len(self.enc.formula.clauses)))

        self.oracle = SATSolver(name=self.solver, bootstrap_with=self.enc.formula.clauses, use_timer=True)
        status = self.oracle.solve()

        if self.verbose:
            print('c solving time: {0:.4f}'.format(self.oracle.time()))

        if status is True:
            self.model = self.oracle.get_model()
            return SolveOutcome.sat
        elif status is False:
            return SolveOutcome.unsat
        else:
            return SolveOutcome.unknown

    def get_assignment(self):
        """
            Assignment of the reduction variables in the last model.
        """

        if self.model is None:
            raise ValueError('No model has been computed yet')

        return self.enc.assignment(self.model)

    def to_file(self, fname):
        """
            Dump the CNF in DIMACS.
        """

        self.enc.to_file(fname)
