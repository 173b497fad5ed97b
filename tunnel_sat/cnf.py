#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## cnf.py
##

#
#==============================================================================
from io import StringIO
from pysat.card import CardEnc, EncType
from pysat.formula import CNF, IDPool
from tunnel_encoding.constraints.connector import Connector
from tunnel_encoding.constraints.connector_factory import add_implies, expand_atmost1
from tunnel_encoding.constraints.variable import BoolVar
from tunnel_encoding.solver.assignment import Assignment


#
#==============================================================================
class CNFEncoding(object):
    """
        Tseitin translation of reduction formulas into a CNF formula.
        Variables are registered in an IDPool under their keys, so the
        model can be mapped back to them.
    """

    def __init__(self, vpool=None, cenc=EncType.seqcounter):
        """
            Initialiser.
        """

        # cardinality encoding used for at-most-one constraints
        self.cenc = cenc

        # all the variables are to be stored here
        self.vpool = vpool if vpool is not None else IDPool()

        # the final CNF formula
        self.formula = CNF()

        # literals of the already translated connectors, by object identity
        self.cache = {}

        # translated connectors are kept alive so that their ids stay unique
        self.keep = []

        # number of auxiliary variables introduced so far
        self.naux = 0

    def add(self, formula):
        """
            Assert a formula at the top level. Conjunctions, clauses and
            implications towards clauses are added without auxiliary
            variables.
        """

        if type(formula) == bool:
            if not formula:
                # an empty clause in disguise
                lit = self.fresh()
                self.formula.append([lit])
                self.formula.append([-lit])
        elif type(formula) == BoolVar:
            self.formula.append([self.var(formula)])
        elif formula.connector_name == 'and':
            for argument in formula.arguments:
                self.add(argument)
        elif formula.connector_name == 'or':
            self.formula.append([self.literal(argument) for argument in formula.arguments])
        elif formula.connector_name == 'not':
            self.formula.append([-self.literal(formula.arguments[0])])
        elif formula.connector_name == 'implies':
            lhs, rhs = formula.arguments
            if type(rhs) == Connector and rhs.connector_name == 'and':
                for argument in rhs.arguments:
                    self.add(add_implies(lhs, argument))
            elif type(rhs) == Connector and rhs.connector_name == 'or':
                self.formula.append([-self.literal(lhs)] + [self.literal(argument) for argument in rhs.arguments])
            else:
                self.formula.append([-self.literal(lhs), self.literal(rhs)])
        elif formula.connector_name == 'equal':
            lhs, rhs = map(self.literal, formula.arguments)
            self.formula.append([-lhs, rhs])
            self.formula.append([lhs, -rhs])
        elif formula.connector_name == 'atmost1':
            lits = [self.literal(argument) for argument in formula.arguments]
            am1 = CardEnc.atmost(lits, bound=1, vpool=self.vpool, encoding=self.cenc)

            # the auxiliary variables of the encoding are taken from the pool
            for cl in am1.clauses:
                self.formula.append(cl)
        else:
            assert False, 'Unknown connector: {0}'.format(formula.connector_name)

    def literal(self, formula):
        """
            Literal equivalent to a formula.
        """

        if type(formula) == BoolVar:
            return self.var(formula)

        if type(formula) == bool:
            if tuple(['const']) not in self.vpool.obj2id:
                self.formula.append([self.vpool.id(tuple(['const']))])
            lit = self.vpool.id(tuple(['const']))
            return lit if formula else -lit

        if id(formula) in self.cache:
            return self.cache[id(formula)]

        name = formula.connector_name
        if name == 'not':
            lit = -self.literal(formula.arguments[0])
        elif name == 'atmost1':
            # nested cardinality constraints are expanded pairwise
            lit = self.literal(expand_atmost1(formula.arguments))
        elif name in ('and', 'or', 'implies'):
            if name == 'implies':
                lits = [-self.literal(formula.arguments[0]), self.literal(formula.arguments[1])]
            else:
                lits = [self.literal(argument) for argument in formula.arguments]
            lit = self.fresh()

            # the sign flips the roles of conjunction and disjunction
            sign = 1 if name == 'and' else -1
            for l in lits:
                self.formula.append([-sign * lit, sign * l])
            self.formula.append([sign * lit] + [-sign * l for l in lits])
        elif name == 'equal':
            lhs, rhs = map(self.literal, formula.arguments)
            lit = self.fresh()
            self.formula.append([-lit, -lhs, rhs])
            self.formula.append([-lit, lhs, -rhs])
            self.formula.append([lit, lhs, rhs])
            self.formula.append([lit, -lhs, -rhs])
        else:
            assert False, 'Unknown connector: {0}'.format(name)

        self.cache[id(formula)] = lit
        self.keep.append(formula)
        return lit

    def var(self, bvar):
        """
            Reduction variables.
        """

        return self.vpool.id(bvar.key)

    def fresh(self):
        """
            Auxiliary (Tseitin) variables.
        """

        self.naux += 1
        return self.vpool.id(tuple(['tseitin', self.naux]))

    def assignment(self, model):
        """
            Assignment of the reduction variables given a model.
        """

        values = {}
        for lit in model:
            if abs(lit) in self.vpool.id2obj:
                obj = self.vpool.obj(abs(lit))
                if obj[0] not in ('tseitin', 'const'):
                    values[obj] = lit > 0

        return Assignment(values)

    def comments(self):
        """
            Add the comments on the meaning of the variables used.
        """

        self.formula.comments = ['c {0} <-> {1}'.format(id_, obj) for obj, id_ in self.vpool.obj2id.items()
                                 if obj[0] != 'tseitin']

    def to_file(self, fname):
        """
            Dump the formula in DIMACS.
        """

        self.comments()
        self.formula.to_file(fname)

    def __str__(self):
        """
            String representation of the encoding.
        """

        self.comments()

        # creating the dummy file pointer
        dummyfp = StringIO()

        # dumping
        self.formula.to_fp(dummyfp)

        # getting the string and closing the file pointer
        result = dummyfp.getvalue()
        dummyfp.close()

        return result
