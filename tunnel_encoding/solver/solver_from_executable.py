import os
import re
import resource
import shlex
import subprocess

from abc import abstractmethod
from tunnel_encoding.solver.solver import Solver, SolveOutcome
from tunnel_encoding.solver.assignment import Assignment
from tunnel_encoding.constraints.connector import Connector
from tunnel_encoding.constraints.connector_factory import expand_atmost1
from tunnel_encoding.constraints.formula import Formula_T
from tunnel_encoding.constraints.variable import BoolVar
from typing import List, Dict, Optional


connector_to_str = {"and": "and", "or": "or", "not": "not", "implies": "=>", "equal": "="}

define_fun_pattern = re.compile(r"\(define-fun (\S+) \(\) Bool\s+(true|false)\)")


def run_command(cmd):
    with open(os.devnull, 'w') as FNULL:
        solver_p = subprocess.Popen(shlex.split(cmd), stdout=subprocess.PIPE, stderr=FNULL)
        return solver_p.communicate()[0].decode()


def run_and_measure_command(cmd):
    usage_start = resource.getrusage(resource.RUSAGE_CHILDREN)
    solution = run_command(cmd)
    usage_stop = resource.getrusage(resource.RUSAGE_CHILDREN)
    return solution, usage_stop.ru_utime + usage_stop.ru_stime - usage_start.ru_utime - usage_start.ru_stime


def translate_formula(formula: Formula_T) -> str:
    if type(formula) == bool:
        if formula:
            return "true"
        else:
            return "false"
    elif type(formula) == BoolVar:
        return formula.name
    elif formula.connector_name == "atmost1":
        # QF_UF has no cardinality constraints
        return translate_formula(expand_atmost1(formula.arguments))
    else:
        return f"({connector_to_str[formula.connector_name]} " \
               f"{' '.join(translate_formula(argument) for argument in formula.arguments)})"


def collect_variables(formula: Formula_T, variables: Dict[str, BoolVar]) -> None:
    # Iterative traversal: reduction formulas can be deep
    pending = [formula]
    while pending:
        current = pending.pop()
        if type(current) == BoolVar:
            variables[current.name] = current
        elif type(current) == Connector:
            pending.extend(current.arguments)


class SolverFromExecutable(Solver):

    def __init__(self, solver_path: str, file_path: str):
        self._solver_path = solver_path
        self._file_path = file_path

        self._logic = None
        self._options = dict()
        self._hard: List[Formula_T] = []
        self._variables: Dict[str, BoolVar] = dict()
        self._model = None
        self._time = 0

    def set_logic(self, logic: str) -> None:
        self._logic = logic

    def set_option(self, option: str, value: str) -> None:
        self._options[option] = value

    def assert_hard(self, *formulas: Formula_T) -> None:
        for formula in formulas:
            # Top-level conjunctions are asserted one conjunct at a time
            if type(formula) == Connector and formula.connector_name == "and":
                self._hard.extend(formula.arguments)
            else:
                self._hard.append(formula)
            collect_variables(formula, self._variables)

    @abstractmethod
    def load_model(self) -> List[str]:
        pass

    @abstractmethod
    def command_line(self) -> str:
        pass

    @abstractmethod
    def solve_outcome(self) -> SolveOutcome:
        pass

    def to_smt2(self) -> str:
        if self._logic is None:
            raise ValueError("Logic has not been set to any value")
        sentences = [f"(set-logic {self._logic})"]
        sentences.extend(f"(set-option :{option} {value})" for option, value in self._options.items())
        sentences.extend(f"(declare-fun {name} () Bool)" for name in sorted(self._variables))
        sentences.extend(f"(assert {translate_formula(formula)})" for formula in self._hard)
        sentences.append("(check-sat)")
        sentences.extend(self.load_model())
        return '\n'.join(sentences)

    def write_smt2(self, file_path: Optional[str] = None) -> str:
        file_path = file_path if file_path is not None else self._file_path
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(file_path, 'w') as f:
            f.write(self.to_smt2())
        return file_path

    def check_sat(self) -> SolveOutcome:
        """
        Execute the SMT solver
        """
        self.write_smt2()
        model, total_time = run_and_measure_command(self.command_line())
        self._model = model
        self._time = total_time
        return self.solve_outcome()

    @property
    def solving_time(self) -> float:
        return self._time

    def get_model(self) -> str:
        if self._model is None:
            raise ValueError("No model has been generated yet")
        return self._model

    def get_assignment(self) -> Assignment:
        model = self.get_model()
        values = dict()
        for name, value in re.findall(define_fun_pattern, model):
            # Auxiliary symbols introduced by the solver are ignored
            if name in self._variables:
                values[self._variables[name].key] = value == "true"
        return Assignment(values)
