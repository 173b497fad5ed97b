from tunnel_encoding.solver.solver import SolveOutcome
from tunnel_encoding.solver.solver_from_executable import SolverFromExecutable, List
from global_params.paths import z3_exec
import global_params.constants as constants


class Z3Executable(SolverFromExecutable):

    def __init__(self, file_path: str, solver_path: str = z3_exec):
        super(Z3Executable, self).__init__(solver_path, file_path)
        self.set_logic(constants.smt_logic)
        # Need this option to produce models
        self.set_option("produce-models", "true")

    def load_model(self) -> List[str]:
        return ["(get-model)"]

    def solve_outcome(self) -> SolveOutcome:
        if self._model is None:
            raise ValueError("Check-sat has not been called")
        lines = [line.strip() for line in self._model.splitlines() if line.strip()]
        if not lines:
            return SolveOutcome.unknown
        elif lines[0] == "sat":
            return SolveOutcome.sat
        elif lines[0] == "unsat":
            return SolveOutcome.unsat
        else:
            return SolveOutcome.unknown

    def command_line(self) -> str:
        return f"{self._solver_path} -smt2 {self._file_path}"
