# The two symbols of the auxiliary stack. The stack starts and ends as
# a single base symbol.

symbol_4 = 4
symbol_6 = 6

stack_alphabet = (symbol_4, symbol_6)

base_symbol = symbol_4

# Default pysat solver used by the in-process oracle

default_sat_solver = "g3"

# Logic used when the reduction is written in SMT-LIB2

smt_logic = "QF_UF"
