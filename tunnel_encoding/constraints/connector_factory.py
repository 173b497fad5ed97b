import itertools
from tunnel_encoding.constraints.connector import Connector
from tunnel_encoding.constraints.formula import Formula_T
from tunnel_encoding.singleton import Singleton
from typing import Callable, Dict, Sequence, Tuple

Simplifier_T = Callable[[Connector], Formula_T]


class Connectors(metaclass=Singleton):
    """
    Registry of the boolean connectors. Each one is declared with its arity (-1 for any positive number of
    arguments), whether its arguments commute and the rule that simplifies it at the ground level
    """

    def __init__(self):
        self._signatures: Dict[str, Tuple[int, bool]] = dict()
        self._rules: Dict[str, Simplifier_T] = dict()

    def register(self, name: str, arity: int, is_commutative: bool) -> Callable[[Simplifier_T], Simplifier_T]:
        def decorator(rule: Simplifier_T) -> Simplifier_T:
            # The first registration wins
            self._signatures.setdefault(name, (arity, is_commutative))
            self._rules.setdefault(name, rule)
            return rule
        return decorator

    def create_connector(self, name: str, *args: Formula_T) -> Connector:
        if name not in self._signatures:
            raise ValueError(f"{name} is not a valid connector")
        arity, is_commutative = self._signatures[name]
        assert len(args) == arity if arity != -1 else len(args) > 0
        return Connector(name, is_commutative, *args)

    def simplify(self, connector: Connector) -> Formula_T:
        if connector.connector_name not in self._rules:
            raise ValueError(f"{connector.connector_name} is not a valid connector")
        return self._rules[connector.connector_name](connector)

    # Invariant: the returned formula is simplified at the ground level. As every sub-formula is built through
    # this method, the whole composed expression is simplified too
    def create_connector_and_simplify(self, name: str, *args: Formula_T) -> Formula_T:
        # The empty conjunction and the empty cardinality constraint hold, the empty disjunction does not
        if not args and name in ("and", "or", "atmost1"):
            return name != "or"
        return self.simplify(self.create_connector(name, *args))


_connectors = Connectors()


def _simplify_associative(connector: Connector, neutral: bool) -> Formula_T:
    # "and" has True as neutral element and False as absorbing one, "or" the other way round
    name = connector.connector_name
    flattened = []
    for argument in connector.arguments:
        if type(argument) == bool:
            if argument != neutral:
                return argument
        elif type(argument) == Connector and argument.connector_name == name:
            flattened.extend(argument.arguments)
        else:
            flattened.append(argument)

    if len(flattened) == 0:
        return neutral
    elif len(flattened) == 1:
        return flattened[0]
    return _connectors.create_connector(name, *flattened)


@_connectors.register("and", -1, True)
def _simplify_and(and_connector: Connector) -> Formula_T:
    return _simplify_associative(and_connector, True)


@_connectors.register("or", -1, True)
def _simplify_or(or_connector: Connector) -> Formula_T:
    return _simplify_associative(or_connector, False)


@_connectors.register("not", 1, True)
def _simplify_not(not_connector: Connector) -> Formula_T:
    argument = not_connector.arguments[0]
    if type(argument) == bool:
        return not argument
    elif type(argument) == Connector and argument.connector_name == "not":
        return argument.arguments[0]
    return not_connector


@_connectors.register("implies", 2, False)
def _simplify_implies(implies_connector: Connector) -> Formula_T:
    lhs, rhs = implies_connector.arguments
    if type(lhs) == bool:
        return rhs if lhs else True
    elif type(rhs) == bool:
        return True if rhs else _connectors.create_connector_and_simplify("not", lhs)
    return implies_connector


@_connectors.register("equal", 2, True)
def _simplify_equal(equal_connector: Connector) -> Formula_T:
    lhs, rhs = equal_connector.arguments
    if type(lhs) == bool and type(rhs) == bool:
        return lhs == rhs

    # A constant side reduces the equivalence to the other side or its negation
    if type(lhs) == bool:
        lhs, rhs = rhs, lhs
    if type(rhs) == bool:
        return lhs if rhs else _connectors.create_connector_and_simplify("not", lhs)
    # Syntactically equal sides
    elif lhs == rhs:
        return True
    return equal_connector


# At most one of the arguments holds. The CNF translation hands it to a cardinality encoding
@_connectors.register("atmost1", -1, True)
def _simplify_atmost1(atmost1_connector: Connector) -> Formula_T:
    arguments = atmost1_connector.arguments
    true_count = sum(1 for argument in arguments if type(argument) == bool and argument)
    rest = [argument for argument in arguments if type(argument) != bool]

    if true_count > 1:
        return False
    elif true_count == 1:
        # Every other argument is false
        return add_and(*(add_not(argument) for argument in rest))
    elif len(rest) <= 1:
        return True
    elif len(rest) == len(arguments):
        return atmost1_connector
    return _connectors.create_connector("atmost1", *rest)


# Methods to generate logical connective asserts.

def add_implies(form1: Formula_T, form2: Formula_T) -> Formula_T:
    return _connectors.create_connector_and_simplify("implies", form1, form2)


def add_and(*formulas: Formula_T) -> Formula_T:
    return _connectors.create_connector_and_simplify("and", *formulas)


def add_or(*formulas: Formula_T) -> Formula_T:
    return _connectors.create_connector_and_simplify("or", *formulas)


def add_not(form: Formula_T) -> Formula_T:
    return _connectors.create_connector_and_simplify("not", form)


def add_eq(form1: Formula_T, form2: Formula_T) -> Formula_T:
    return _connectors.create_connector_and_simplify("equal", form1, form2)


def add_atmost1(*formulas: Formula_T) -> Formula_T:
    return _connectors.create_connector_and_simplify("atmost1", *formulas)


def expand_atmost1(formulas: Sequence[Formula_T]) -> Formula_T:
    # Pairwise encoding: no two of them hold at the same time
    return add_and(*(add_or(add_not(first), add_not(second)) for first, second in itertools.combinations(formulas, 2)))
