from typing import List


class Connector:

    def __init__(self, name: str, is_commutative: bool, *args):
        self._name = name
        self._is_commutative = is_commutative
        self._args = list(args)

    @property
    def connector_name(self) -> str:
        return self._name

    @property
    def arguments(self) -> List['Formula_T']:
        return self._args

    @property
    def is_commutative(self) -> bool:
        return self._is_commutative

    def __str__(self):
        return self._name + "(" + ','.join([str(arg) for arg in self._args]) + ")"

    def __repr__(self):
        return repr(self._name + "(" + ','.join([str(arg) for arg in self._args]) + ")")

    # Commutative connectors are compared as multisets of arguments
    def __eq__(self, other):
        if type(self) != type(other) or self.is_commutative != other.is_commutative:
            return False
        if self.connector_name != other.connector_name or len(self.arguments) != len(other.arguments):
            return False
        if not self.is_commutative:
            return all(arg1 == arg2 for arg1, arg2 in zip(self.arguments, other.arguments))

        remaining = list(other.arguments)
        for arg in self.arguments:
            for i, candidate in enumerate(remaining):
                if type(arg) == type(candidate) and arg == candidate:
                    del remaining[i]
                    break
            else:
                return False
        return True
