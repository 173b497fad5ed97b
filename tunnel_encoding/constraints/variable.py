from typing import Dict, List, Tuple, Union

Key_T = Tuple[Union[str, int], ...]


class BoolVar:
    """
    Class that represents a boolean proposition in the encoding. Two variables denote the same proposition
    iff their keys are equal
    """

    def __init__(self, key: Key_T):
        if len(key) == 0 or type(key[0]) != str:
            raise ValueError(f"Variable key {key} must start with its role")
        self._key = tuple(key)

    @property
    def key(self) -> Key_T:
        return self._key

    @property
    def role(self) -> str:
        return self._key[0]

    @property
    def name(self) -> str:
        # Fields never contain "_", so splitting the name recovers the key
        return "_".join(str(field) for field in self._key)

    def __str__(self):
        return self.name

    def __repr__(self):
        return repr(self.name)

    def __eq__(self, other):
        return type(self) == type(other) and self.key == other.key

    def __hash__(self):
        return hash(self._key)


class VariableFactory:

    def __init__(self):
        self._instances: Dict[Key_T, BoolVar] = {}

    def create_variable(self, *key: Union[str, int]) -> BoolVar:
        if key in self._instances:
            return self._instances[key]
        created_var = BoolVar(key)
        self._instances[key] = created_var
        return created_var

    def variables_created(self) -> List[BoolVar]:
        return list(self._instances.values())
