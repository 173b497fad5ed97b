from tunnel_encoding.constraints.variable import BoolVar, Key_T
from typing import Dict, Iterable


class Assignment:
    """
    Truth values of the variables in a model. Variables the model does not mention are false
    """

    def __init__(self, values: Dict[Key_T, bool]):
        self._values = dict(values)

    @classmethod
    def from_true_variables(cls, variables: Iterable[BoolVar]) -> 'Assignment':
        return cls({var.key: True for var in variables})

    def value(self, var: BoolVar) -> bool:
        return self._values.get(var.key, False)

    def true_keys(self):
        return sorted((key for key, value in self._values.items() if value), key=str)

    def __len__(self):
        return len(self._values)

    def __str__(self):
        return ' '.join(str(key) for key in self.true_keys())
