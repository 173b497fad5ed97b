from typing import Union
from tunnel_encoding.constraints.variable import BoolVar
from tunnel_encoding.constraints.connector import Connector

Formula_T = Union[Connector, BoolVar, bool]
