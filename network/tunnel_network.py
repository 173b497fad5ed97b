import json
import networkx as nx
from typing import Any, Dict, Iterable, List, Tuple, Union

Node_Ref_T = Union[int, str]


class TunnelNetwork:
    """
    Directed graph of a tunnel network. Nodes are indexed 0..num_nodes-1 and carry a display name. The reduction
    only reads it
    """

    def __init__(self, names: List[str], edges: Iterable[Tuple[int, int]], source: int, destination: int):
        self._graph = nx.DiGraph()
        for node, name in enumerate(names):
            self._graph.add_node(node, name=str(name))

        for u, v in edges:
            self._check_node(u)
            self._check_node(v)
            self._graph.add_edge(u, v)

        self._check_node(source)
        self._check_node(destination)
        self._source = source
        self._destination = destination

    @classmethod
    def from_file(cls, filename: str) -> 'TunnelNetwork':
        with open(filename, 'r') as fp:
            return cls.from_fp(fp)

    @classmethod
    def from_fp(cls, filepointer) -> 'TunnelNetwork':
        return cls.from_dict(json.load(filepointer))

    @classmethod
    def from_string(cls, json_string: str) -> 'TunnelNetwork':
        return cls.from_dict(json.loads(json_string))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TunnelNetwork':
        """
        Builds the network from a dict with keys "nodes" (list of names), "edges" (pairs of node references),
        "source" and "destination". A node reference is either its index or its name
        """
        for field in ("nodes", "source", "destination"):
            if field not in data:
                raise ValueError(f"Missing field {field} in network description")

        names = [str(name) for name in data["nodes"]]
        if len(set(names)) != len(names):
            raise ValueError("Node names must be unique")
        index = {name: node for node, name in enumerate(names)}

        def resolve(reference: Node_Ref_T) -> int:
            # bool is a subclass of int and is never a valid reference
            if type(reference) == int:
                return reference
            elif type(reference) == str and reference in index:
                return index[reference]
            raise ValueError(f"Unknown node {reference}")

        edges = []
        for edge in data.get("edges", []):
            if len(edge) != 2:
                raise ValueError(f"Edge {edge} must have exactly two ends")
            edges.append((resolve(edge[0]), resolve(edge[1])))

        return cls(names, edges, resolve(data["source"]), resolve(data["destination"]))

    def _check_node(self, node: int) -> None:
        if type(node) != int or not 0 <= node < self.num_nodes:
            raise ValueError(f"Node {node} is not a valid index for a network with {self.num_nodes} nodes")

    @property
    def num_nodes(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def source(self) -> int:
        return self._source

    @property
    def destination(self) -> int:
        return self._destination

    @property
    def graph(self) -> nx.DiGraph:
        return self._graph

    def node_name(self, node: int) -> str:
        return self._graph.nodes[node]["name"]

    def successors(self, node: int) -> List[int]:
        return sorted(self._graph.successors(node))

    def has_edge(self, u: int, v: int) -> bool:
        return self._graph.has_edge(u, v)

    def edges(self) -> List[Tuple[int, int]]:
        return sorted(self._graph.edges())

    def __str__(self):
        return f"TunnelNetwork({self.num_nodes} nodes, {self._graph.number_of_edges()} edges, " \
               f"{self.node_name(self.source)} -> {self.node_name(self.destination)})"
