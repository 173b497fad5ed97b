import random
import unittest
from network.tunnel_network import TunnelNetwork
from solution_generation.path_search import solve_reduction, find_path, find_shortest_path
from solution_generation.path_report import stack_heights
from solution_generation.path_extraction import extract_path
from solution_generation.steps import Action, ActionKind, Step
from tunnel_encoding.reduction.reduction_encoding import build_reduction
from tunnel_encoding.reduction.reduction_variables import ReductionVariables
from tunnel_encoding.solver.solver import SolveOutcome
from tunnel_sat.oracle import Oracle
from verification.path_verify import verify_path


def chain_network(size: int) -> TunnelNetwork:
    return TunnelNetwork([f"n{i}" for i in range(size)], [(i, i + 1) for i in range(size - 1)], 0, size - 1)


def cycle_network() -> TunnelNetwork:
    return TunnelNetwork(["0", "1", "2"], [(0, 1), (1, 2), (2, 0)], 0, 0)


class TestScenarios(unittest.TestCase):

    def test_single_edge(self):
        network = TunnelNetwork(["0", "1"], [(0, 1)], 0, 1)
        path = find_path(network, 1, Oracle())
        self.assertEqual(path, [Step(Action.TRANSMIT_4, 0, 1)])

    def test_single_edge_too_long(self):
        network = TunnelNetwork(["0", "1"], [(0, 1)], 0, 1)
        self.assertIsNone(find_path(network, 2, Oracle()))

    def test_missing_edge(self):
        network = TunnelNetwork(["0", "1"], [], 0, 1)
        self.assertIsNone(find_path(network, 1, Oracle()))

    def test_reversed_edge(self):
        network = TunnelNetwork(["0", "1"], [(1, 0)], 0, 1)
        self.assertIsNone(find_path(network, 1, Oracle()))

    def test_cycle_back_to_source(self):
        network = cycle_network()
        path = find_path(network, 3, Oracle())
        self.assertIsNotNone(path)
        self.assertEqual([step.target for step in path], [1, 2, 0])
        self.assertEqual(verify_path(network, path, 3), [])

    def test_cycle_wrong_lengths(self):
        # No self-loop for length 1, and the inner nodes cannot be repeated
        network = cycle_network()
        for length in [1, 2, 4, 6]:
            self.assertIsNone(find_path(network, length, Oracle()))

    def test_cycle_through_inner_node_twice(self):
        # Going through c forces a second visit to b
        network = TunnelNetwork(["a", "b", "c"], [(0, 1), (1, 2), (2, 1), (1, 0)], 0, 0)
        self.assertIsNotNone(find_path(network, 2, Oracle()))
        self.assertIsNone(find_path(network, 4, Oracle()))

    def test_length_zero(self):
        self.assertEqual(find_path(cycle_network(), 0, Oracle()), [])
        self.assertIsNone(find_path(chain_network(2), 0, Oracle()))

    def test_chain(self):
        network = chain_network(5)
        path = find_path(network, 4, Oracle())
        self.assertIsNotNone(path)
        self.assertEqual([step.source for step in path], [0, 1, 2, 3])
        self.assertEqual(verify_path(network, path, 4), [])
        heights = stack_heights(path)
        self.assertEqual(heights[0], 0)
        self.assertEqual(heights[-1], 0)

    def test_chain_wrong_lengths(self):
        network = chain_network(5)
        for length in [1, 2, 3, 5]:
            self.assertIsNone(find_path(network, length, Oracle()))

    def test_forced_push_and_pop(self):
        network = chain_network(3)
        sf = ReductionVariables()
        with Oracle() as oracle:
            # Node 1 is reached one cell above the base, holding 6
            oracle.assert_hard(build_reduction(network, 2, sf), sf.x(1, 1, 1), sf.y6(1, 1))
            self.assertEqual(oracle.check_sat(), SolveOutcome.sat)
            path = extract_path(oracle.get_assignment(), network, 2, sf)

        self.assertEqual([step.action.kind for step in path], [ActionKind.push, ActionKind.pop])
        self.assertEqual(path, [Step(Action.PUSH_4_6, 0, 1), Step(Action.POP_4_6, 1, 2)])
        self.assertEqual(path[0].action.symbols, path[1].action.symbols)
        self.assertEqual(stack_heights(path), [0, 1, 0])
        self.assertEqual(verify_path(network, path, 2), [])

    def test_push_needs_room_for_pop(self):
        # Length 1 leaves no step to pop what was pushed
        network = chain_network(2)
        sf = ReductionVariables()
        with Oracle() as oracle:
            oracle.assert_hard(build_reduction(network, 1, sf), sf.x(1, 1, 1))
            self.assertEqual(oracle.check_sat(), SolveOutcome.unsat)

    def test_branching(self):
        # Two routes from a to d, of lengths 2 and 3
        network = TunnelNetwork(["a", "b", "c", "d"], [(0, 1), (1, 3), (0, 2), (2, 1)], 0, 3)
        path = find_path(network, 3, Oracle())
        self.assertEqual([(step.source, step.target) for step in path], [(0, 2), (2, 1), (1, 3)])
        self.assertEqual(verify_path(network, path, 3), [])

        path = find_path(network, 2, Oracle())
        self.assertEqual([(step.source, step.target) for step in path], [(0, 1), (1, 3)])

    def test_solve_reduction_model(self):
        network = TunnelNetwork(["0", "1"], [(0, 1)], 0, 1)
        sf = ReductionVariables()
        assignment = solve_reduction(network, 1, Oracle(), sf)
        self.assertTrue(assignment.value(sf.x(0, 0, 0)))
        self.assertTrue(assignment.value(sf.x(1, 1, 0)))
        self.assertFalse(assignment.value(sf.x(1, 0, 0)))
        self.assertTrue(assignment.value(sf.y4(1, 0)))
        self.assertFalse(assignment.value(sf.y6(1, 0)))

    def test_shortest_path(self):
        network = TunnelNetwork(["a", "b", "c", "d"], [(0, 1), (1, 3), (0, 2), (2, 1)], 0, 3)
        length, path = find_shortest_path(network, Oracle)
        self.assertEqual(length, 2)
        self.assertEqual(len(path), 2)

    def test_shortest_path_unreachable(self):
        network = TunnelNetwork(["a", "b", "c"], [(0, 1), (2, 1)], 0, 2)
        self.assertIsNone(find_shortest_path(network, Oracle))

    def test_shortest_path_limit(self):
        network = chain_network(4)
        self.assertIsNone(find_shortest_path(network, Oracle, max_length=2))
        self.assertEqual(find_shortest_path(network, Oracle, max_length=3)[0], 3)


def has_simple_walk(network: TunnelNetwork, length: int) -> bool:
    # Exhaustive search. The source may close the walk when it is also the destination
    source, destination = network.source, network.destination

    def extend(node, visited, remaining):
        if remaining == 0:
            return node == destination
        for succ in network.successors(node):
            closes_cycle = remaining == 1 and succ == source == destination
            if (succ not in visited or closes_cycle) and extend(succ, visited | {succ}, remaining - 1):
                return True
        return False

    return extend(source, {source}, length)


class TestRandomNetworks(unittest.TestCase):

    def test_agrees_with_exhaustive_search(self):
        rng = random.Random(20240611)
        for trial in range(40):
            size = rng.randint(2, 5)
            edges = [(u, v) for u in range(size) for v in range(size) if u != v and rng.random() < 0.4]
            network = TunnelNetwork([f"n{i}" for i in range(size)], edges, rng.randrange(size), rng.randrange(size))
            length = rng.randint(0, size)
            with self.subTest(trial=trial, edges=edges, source=network.source, destination=network.destination,
                              length=length):
                path = find_path(network, length, Oracle())
                self.assertEqual(path is not None, has_simple_walk(network, length))
                if path is not None:
                    self.assertEqual(len(path), length)
                    self.assertEqual(verify_path(network, path, length), [])


if __name__ == '__main__':
    unittest.main()
