import pandas as pd
from network.tunnel_network import TunnelNetwork
from solution_generation.steps import Step
from typing import List


def format_path(network: TunnelNetwork, path: List[Step]) -> str:
    if not path:
        return network.node_name(network.source)
    return '\n'.join(f"{network.node_name(step.source)} -{step.action}-> {network.node_name(step.target)}"
                     for step in path)


def stack_heights(path: List[Step]) -> List[int]:
    # Height of the stack top before the first step and after each step
    heights = [0]
    for step in path:
        heights.append(heights[-1] + step.action.height_delta)
    return heights


def path_to_dataframe(network: TunnelNetwork, path: List[Step]) -> pd.DataFrame:
    heights = stack_heights(path)
    rows = [{"position": pos, "action": str(step.action), "kind": step.action.kind.name,
             "source": network.node_name(step.source), "target": network.node_name(step.target),
             "height_before": heights[pos], "height_after": heights[pos + 1]}
            for pos, step in enumerate(path)]
    return pd.DataFrame(rows, columns=["position", "action", "kind", "source", "target",
                                       "height_before", "height_after"])
