# graph_render.py
"""
Render a GraphModel as an interactive pyvis network (vis.js physics + drag).

The force simulation runs in the browser; this module only maps nodes and
links to pyvis with theme colors.
"""

import math
from typing import Dict

from pyvis.network import Network

from .config import GRAPH_HEIGHT_PX, GRAPH_LABEL_MAX_CHARS
from .relationship_graph import GROUP_DEVICE, GROUP_SUPPLIER, GraphModel

PHYSICS_OPTIONS = """
var options = {
  "nodes": { "borderWidth": 1.5, "font": { "size": 10 } },
  "edges": { "smooth": { "type": "dynamic" }, "color": { "opacity": 0.6 } },
  "interaction": { "hover": true, "tooltipDelay": 100, "dragNodes": true },
  "physics": {
    "enabled": true,
    "barnesHut": { "gravitationalConstant": -3000, "springLength": 100 },
    "stabilization": { "iterations": 200 }
  }
}
"""


def short_label(label: str, max_chars: int = GRAPH_LABEL_MAX_CHARS) -> str:
    if len(label) > max_chars:
        return label[:max_chars] + "..."
    return label


def group_color(group: str, colors: Dict[str, str]) -> str:
    if group == GROUP_SUPPLIER:
        return colors["primary"]
    if group == GROUP_DEVICE:
        return colors["accent"]
    return colors["secondary"]


def link_width(weight) -> float:
    try:
        return max(1.0, math.sqrt(float(weight)))
    except (TypeError, ValueError):
        return 1.0


def to_pyvis(model: GraphModel, colors: Dict[str, str],
             height: int = GRAPH_HEIGHT_PX) -> Network:
    """
    Build a directed pyvis Network from the model. Directed mode keeps
    parallel links (pyvis only de-duplicates edges in undirected graphs).
    """
    net = Network(
        height=f"{height}px",
        width="100%",
        bgcolor=colors["card"],
        font_color=colors["text"],
        directed=True,
    )

    for node in model.nodes:
        net.add_node(
            node.id,
            label=short_label(node.label),
            title=f"{node.group}: {node.label}",
            color=group_color(node.group, colors),
            size=12,
            group=node.group,
        )

    for link in model.links:
        net.add_edge(
            link.source,
            link.target,
            width=link_width(link.weight),
            title=str(link.weight),
            color=colors["secondary"],
        )

    net.set_options(PHYSICS_OPTIONS)
    return net
