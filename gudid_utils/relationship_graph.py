"""
Relationship Graph Builder for GUDID Chronicles

Derives a tripartite supplier -> device -> customer node/link model from the
records feeding the force-directed graph.

Node ids (namespaced so equal names in different groups never collide):
- supplier:<Suppliername>
- device:<DeviceName>
- customer:<customer>

Links (never merged; repeated record pairs give parallel links):
- supplier -> device, weight 1
- device -> customer, weight = record quantity

Only the first GRAPH_RECORD_CAP records are used, to bound layout cost.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import networkx as nx

from .config import GRAPH_RECORD_CAP
from .records import Record

GROUP_SUPPLIER = "supplier"
GROUP_DEVICE = "device"
GROUP_CUSTOMER = "customer"

NODE_GROUPS = (GROUP_SUPPLIER, GROUP_DEVICE, GROUP_CUSTOMER)


@dataclass
class GraphNode:
    id: str
    group: str
    label: str


@dataclass
class GraphLink:
    source: str
    target: str
    weight: int


@dataclass
class GraphModel:
    nodes: List[GraphNode] = field(default_factory=list)
    links: List[GraphLink] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "nodes": [{"id": n.id, "group": n.group, "label": n.label} for n in self.nodes],
            "links": [
                {"source": l.source, "target": l.target, "weight": l.weight}
                for l in self.links
            ],
        }

    def to_networkx(self) -> nx.MultiDiGraph:
        """Directed multigraph; parallel links are kept as separate edges."""
        G = nx.MultiDiGraph()
        for node in self.nodes:
            G.add_node(node.id, group=node.group, label=node.label)
        for link in self.links:
            G.add_edge(link.source, link.target, weight=link.weight)
        return G


def node_id(group: str, value: str) -> str:
    """Namespace a raw field value by its node group."""
    return f"{group}:{value}"


def build_graph(records: Sequence[Record], cap: int = GRAPH_RECORD_CAP) -> GraphModel:
    """
    Build the GraphModel from the first `cap` records (a prefix, never a sample).

    Nodes appear in first-seen order. Each record adds exactly two links.
    """
    nodes: List[GraphNode] = []
    links: List[GraphLink] = []
    seen_ids = set()

    for record in records[:cap]:
        sup = node_id(GROUP_SUPPLIER, record.supplier_name)
        dev = node_id(GROUP_DEVICE, record.device_name)
        cust = node_id(GROUP_CUSTOMER, record.customer)

        for nid, group, label in (
            (sup, GROUP_SUPPLIER, record.supplier_name),
            (dev, GROUP_DEVICE, record.device_name),
            (cust, GROUP_CUSTOMER, record.customer),
        ):
            if nid not in seen_ids:
                nodes.append(GraphNode(id=nid, group=group, label=label))
                seen_ids.add(nid)

        links.append(GraphLink(source=sup, target=dev, weight=1))
        links.append(GraphLink(source=dev, target=cust, weight=record.quantity))

    return GraphModel(nodes=nodes, links=links)
