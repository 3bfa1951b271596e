"""Tests for the relationship graph builder and its pyvis rendering."""

from datetime import date

from gudid_utils.graph_render import group_color, link_width, short_label, to_pyvis
from gudid_utils.records import Record
from gudid_utils.relationship_graph import GraphLink, GraphModel, GraphNode, build_graph, node_id
from gudid_utils.themes import PAINTER_STYLES, resolve_colors

COLORS = resolve_colors(PAINTER_STYLES[0])


def test_node_dedup_and_parallel_links():
    records = [
        Record(supplier_name="A", device_name="X", customer="C1", quantity=2),
        Record(supplier_name="A", device_name="X", customer="C2", quantity=3),
    ]
    model = build_graph(records)
    assert model.nodes == [
        GraphNode("supplier:A", "supplier", "A"),
        GraphNode("device:X", "device", "X"),
        GraphNode("customer:C1", "customer", "C1"),
        GraphNode("customer:C2", "customer", "C2"),
    ]
    assert model.links == [
        GraphLink("supplier:A", "device:X", 1),
        GraphLink("device:X", "customer:C1", 2),
        GraphLink("supplier:A", "device:X", 1),
        GraphLink("device:X", "customer:C2", 3),
    ]


def test_same_name_in_different_groups_stays_distinct():
    model = build_graph([Record(supplier_name="Acme", device_name="Acme", customer="Acme")])
    assert [n.id for n in model.nodes] == ["supplier:Acme", "device:Acme", "customer:Acme"]


def test_cap_takes_first_hundred_records():
    records = [
        Record(supplier_name=f"S{i}", device_name="D", customer="C", quantity=i,
               deliver_date=date(2024, 1, 1))
        for i in range(150)
    ]
    model = build_graph(records)
    assert len(model.links) == 200
    supplier_ids = [n.id for n in model.nodes if n.group == "supplier"]
    assert supplier_ids == [f"supplier:S{i}" for i in range(100)]
    assert model.links[-1] == GraphLink("device:D", "customer:C", 99)


def test_link_count_below_cap():
    records = [Record(supplier_name="S", device_name="D", customer="C")] * 7
    model = build_graph(records)
    assert len(model.links) == 14
    assert len(model.nodes) == 3


def test_custom_cap():
    records = [Record(supplier_name=f"S{i}") for i in range(10)]
    assert len(build_graph(records, cap=3).links) == 6


def test_empty_input():
    assert build_graph([]) == GraphModel()


def test_node_id():
    assert node_id("device", "Stent") == "device:Stent"


def test_to_networkx_keeps_parallel_links():
    records = [Record(supplier_name="A", device_name="X", customer="C1", quantity=4)] * 2
    G = build_graph(records).to_networkx()
    assert G.number_of_nodes() == 3
    assert G.number_of_edges() == 4
    assert G.nodes["supplier:A"]["group"] == "supplier"
    weights = sorted(d["weight"] for _, _, d in G.edges(data=True))
    assert weights == [1, 1, 4, 4]


def test_to_dict():
    model = build_graph([Record(supplier_name="A", device_name="X", customer="C", quantity=5)])
    out = model.to_dict()
    assert out["nodes"][0] == {"id": "supplier:A", "group": "supplier", "label": "A"}
    assert out["links"][1] == {"source": "device:X", "target": "customer:C", "weight": 5}


# =============================================================================
# pyvis rendering
# =============================================================================

def test_short_label():
    assert short_label("Stent") == "Stent"
    assert short_label("Insulin Pump X") == "Insulin Pu..."


def test_link_width():
    assert link_width(0) == 1.0
    assert link_width(1) == 1.0
    assert link_width(16) == 4.0
    assert link_width(None) == 1.0


def test_group_colors():
    assert group_color("supplier", COLORS) == COLORS["primary"]
    assert group_color("device", COLORS) == COLORS["accent"]
    assert group_color("customer", COLORS) == COLORS["secondary"]


def test_to_pyvis_maps_every_node_and_link():
    records = [
        Record(supplier_name="A", device_name="X", customer="C1", quantity=9),
        Record(supplier_name="A", device_name="X", customer="C1", quantity=9),
    ]
    model = build_graph(records)
    net = to_pyvis(model, COLORS, height=400)
    assert len(net.nodes) == len(model.nodes)
    assert len(net.edges) == len(model.links)
    labels = {n["id"]: n["label"] for n in net.nodes}
    assert labels["customer:C1"] == "C1"
