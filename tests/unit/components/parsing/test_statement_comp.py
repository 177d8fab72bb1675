"""
Unit tests for node and edge field extraction.

Malformed statements must yield None rather than raise.
"""

import pytest

from cdepgraph.components.parsing.statement_comp import (
    extract_edge_endpoints,
    extract_node_id,
    extract_node_label,
)


@pytest.mark.unit
class TestExtractNodeId:
    def test_id_before_attribute_list(self):
        assert extract_node_id('Node1 [label="ADC_Init",height=0.2]') == "Node1"

    def test_id_without_attribute_list(self):
        assert extract_node_id("Node1") == "Node1"

    def test_quoted_id(self):
        assert extract_node_id('"Node 1" [label="x"]') == "Node 1"

    def test_missing_id(self):
        assert extract_node_id('[label="ADC_Init"]') is None


@pytest.mark.unit
class TestExtractNodeLabel:
    def test_first_attribute_up_to_comma(self):
        assert extract_node_label('Node1 [label="ADC_Init",height=0.2,width=0.4]') == "ADC_Init"

    def test_single_attribute_up_to_bracket(self):
        assert extract_node_label('N1 [label="BAL_funcA"]') == "BAL_funcA"

    def test_unquoted_value(self):
        assert extract_node_label("N1 [label=HAL]") == "HAL"

    def test_whitespace_around_assignment(self):
        assert extract_node_label('N1 [ label = "BMS_GetState" , shape=box]') == "BMS_GetState"

    @pytest.mark.parametrize(
        "value",
        [
            "Node1",
            "Node1 []",
            "Node1 [label]",
            'Node1 [="orphan"]',
            'Node1 [label=""]',
        ],
    )
    def test_malformed_returns_none(self, value):
        assert extract_node_label(value) is None


@pytest.mark.unit
class TestExtractEdgeEndpoints:
    def test_with_attributes(self):
        value = 'Node1 -> Node2 [color="midnightblue",fontsize="10"];'
        assert extract_edge_endpoints(value) == ("Node1", "Node2")

    def test_without_attributes(self):
        assert extract_edge_endpoints("N1 -> N99;") == ("N1", "N99")

    def test_without_terminator(self):
        assert extract_edge_endpoints("N1->N2") == ("N1", "N2")

    def test_quoted_ids(self):
        assert extract_edge_endpoints('"a" -> "b";') == ("a", "b")

    def test_chain_keeps_first_hop(self):
        assert extract_edge_endpoints("A -> B -> C;") == ("A", "B")

    @pytest.mark.parametrize("value", ["-> N2;", "N1 -> ;", "N1 -> [color=red];", "N1 N2;"])
    def test_malformed_returns_none(self, value):
        assert extract_edge_endpoints(value) is None
