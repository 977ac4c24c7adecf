"""
Tests for JSON rendering of generated trees.
"""

import json

import pytest
from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import XSD

from fixtures import EX, INVERSE_EDGE_TTL, PREFIXES, parse_turtle
from rdf_tree.core.name_resolver import NameResolver
from rdf_tree.models import ResultShape, TreeGenerationResult, TreeNode
from rdf_tree.render import JsonTreeWriter, render_identifier, render_literal
from rdf_tree.tree.generator import generate_rdf_tree


@pytest.fixture
def writer():
    return JsonTreeWriter()


@pytest.mark.unit
class TestRenderLiteral:
    """Tests for literal to JSON scalar conversion."""

    @pytest.mark.parametrize("literal, expected", [
        (Literal("text"), "text"),
        (Literal("hallo", lang="de"), "hallo"),
        (Literal(7), 7),
        (Literal(2.5), 2.5),
        (Literal(True), True),
        (Literal("1.50", datatype=XSD.decimal), "1.50"),
        (Literal("2024-01-01", datatype=XSD.date), "2024-01-01"),
        (Literal("NaN", datatype=XSD.double), "NaN"),
        (Literal(float("inf")), "INF"),
        (Literal("-INF", datatype=XSD.double), "-INF"),
    ])
    def test_render_literal(self, literal, expected):
        assert render_literal(literal) == expected

    def test_render_identifier(self):
        assert render_identifier(URIRef(EX + "a")) == EX + "a"
        assert render_identifier(BNode("b1")) == "_:b1"


@pytest.mark.unit
class TestJsonTreeWriter:
    """Tests for whole-result rendering."""

    def test_item(self, writer, item_graph):
        rendered = writer.as_dict(generate_rdf_tree(item_graph))

        assert rendered == {
            "result": {
                "@id": EX + "alice",
                "type": {"@id": EX + "Person"},
                "age": 42,
                "name": "Alice",
                "knows": {
                    "@id": EX + "bob",
                    "type": {"@id": EX + "Person"},
                    "name": "Bob",
                },
            }
        }
        assert list(rendered["result"]) == ["@id", "type", "age", "name", "knows"]

    def test_linked_list(self, writer, linked_list_graph):
        rendered = writer.as_dict(generate_rdf_tree(linked_list_graph))

        assert rendered == {
            "results": [
                {"@id": EX + "first", "label": "one"},
                {"@id": EX + "second", "label": "two"},
                {"@id": EX + "third", "label": "three"},
            ]
        }

    def test_empty(self, writer):
        result = TreeGenerationResult(
            tree=TreeNode(),
            shape=ResultShape.UNKNOWN,
            name_resolver=NameResolver(Graph()),
        )

        assert writer.as_dict(result) == {}
        assert writer.as_json(result) == "{}"

    def test_inverse_edges_under_reverse(self, writer):
        rendered = writer.as_dict(generate_rdf_tree(parse_turtle(INVERSE_EDGE_TTL)))

        assert rendered == {
            "result": {
                "@id": EX + "b",
                "@reverse": {
                    "points": {"@id": EX + "a", "label": "A"},
                },
            }
        }

    def test_repeated_predicate_becomes_array(self, writer):
        graph = parse_turtle(PREFIXES + """
result:this result:item :x .
:x :tag "b", "a", "c" .
""")

        rendered = writer.as_dict(generate_rdf_tree(graph))

        assert rendered["result"]["tag"] == ["a", "b", "c"]

    def test_colliding_names_are_qualified(self, writer):
        graph = parse_turtle("""
@prefix result: <http://purl.org/ontology/rdf-result/> .
@prefix zz: <http://a.example.org/> .
@prefix aa: <http://b.example.org/> .
result:this result:item <http://example.org/x> .
<http://example.org/x> zz:name "from a" ;
    aa:name "from b" .
""")

        rendered = writer.as_dict(generate_rdf_tree(graph))

        assert rendered == {
            "result": {
                "@id": "http://example.org/x",
                "aa:name": "from b",
                "zz:name": "from a",
            }
        }

    def test_name_overrides(self, writer, item_graph):
        result = generate_rdf_tree(item_graph, name_overrides={EX + "name": "fullName"})

        rendered = writer.as_dict(result)

        assert rendered["result"]["fullName"] == "Alice"
        assert "name" not in rendered["result"]

    def test_writer_resolver_takes_precedence(self, item_graph):
        result = generate_rdf_tree(item_graph)
        resolver = NameResolver(item_graph, name_overrides={EX + "age": "years"})

        rendered = JsonTreeWriter(resolver).as_dict(result)

        assert rendered["result"]["years"] == 42

    def test_blank_nodes(self, writer):
        graph = parse_turtle(PREFIXES + """
result:this result:item :x .
:x :address [ :city "Oslo" ] .
""")

        address = writer.as_dict(generate_rdf_tree(graph))["result"]["address"]

        assert address["@id"].startswith("_:")
        assert address["city"] == "Oslo"

    def test_as_json(self, writer, item_graph):
        result = generate_rdf_tree(item_graph)

        pretty = writer.as_json(result)
        compact = writer.as_json(result, indent=None)

        assert json.loads(pretty) == json.loads(compact) == writer.as_dict(result)
        assert "\n" not in compact
