"""Tests for infrastructure/adapters/graph_loader.py."""

import json
from pathlib import Path

import pytest

from faacheck.domain.exceptions import GraphFormatError
from faacheck.domain.model.edge import Edge
from faacheck.domain.model.enums import Layer
from faacheck.domain.model.module import Module, ModuleMetadata
from faacheck.infrastructure.adapters.graph_loader import load_graph, loads_graph, parse_graph


class TestModules:
    """Module records."""

    def test_preclassified_record(self) -> None:
        graph = parse_graph(
            {
                "modules": [
                    {"id": "features/auth/index.ts", "layer": "feature", "slice": "auth", "public": True}
                ]
            }
        )
        assert graph.modules == (
            Module(id="features/auth/index.ts", layer=Layer.FEATURE, slice="auth", is_public=True),
        )
        assert graph.entries == ()

    def test_preclassified_sliced_defaults_private(self) -> None:
        graph = parse_graph({"modules": [{"id": "x", "layer": "entities", "slice": "user"}]})
        assert not graph.modules[0].is_public

    def test_preclassified_unsliced_defaults_public(self) -> None:
        graph = parse_graph({"modules": [{"id": "x", "layer": "Shared"}]})
        assert graph.modules[0].is_public

    def test_is_public_alias(self) -> None:
        graph = parse_graph(
            {"modules": [{"id": "x", "layer": "entity", "slice": "user", "isPublic": True}]}
        )
        assert graph.modules[0].is_public

    def test_string_entry(self) -> None:
        graph = parse_graph({"modules": ["shared/lib/http.ts"]})
        assert graph.entries == (("shared/lib/http.ts", None),)

    def test_path_entry_with_overrides(self) -> None:
        graph = parse_graph({"modules": [{"path": "features/auth/model.ts", "public": True}]})
        assert graph.entries == (("features/auth/model.ts", ModuleMetadata(is_public=True)),)

    def test_path_entry_without_overrides(self) -> None:
        graph = parse_graph({"modules": [{"path": "features/auth/model.ts"}]})
        assert graph.entries == (("features/auth/model.ts", None),)

    def test_unknown_layer(self) -> None:
        with pytest.raises(GraphFormatError, match=r"modules\[0\]: unknown layer"):
            parse_graph({"modules": [{"id": "x", "layer": "pages"}]})

    def test_sliced_without_slice(self) -> None:
        with pytest.raises(GraphFormatError, match="must have a slice"):
            parse_graph({"modules": [{"id": "x", "layer": "feature"}]})

    def test_missing_id(self) -> None:
        with pytest.raises(GraphFormatError, match="'id'"):
            parse_graph({"modules": [{"layer": "app"}]})

    def test_bad_public_type(self) -> None:
        with pytest.raises(GraphFormatError, match="'public' must be a boolean"):
            parse_graph({"modules": [{"path": "x", "public": "yes"}]})

    def test_bad_record_type(self) -> None:
        with pytest.raises(GraphFormatError, match=r"modules\[1\]"):
            parse_graph({"modules": ["x", 42]})


class TestEdges:
    """Edge records."""

    @pytest.mark.parametrize(
        "record",
        [{"from": "a", "to": "b"}, {"source": "a", "target": "b"}, ["a", "b"]],
    )
    def test_forms(self, record: object) -> None:
        assert parse_graph({"edges": [record]}).edges == (Edge(source="a", target="b"),)

    def test_order_preserved(self) -> None:
        graph = parse_graph({"edges": [["b", "c"], ["a", "b"]]})
        assert [e.source for e in graph.edges] == ["b", "a"]

    @pytest.mark.parametrize("record", [["a"], {"from": "a"}, ["a", 1], "a→b"])
    def test_malformed(self, record: object) -> None:
        with pytest.raises(GraphFormatError, match=r"edges\[0\]"):
            parse_graph({"edges": [record]})

    def test_empty_end(self) -> None:
        with pytest.raises(GraphFormatError, match="must not be empty"):
            parse_graph({"edges": [["", "b"]]})


class TestDocument:
    """Document level errors."""

    def test_not_object(self) -> None:
        with pytest.raises(GraphFormatError, match="document must be an object"):
            parse_graph([])

    def test_modules_not_list(self) -> None:
        with pytest.raises(GraphFormatError, match="'modules' must be a list"):
            parse_graph({"modules": {}})

    def test_invalid_json(self) -> None:
        with pytest.raises(GraphFormatError, match="invalid JSON"):
            loads_graph("{not json")

    def test_empty_document(self) -> None:
        graph = loads_graph("{}")
        assert graph.module_count == 0
        assert graph.edges == ()


class TestLoadGraph:
    """Tests for load_graph()."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_text(json.dumps({"modules": ["app/main.ts"], "edges": []}), encoding="utf-8")
        assert load_graph(path).entries == (("app/main.ts", None),)

    def test_source_in_error(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(GraphFormatError) as exc_info:
            load_graph(path)
        assert exc_info.value.source == str(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "absent.json")

    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_bytes(b'{"modules": ["app/\xff.ts"], "edges": []}')
        with pytest.raises(GraphFormatError, match="not valid UTF-8") as exc_info:
            load_graph(path)
        assert exc_info.value.source == str(path)
