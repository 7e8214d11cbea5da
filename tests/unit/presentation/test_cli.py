"""Tests for presentation/cli.py."""

import io
import json
from pathlib import Path

import pytest

from faacheck.presentation.cli import EXIT_ERROR, EXIT_OK, EXIT_VIOLATIONS, main

CLEAN_GRAPH = {
    "modules": [
        "app/main.ts",
        "features/auth/index.ts",
        "entities/user/index.ts",
        "shared/lib/http.ts",
    ],
    "edges": [
        ["app/main.ts", "features/auth/index.ts"],
        ["features/auth/index.ts", "entities/user/index.ts"],
        ["entities/user/index.ts", "shared/lib/http.ts"],
    ],
}

BROKEN_GRAPH = {
    "modules": ["features/auth/index.ts", "features/cart/index.ts"],
    "edges": [["features/auth/index.ts", "features/cart/index.ts"]],
}


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def write_graph(tmp_path: Path, data: object) -> str:
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestExitStatus:
    """Exit status reflects the verdict."""

    def test_pass(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([write_graph(tmp_path, CLEAN_GRAPH)]) == EXIT_OK
        assert "Result: PASSED" in capsys.readouterr().out

    def test_violations(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([write_graph(tmp_path, BROKEN_GRAPH)]) == EXIT_VIOLATIONS
        assert "[HorizontalImport]" in capsys.readouterr().out

    def test_missing_graph(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "absent.json")]) == EXIT_ERROR
        assert "faacheck: error:" in capsys.readouterr().err

    def test_malformed_graph(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([write_graph(tmp_path, {"modules": 3})]) == EXIT_ERROR
        assert "'modules' must be a list" in capsys.readouterr().err

    def test_unclassifiable_module(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([write_graph(tmp_path, {"modules": ["misc/x.ts"]})]) == EXIT_ERROR
        assert "Cannot classify" in capsys.readouterr().err

    def test_unknown_edge_end(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        graph = {"modules": ["app/main.ts"], "edges": [["app/main.ts", "shared/x.ts"]]}
        assert main([write_graph(tmp_path, graph)]) == EXIT_ERROR
        assert "not in the module set" in capsys.readouterr().err

    def test_graph_not_utf8(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "graph.json"
        path.write_bytes(b'{"modules": ["app/\xff.ts"], "edges": []}')
        assert main([str(path)]) == EXIT_ERROR
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_stdin_not_utf8(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(b'{"modules": ["\xff"]}'), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        assert main(["-"]) == EXIT_ERROR
        assert "<stdin>" in capsys.readouterr().err

    def test_config_not_a_table(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "faa.toml"
        config.write_text("[tool]\nfaacheck = 1\n", encoding="utf-8")
        assert main([write_graph(tmp_path, CLEAN_GRAPH), "--config", str(config)]) == EXIT_ERROR
        assert "must be a table" in capsys.readouterr().err

    def test_zero_workers(self, tmp_path: Path) -> None:
        assert main([write_graph(tmp_path, CLEAN_GRAPH), "--workers", "0"]) == EXIT_ERROR


class TestOptions:
    """Command line options."""

    def test_json_format(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([write_graph(tmp_path, BROKEN_GRAPH), "--format", "json"])
        data = json.loads(capsys.readouterr().out)
        assert data["verdict"] == "Fail"
        assert data["violations"][0]["kind"] == "HorizontalImport"

    def test_console_format(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([write_graph(tmp_path, CLEAN_GRAPH), "--format", "console"]) == EXIT_OK
        assert "PASS" in capsys.readouterr().out

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(BROKEN_GRAPH)))
        assert main(["-"]) == EXIT_VIOLATIONS

    def test_workers(self, tmp_path: Path) -> None:
        assert main([write_graph(tmp_path, BROKEN_GRAPH), "--workers", "4"]) == EXIT_VIOLATIONS

    def test_explicit_config(self, tmp_path: Path) -> None:
        config = tmp_path / "faa.toml"
        config.write_text('[tool.faacheck]\nsource-root = "src"\n', encoding="utf-8")
        graph = write_graph(tmp_path, {"modules": ["src/features/auth/index.ts"]})
        assert main([graph, "--config", str(config)]) == EXIT_OK

    def test_default_config_from_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.faacheck.layers]\nshared = ["lib"]\n', encoding="utf-8"
        )
        graph = write_graph(tmp_path, {"modules": ["lib/date.ts"]})
        assert main([graph]) == EXIT_OK

    def test_bad_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "faa.toml"
        config.write_text("[tool.faacheck]\nmax-workers = 'many'\n", encoding="utf-8")
        assert main([write_graph(tmp_path, CLEAN_GRAPH), "--config", str(config)]) == EXIT_ERROR
        assert "max-workers" in capsys.readouterr().err

    def test_no_cycles(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        graph = {
            "modules": ["features/auth/index.ts", "features/auth/model.ts"],
            "edges": [
                ["features/auth/index.ts", "features/auth/model.ts"],
                ["features/auth/model.ts", "features/auth/index.ts"],
            ],
        }
        path = write_graph(tmp_path, graph)

        main([path])
        assert "Cycles: 1" in capsys.readouterr().out

        main([path, "--no-cycles"])
        assert "Cycles: 0" in capsys.readouterr().out

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "faacheck" in capsys.readouterr().out
