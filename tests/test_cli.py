"""Tests for the generate_digraph command-line entry point."""

import json

import pytest

from generate_digraph import build_parser, build_run_config, main
from mkdigraph.config import DEFAULT_CONFIG, config_to_json
from mkdigraph.io import parse_dot, parse_text


def _run(capsys, *argv: str) -> str:
    main(list(argv))
    return capsys.readouterr().out


class TestFlags:
    """Flags map onto the run configuration."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        config = build_run_config(args)
        assert config == DEFAULT_CONFIG

    def test_single_dash_flags(self):
        args = build_parser().parse_args(
            ["-n", "7", "-edges", "3", "-prob", "0.25", "-loops",
             "-multiedges", "-dot", "-o", "out.dot"]
        )
        config = build_run_config(args)
        assert config.graph.n_vertices == 7
        assert config.graph.max_edges == 3
        assert config.graph.edge_prob == 0.25
        assert config.graph.allow_loops is True
        assert config.graph.allow_multi_edges is True
        assert config.output.format == "dot"
        assert config.output.path == "out.dot"

    def test_flags_override_config_file(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text(config_to_json(DEFAULT_CONFIG))
        data = json.loads(path.read_text())
        data["graph"]["n_vertices"] = 40
        data["graph"]["allow_loops"] = True
        data["seed"] = 5
        path.write_text(json.dumps(data))

        args = build_parser().parse_args(["--config", str(path), "-n", "12"])
        config = build_run_config(args)
        assert config.graph.n_vertices == 12
        assert config.graph.allow_loops is True
        assert config.seed == 5

    def test_words_file_loaded(self, tmp_path):
        words = tmp_path / "words"
        words.write_text("alpha\nbeta\nalpha\n")
        args = build_parser().parse_args(["-words", str(words)])
        config = build_run_config(args)
        assert config.graph.labels == ("alpha", "beta")


class TestGeneration:
    """End-to-end runs through main()."""

    def test_text_output(self, capsys):
        out = _run(capsys, "-n", "10", "-prob", "1", "--seed", "1")
        parsed = parse_text(out.splitlines())
        tails = {t for t, _ in parsed.edges} | parsed.isolated
        assert tails == {str(i) for i in range(10)}
        assert "9" in parsed.isolated
        assert all(int(h) > int(t) for t, h in parsed.edges)

    def test_dot_output(self, capsys):
        out = _run(capsys, "-n", "5", "-dot", "--seed", "1")
        assert out.startswith("digraph {\n")
        assert out.endswith("}\n")
        parse_dot(out.splitlines())

    def test_single_vertex_with_loops(self, capsys):
        out = _run(
            capsys, "-n", "1", "-edges", "2", "-prob", "1",
            "-loops", "-multiedges",
        )
        assert out == "0 0\n0 0\n"

    def test_zero_vertices(self, capsys):
        assert _run(capsys, "-n", "0") == ""

    def test_same_seed_same_output(self, capsys):
        first = _run(capsys, "-n", "30", "--seed", "11")
        second = _run(capsys, "-n", "30", "--seed", "11")
        assert first == second

    def test_output_file(self, tmp_path, capsys):
        out_path = tmp_path / "graph.txt"
        out = _run(capsys, "-n", "4", "-prob", "0", "-o", str(out_path))
        assert out == ""
        assert out_path.read_text() == "0\n1\n2\n3\n"

    def test_word_labels(self, tmp_path, capsys):
        words = tmp_path / "words"
        words.write_text("A\nB\n")
        out = _run(capsys, "-n", "3", "-prob", "0", "-words", str(words))
        assert out == "A\nB\nA2\n"

    def test_dry_run(self, capsys):
        out = _run(capsys, "-n", "3", "--dry-run")
        assert json.loads(out)["graph"]["n_vertices"] == 3


class TestErrors:
    """Invalid input aborts before any output is written."""

    @pytest.mark.parametrize(
        "argv",
        [
            ["-n", "-1"],
            ["-edges", "-2"],
            ["-prob", "1.5"],
            ["-prob", "-0.5"],
        ],
    )
    def test_invalid_ranges(self, argv, tmp_path, capsys):
        out_path = tmp_path / "graph.txt"
        with pytest.raises(SystemExit) as exc:
            main(argv + ["-o", str(out_path)])
        assert exc.value.code == 1
        assert not out_path.exists()
        assert capsys.readouterr().out == ""

    def test_missing_words_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["-words", str(tmp_path / "missing")])
        assert exc.value.code == 1

    def test_bad_config_file(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text('{"graph": {"bogus": 1}}')
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(path)])
        assert exc.value.code == 1

    def test_unwritable_output(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["-n", "3", "-o", str(tmp_path / "no" / "such" / "dir.txt")])
        assert exc.value.code == 1

    def test_config_file_with_repeated_labels(self, tmp_path, capsys):
        path = tmp_path / "run.json"
        path.write_text('{"graph": {"labels": ["x", "a", "a4", "a"]}}')
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(path), "-n", "5", "-prob", "0"])
        assert exc.value.code == 1
        assert capsys.readouterr().out == ""

    def test_config_file_with_clean_labels(self, tmp_path, capsys):
        path = tmp_path / "run.json"
        path.write_text('{"graph": {"labels": ["x", "a"]}}')
        main(["--config", str(path), "-n", "5", "-prob", "0"])
        tails = capsys.readouterr().out.splitlines()
        assert tails == ["x", "a", "x2", "a3", "x4"]
        assert len(set(tails)) == 5

    def test_positional_arguments_rejected(self):
        with pytest.raises(SystemExit) as exc:
            main(["extra"])
        assert exc.value.code == 2
