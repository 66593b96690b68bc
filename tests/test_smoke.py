"""Smoke tests: imports work, CLI --help works, top-level helpers."""

from click.testing import CliRunner

from graph_explorer.__main__ import main

SAMPLE = "0\n1\n2\n3\n4\n0 1\n1 2\n2 3\n3 0\n1 4\n2 2\n"


def test_import():
    import graph_explorer

    assert graph_explorer.Session is not None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "cycles" in result.output
    assert "paths" in result.output


def test_detect_cycles():
    from graph_explorer import detect_cycles

    assert detect_cycles(SAMPLE) == [[2], [0, 1, 2, 3]]
    assert detect_cycles(SAMPLE, directed=True) == [[2], [0, 1, 2, 3]]


def test_all_paths():
    from graph_explorer import all_paths

    assert all_paths(SAMPLE, 0, 4) == [[0, 1, 4]]


def test_tree_levels():
    from graph_explorer import tree_levels

    assert tree_levels(SAMPLE, 0) == {0: 0, 1: 1, 3: 1, 2: 2, 4: 2}
    assert tree_levels(SAMPLE, 42) == {}
