import math
import re

import pytest

from backrank.backspace import build_backspace_graph, find_dead_ends
from backrank.cli import check_probability_vector, format_graph, main


def _write_mtx(tmp_path, size, edges, name="graph.mtx"):
    lines = ["%%MatrixMarket matrix coordinate pattern general", "% comment"]
    lines.append(f"{size} {size} {len(edges)}")
    lines.extend(f"{u} {v}" for u, v in edges)
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _page_values(text):
    return [float(value) for value in re.findall(r"^Page \d+ : ([0-9.]+)$", text, re.M)]


def test_format_graph_layout():
    text = format_graph([[1, 2], [], [0]], "G")
    assert text == "--- G ---\n0 -> 1 2 \n1 -> \n2 -> 0 "


def test_format_graph_one_line_per_vertex():
    adjacency = [[1], [2], [0], []]
    lines = format_graph(adjacency, "Title").splitlines()
    assert lines[0] == "--- Title ---"
    assert len(lines) == len(adjacency) + 1


def test_check_probability_vector_ok():
    report = check_probability_vector([0.25, 0.75], "vec")
    assert "Check OK: vec is a probability vector" in report
    assert "Sum vec = 1.000000000000" in report


def test_check_probability_vector_not_ok():
    report = check_probability_vector([0.5], "vec")
    assert "Error: vec does not sum to 1" in report


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.mtx")]) == 1
    assert "absent.mtx" in capsys.readouterr().err


def test_main_bad_header(tmp_path, capsys):
    path = tmp_path / "bad.mtx"
    path.write_text("not a header\n1 1 0\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Matrix Market" in capsys.readouterr().err


def test_main_with_dead_end(tmp_path, capsys):
    edges = [(1, 2), (1, 3), (2, 3)]
    path = _write_mtx(tmp_path, 3, edges)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out

    adjacency = [[1, 2], [2], []]
    backspace = build_backspace_graph(adjacency, find_dead_ends(adjacency))
    assert f"N = 3, N2 = {len(backspace)}" in out
    assert "Number of dead ends used = 1" in out
    assert out.count("is a probability vector") == 2

    values = _page_values(out)
    assert len(values) == 3 + len(backspace)
    assert math.isclose(sum(values[:3]), 1.0, abs_tol=1e-6)
    assert math.isclose(sum(values[3:]), 1.0, abs_tol=1e-6)


def test_main_cycle_creates_random_dead_ends(tmp_path, capsys):
    edges = [(1, 2), (2, 3), (3, 4), (4, 5), (5, 1)]
    path = _write_mtx(tmp_path, 5, edges)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "No dead end detected" in out
    assert out.count("Creating a dead end") == 3
    match = re.search(r"Number of dead ends used = (\d+)", out)
    assert match is not None
    assert 1 <= int(match.group(1)) <= 2
    assert out.count("is a probability vector") == 2


def test_main_graph_without_arcs(tmp_path, capsys):
    path = _write_mtx(tmp_path, 2, [])
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.count("Cannot create a dead end") == 3
    assert "N = 2, N2 = 2" in out
    values = _page_values(out)
    assert values == pytest.approx([0.5, 0.5, 0.5, 0.5], abs=1e-8)