import json

import pytest

from main import main


def test_main_prints_standard_maze(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Maze built with the standard kit:\nRoom 1\n")
    assert "  West: Door between rooms 1 and 2" in out


def test_main_builds_every_kit(capsys):
    assert main(["--all"]) == 0

    out = capsys.readouterr().out
    for kit_name in ("bombed", "enchanted", "standard"):
        assert f"Maze built with the {kit_name} kit:" in out
    assert "Door Needing Spell" in out
    assert "Cracked Wall" in out


def test_main_reports_graph_and_metrics(capsys):
    assert main(["--kit", "enchanted", "--graph", "--metrics"]) == 0

    out = capsys.readouterr().out
    graph_line = next(line for line in out.splitlines() if line.startswith("Room graph: "))
    assert json.loads(graph_line[len("Room graph: "):])["doors"] == 1

    metrics_text = out.split("Kit operations: ", 1)[1]
    metrics = json.loads(metrics_text)
    assert metrics["make_wall"]["invocations"] == 6


def test_main_rejects_unknown_kit():
    with pytest.raises(SystemExit):
        main(["--kit", "haunted"])
