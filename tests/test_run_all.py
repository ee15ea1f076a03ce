import json

import pytest

from hill_lab.benchmarks import plot_results
from hill_lab.benchmarks import run_all as run_all_module
from hill_lab.benchmarks.run_all import main, run_all
from hill_lab.core.grid import HeightMap
from hill_lab.plots.plotting import bar_compare, plot_heightmap
from hill_lab.algorithms.astar import PathFinder
from hill_lab.problems.samples import SAMPLE_ROWS


def test_run_all_rows(sample):
    rows = run_all(sample, ["manhattan", "zero"])
    assert [(r["algo"], r["task"]) for r in rows] == [
        ("A*(manhattan)", "from_start"),
        ("MultiSource A*(manhattan)", "best_start"),
        ("A*(zero)", "from_start"),
        ("MultiSource A*(zero)", "best_start"),
    ]
    assert [r["cost"] for r in rows] == [31, 29, 31, 29]
    assert all(r["error"] is None for r in rows)


def test_run_all_keeps_failures_as_rows():
    rows = run_all(HeightMap.build(["abc"], goal=(0, 2)), ["manhattan"])
    assert rows[0]["success"] is False
    assert "ValueError" in rows[0]["error"]
    assert rows[1]["success"] is True
    assert rows[1]["cost"] == 2


def test_main_on_sample(capsys):
    assert main(["--no-save", "-H", "manhattan"]) == 0
    out = capsys.readouterr().out
    assert "cost=31.0" in out
    assert "cost=29.0" in out


def test_main_writes_results_and_plots(tmp_path, capsys):
    src = tmp_path / "input.txt"
    src.write_text("\n".join(SAMPLE_ROWS) + "\n")
    out = tmp_path / "results.json"
    png = tmp_path / "climb.png"

    assert main([str(src), "-H", "rounded_euclidean", "--out", str(out), "--plot", str(png)]) == 0
    data = json.loads(out.read_text())
    assert [r["cost"] for r in data["results"]] == [31, 29]
    assert png.exists()

    assert plot_results.main([str(out), "--out-dir", str(tmp_path / "plots")]) == 0
    assert (tmp_path / "plots" / "results.md").read_text().count("\n") == 3
    assert (tmp_path / "plots" / "nodes_expanded.png").exists()
    assert (tmp_path / "plots" / "time.png").exists()


def test_main_missing_input(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.txt"), "--no-save"])


def test_plot_results_without_results(tmp_path):
    with pytest.raises(SystemExit):
        plot_results.main([str(tmp_path / "results.json")])


def test_plots(sample):
    path = PathFinder(sample).find_path(sample.start)
    fig = plot_heightmap(sample, path)
    assert fig.axes[0].get_title() == "Heightmap (31 steps)"

    rows = run_all(HeightMap.build(["abc"], goal=(0, 2)), ["manhattan", "zero"])
    fig = bar_compare(rows)
    assert len(fig.axes) == 4
    # the failed from_start rows are dropped
    assert len(fig.axes[0].patches) == 2


def test_main_writes_comparison_chart(tmp_path):
    png = tmp_path / "compare.png"
    assert main(["--no-save", "-H", "manhattan", "-H", "zero", "--compare", str(png)]) == 0
    assert png.exists()


def test_main_rejects_bad_log_level():
    with pytest.raises(SystemExit, match="log level"):
        main(["--no-save", "--log-level", "LOUD"])


def test_main_rejects_empty_heuristic_list(monkeypatch, tmp_path):
    monkeypatch.setattr(run_all_module, "HEURISTICS_ENV", " , ")
    with pytest.raises(SystemExit, match="No heuristics"):
        main(["--no-save", "--plot", str(tmp_path / "climb.png")])
