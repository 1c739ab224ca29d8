import csv

from PIL import Image

from pathgrid.cli import main
from pathgrid.grid import GridModel
from pathgrid.runner import run_search
from pathgrid.types import Algorithm, Role
from pathgrid.viz import ROLE_COLORS, draw_snapshot_png


def test_gen_writes_loadable_mazes(tmp_path):
    out = tmp_path / "envs"
    assert main(["gen", "--kind", "maze", "--count", "2", "--rows", "11", "--cols", "15",
                 "--seed", "3", "--out", str(out)]) == 0
    files = sorted(p.name for p in out.iterdir())
    assert files == ["maze_000.txt", "maze_001.txt"]
    grid = GridModel.load(str(out / "maze_000.txt"))
    assert (grid.rows, grid.cols) == (11, 15)


def test_demo_prints_stats_and_writes_pngs(tmp_path, capsys):
    env = tmp_path / "g.txt"
    GridModel.empty(8, 8).save(str(env))
    runs = tmp_path / "runs"
    assert main(["demo", "--env", str(env), "--out", str(runs), "--ascii",
                 "--algorithm", "astar", "--algorithm", "dfs"]) == 0

    out = capsys.readouterr().out
    assert "A*" in out and "DFS" in out
    assert "reached=True" in out
    assert (runs / "g_astar.png").exists()
    assert (runs / "g_dfs.png").exists()
    assert not (runs / "g_bfs.png").exists()


def test_bench_writes_csv(tmp_path):
    envs = tmp_path / "envs"
    assert main(["gen", "--kind", "random", "--count", "2", "--rows", "8", "--cols", "8",
                 "--seed", "1", "--out", str(envs)]) == 0
    report = tmp_path / "bench.csv"
    assert main(["bench", "--envdir", str(envs), "--csv", str(report)]) == 0

    with open(report, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 8
    assert {r["alg"] for r in rows} == {"astar", "dijkstra", "bfs", "dfs"}


def test_bad_grid_file_is_reported(tmp_path, capsys):
    env = tmp_path / "bad.txt"
    env.write_text("nonsense\n")
    assert main(["demo", "--env", str(env), "--out", str(tmp_path)]) == 2
    assert "error:" in capsys.readouterr().out


def test_snapshot_png_colors(tmp_path):
    grid = GridModel.empty(5, 7)
    st = run_search(grid, Algorithm.BFS)
    out = tmp_path / "snap.png"
    draw_snapshot_png(st.final, str(out), cell=4)

    img = Image.open(out)
    assert img.size == (7 * 4, 5 * 4)
    r, c = grid.start
    assert img.getpixel((c * 4 + 1, r * 4 + 1)) == ROLE_COLORS[Role.START]
