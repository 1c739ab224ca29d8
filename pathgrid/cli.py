# pathgrid/cli.py
from __future__ import annotations
import argparse, csv, logging, os, os.path
from typing import List, Optional, Sequence, Tuple

from .errors import PathgridError
from .grid import DEFAULT_COLS, DEFAULT_ROWS, GridModel
from .maze import generate_maze
from .obstacles import DEFAULT_DENSITY, random_grid
from .runner import RunStats, run_search
from .types import Algorithm
from .viz import draw_snapshot_png


def format_stats(name: str, s: RunStats) -> str:
    return (f"{name:10s} | reached={s.reached!s:5s} | steps={s.steps:5d} | "
            f"explored={s.explored:5d} | path={s.path_length:4d} | "
            f"time={s.elapsed_sec*1000:7.1f} ms")


def run_algs(world: GridModel, algorithms: Sequence[Algorithm], out_dir: Optional[str] = None,
             base_tag: str = "run") -> List[Tuple[Algorithm, RunStats]]:
    results: List[Tuple[Algorithm, RunStats]] = []
    for alg in algorithms:
        st = run_search(world, alg)
        results.append((alg, st))
        if out_dir and st.final is not None:
            draw_snapshot_png(st.final, os.path.join(out_dir, f"{base_tag}_{alg.value}.png"))
    return results

# -------- subcommands --------

def cmd_gen(args: argparse.Namespace) -> None:
    os.makedirs(args.out, exist_ok=True)
    for i in range(args.count):
        seed = (args.seed + i) if args.seed is not None else None
        if args.kind == "maze":
            gw = generate_maze(args.rows, args.cols, seed=seed)
        else:
            gw = random_grid(args.rows, args.cols, density=args.p, seed=seed)
        path = os.path.join(args.out, f"{args.kind}_{i:03d}.txt")
        gw.save(path)
        print("wrote", path)

def cmd_demo(args: argparse.Namespace) -> None:
    gw = GridModel.load(args.env)
    algorithms = [Algorithm(a) for a in args.algorithm] if args.algorithm else list(Algorithm)
    if args.out:
        os.makedirs(args.out, exist_ok=True)
    base = os.path.splitext(os.path.basename(args.env))[0]
    results = run_algs(gw, algorithms, out_dir=args.out, base_tag=base)
    for alg, st in results:
        print(format_stats(alg.label, st))
        if args.ascii and st.final is not None:
            print(st.final.to_text())
            print()

def cmd_bench(args: argparse.Namespace) -> None:
    envs = sorted(p for p in os.listdir(args.envdir) if p.endswith(".txt"))
    if args.out:
        os.makedirs(args.out, exist_ok=True)
    rows = []
    for fname in envs:
        fpath = os.path.join(args.envdir, fname)
        gw = GridModel.load(fpath)
        base = os.path.splitext(fname)[0]
        results = run_algs(gw, list(Algorithm), out_dir=args.out, base_tag=base)
        for alg, st in results:
            print(f"{fname} :: {format_stats(alg.label, st)}")
            rows.append({
                "env": fname,
                "alg": alg.value,
                "reached": st.reached,
                "steps": st.steps,
                "explored": st.explored,
                "path_length": st.path_length,
                "time_sec": round(st.elapsed_sec, 6),
            })
    if args.csv and rows:
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Grid pathfinding (A*, Dijkstra, BFS, DFS)")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("gen", help="generate maze or random-wall grids")
    g.add_argument("--kind", choices=["maze", "random"], default="maze")
    g.add_argument("--count", type=int, default=10)
    g.add_argument("--rows", type=int, default=DEFAULT_ROWS)
    g.add_argument("--cols", type=int, default=DEFAULT_COLS)
    g.add_argument("--p", type=float, default=DEFAULT_DENSITY, help="wall density for --kind random")
    g.add_argument("--out", type=str, default="envs")
    g.add_argument("--seed", type=int, default=None)
    g.set_defaults(func=cmd_gen)

    d = sub.add_parser("demo", help="run algorithms on one grid and save PNGs")
    d.add_argument("--env", type=str, required=True)
    d.add_argument("--algorithm", action="append", choices=[a.value for a in Algorithm],
                   help="repeatable; defaults to all four")
    d.add_argument("--out", type=str, default="runs")
    d.add_argument("--ascii", action="store_true", help="print the final grid as text")
    d.set_defaults(func=cmd_demo)

    b = sub.add_parser("bench", help="run all algorithms on every .txt in a folder")
    b.add_argument("--envdir", type=str, required=True)
    b.add_argument("--out", type=str, default="")
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    return p

def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except PathgridError as exc:
        print("error:", exc)
        return 2
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
