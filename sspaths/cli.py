"""Command-line interface for running the engines on a problem file."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional, Union, cast

from .bellman_ford import BellmanFordSolver
from .config import ALGORITHMS, DEFAULT_INPUT, RunConfig
from .dijkstra import DijkstraSolver
from .exceptions import AlgorithmError, ConfigError, InputError, PathfindingError
from .export import matrix_to_dict, result_to_dict
from .floyd_warshall import FloydWarshallSolver
from .generator import generate_problem
from .io import ProblemInstance, read_problem, write_distance_matrix, write_problem, write_sssp_result
from .logger import Logger, StdLogger
from .results import DistanceMatrix, SolverMetrics, SSSPResult

EXAMPLE_INPUT = """3
1
3
1 2 4
2 3 2
1 3 7
"""

EX_OK = 0
EX_USAGE = 64
EX_SOFTWARE = 70
EX_IOERR = 74

Result = Union[SSSPResult, DistanceMatrix]


def run(
    cfg: RunConfig, problem: ProblemInstance, logger: Logger
) -> Dict[str, tuple[Result, SolverMetrics]]:
    """Run the engines selected by ``cfg`` on ``problem``.

    Returns:
        Mapping from algorithm name to its result and metrics, in run order.

    Raises:
        NegativeCycleError: From Bellman-Ford, or from the opt-in checks.
        InputError: If the source is not a vertex of the problem.
    """
    source = cfg.source if cfg.source is not None else problem.source
    n = problem.num_vertices
    out: Dict[str, tuple[Result, SolverMetrics]] = {}
    for name in cfg.algorithms:
        solver: Union[BellmanFordSolver, FloydWarshallSolver, DijkstraSolver]
        if name == "bellman-ford":
            solver = BellmanFordSolver(problem.graph, source, num_vertices=n, logger=logger)
        elif name == "floyd-warshall":
            solver = FloydWarshallSolver(
                problem.graph, num_vertices=n, logger=logger, check_negative_cycles=cfg.validate
            )
        else:
            solver = DijkstraSolver(
                problem.graph, source, num_vertices=n, logger=logger, validate=cfg.validate
            )
        t0 = time.perf_counter()
        res = solver.solve()
        wall_ms = (time.perf_counter() - t0) * 1000.0
        out[name] = (res, solver.metrics(wall_ms=wall_ms))
    return out


def write_results(cfg: RunConfig, results: Dict[str, tuple[Result, SolverMetrics]]) -> Dict[str, str]:
    """Write every result to its configured file and return the paths used."""
    written: Dict[str, str] = {}
    for name, (res, _) in results.items():
        path = cfg.output_for(name)
        if isinstance(res, DistanceMatrix):
            write_distance_matrix(res, path)
        else:
            write_sssp_result(res, path)
        written[name] = path
    return written


def _build_parser() -> argparse.ArgumentParser:
    examples = (
        "Examples:\n"
        "  sspaths --input in.txt\n"
        "  sspaths --input in.txt --algorithms dijkstra --dijkstra-out d.txt\n"
        "  sspaths --random --n 50 --m 200 --target 7 --export-json out.json\n"
    )
    p = argparse.ArgumentParser(
        prog="sspaths",
        description="Bellman-Ford, Floyd-Warshall and Dijkstra shortest paths",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group()
    src.add_argument("--input", type=str, default=DEFAULT_INPUT, help="Problem file")
    src.add_argument("--random", action="store_true", help="Use a random problem")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample problem file to stdout and exit",
    )

    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=20, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed (random mode)")
    p.add_argument("--w-min", type=int, default=1, help="Smallest cost (random mode)")
    p.add_argument("--w-max", type=int, default=100, help="Largest cost (random mode)")
    p.add_argument("--save-input", type=str, default=None, help="Write the problem used to this path")

    p.add_argument(
        "--algorithms",
        nargs="+",
        choices=list(ALGORITHMS),
        default=list(ALGORITHMS),
        help="Engines to run",
    )
    p.add_argument("--source", type=int, default=None, help="Override the source vertex")
    p.add_argument("--directed", action="store_true", help="Strictly directed edge lookup")
    p.add_argument(
        "--validate",
        action="store_true",
        help="Reject negative cycles (Floyd-Warshall) and negative costs (Dijkstra)",
    )
    for name in ALGORITHMS:
        p.add_argument(f"--{name}-out", type=str, default=None, help=f"Output file for {name}")

    p.add_argument("--target", type=int, default=None, help="Print the path to this vertex")
    p.add_argument("--export-json", type=str, default=None, help="Write all results as JSON")
    p.add_argument("--plot", type=str, default=None, help="Draw the first single-source tree to this image")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``sspaths`` command-line tool."""
    p = _build_parser()
    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_INPUT)
        return EX_OK

    try:
        outputs = {
            name: getattr(args, f"{name.replace('-', '_')}_out")
            for name in ALGORITHMS
            if getattr(args, f"{name.replace('-', '_')}_out")
        }
        cfg = RunConfig(
            input_path=args.input,
            algorithms=tuple(args.algorithms),
            outputs=outputs,
            directed=args.directed,
            source=args.source,
            validate=args.validate,
        )

        stream = sys.stdout if args.log_json else sys.stderr
        level = "info" if args.log_json and args.log_level == "warning" else args.log_level
        logger = StdLogger(level=level, json_fmt=args.log_json, stream=stream)

        if args.random:
            problem = generate_problem(
                args.n,
                args.m,
                seed=args.seed,
                w_min=args.w_min,
                w_max=args.w_max,
                directed=args.directed,
            )
        else:
            problem = read_problem(cfg.input_path, directed=cfg.directed)
        if args.save_input:
            write_problem(problem, args.save_input)

        if args.verbose and not args.log_json:
            sys.stderr.write(
                f"config: n={problem.num_vertices} m={problem.num_edges} "
                f"source={cfg.source or problem.source} directed={cfg.directed} "
                f"algorithms={','.join(cfg.algorithms)}\n"
            )

        results = run(cfg, problem, logger)
        written = write_results(cfg, results)

        out: Dict[str, object] = {
            "source": cfg.source or problem.source,
            "n": problem.num_vertices,
            "m": problem.num_edges,
            "outputs": written,
            "metrics": {name: asdict(metrics) for name, (_, metrics) in results.items()},
        }

        sssp = [res for res, _ in results.values() if isinstance(res, SSSPResult)]
        if args.target is not None:
            out["target"] = args.target
            if sssp:
                out["path"] = sssp[0].path_to(args.target)
            else:
                matrix = cast(DistanceMatrix, results["floyd-warshall"][0])
                out["distance"] = matrix.distance(int(out["source"]), args.target)  # type: ignore[arg-type]

        if args.export_json:
            payload = {
                name: result_to_dict(res) if isinstance(res, SSSPResult) else matrix_to_dict(res)
                for name, (res, _) in results.items()
            }
            Path(args.export_json).write_text(json.dumps(payload), encoding="utf-8")

        if args.plot:
            if not sssp:
                raise ConfigError("--plot needs bellman-ford or dijkstra among --algorithms")
            from .visualize import draw_shortest_path_tree

            draw_shortest_path_tree(problem.graph, sssp[0], args.plot)

        logger.info("run", **{k: v for k, v in out.items() if k != "metrics"})
        if not args.log_json:
            print(json.dumps(out))
        return EX_OK

    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EX_USAGE
    except AlgorithmError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EX_SOFTWARE
    except OSError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: I/O error: {exc}\n")
        return EX_IOERR
    except PathfindingError as exc:  # pragma: no cover - future error types
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EX_SOFTWARE


if __name__ == "__main__":
    sys.exit(main())
