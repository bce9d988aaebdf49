"""Run configuration for the command-line driver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .exceptions import ConfigError

ALGORITHMS: Tuple[str, ...] = ("bellman-ford", "floyd-warshall", "dijkstra")

#: Default file names of the single-run drivers.
DEFAULT_INPUT = "in.txt"
DEFAULT_OUTPUTS: Dict[str, str] = {
    "bellman-ford": "bellman-ford.txt",
    "floyd-warshall": "floyd-warshall.txt",
    "dijkstra": "dijkstra.txt",
}


@dataclass(frozen=True)
class RunConfig:
    """Settings for one driver run.

    Attributes:
        input_path: Problem file to read.
        algorithms: Engines to run, in order.
        outputs: Output file per engine; engines missing here use
            :data:`DEFAULT_OUTPUTS`.
        directed: Use strictly directed edge lookup.
        source: Override the source vertex named by the problem file.
        validate: Enable the opt-in negative-cycle check for Floyd-Warshall
            and negative-cost check for Dijkstra.
    """

    input_path: str = DEFAULT_INPUT
    algorithms: Tuple[str, ...] = ALGORITHMS
    outputs: Dict[str, str] = field(default_factory=dict)
    directed: bool = False
    source: Optional[int] = None
    validate: bool = False

    def __post_init__(self) -> None:
        if not self.algorithms:
            raise ConfigError("at least one algorithm must be selected")
        unknown = [a for a in self.algorithms if a not in ALGORITHMS]
        if unknown:
            raise ConfigError(f"unknown algorithm(s): {', '.join(unknown)}")
        extra = [a for a in self.outputs if a not in ALGORITHMS]
        if extra:
            raise ConfigError(f"output given for unknown algorithm(s): {', '.join(extra)}")
        if self.source is not None and self.source < 1:
            raise ConfigError("source must be a positive vertex id")

    def output_for(self, algorithm: str) -> str:
        """Return the output path for ``algorithm``."""
        return self.outputs.get(algorithm) or DEFAULT_OUTPUTS[algorithm]


__all__ = ["ALGORITHMS", "DEFAULT_INPUT", "DEFAULT_OUTPUTS", "RunConfig"]
