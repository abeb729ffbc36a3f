"""
Distance range runner.

Builds and summarizes one hop tree per target distance in an inclusive
range. Runs are independent: each owns its tree, and a distance whose tree
cannot be represented is reported as failed while the remaining distances
still run.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import yaml
from pydantic import BaseModel

from hoptree.core.errors import DistanceError, InvalidRangeError
from hoptree.core.settings import BuilderSettings
from hoptree.core.tree import HopTree, RunSummary, TreeBuilder, summarize

logger = logging.getLogger(__name__)


class DistanceRun(BaseModel):
    """Outcome of building and summarizing the tree for one distance."""

    target_distance: int
    tree: Optional[HopTree] = None
    summary: Optional[RunSummary] = None
    error: Optional[str] = None
    elapsed_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the run to a dictionary for YAML serialization."""
        data: Dict[str, Any] = {
            "target_distance": self.target_distance,
            "status": "ok" if self.succeeded else "failed",
            "elapsed_seconds": round(self.elapsed_seconds, 6),
        }
        if self.error:
            data["error"] = self.error
        if self.summary:
            data["summary"] = self.summary.model_dump()
        if self.tree:
            data["tree"] = self.tree.to_dict()
        return data


def validate_range(min_distance: int, max_distance: int) -> None:
    """Reject negative or empty ranges before any tree is built."""
    if min_distance < 0 or max_distance < min_distance:
        raise InvalidRangeError(min_distance, max_distance)


class DistanceRunner:
    """Runs the build and summarize pipeline over a range of target distances."""

    def __init__(self, settings: Optional[BuilderSettings] = None):
        self.settings = settings or BuilderSettings()
        self.builder = TreeBuilder(self.settings)

    def run_distance(self, target_distance: int) -> DistanceRun:
        """
        Build and summarize the tree for a single distance.

        Overflow and node-limit failures are captured on the returned run.
        Internal invariant violations propagate.
        """
        started = time.perf_counter()
        try:
            tree = self.builder.build(target_distance)
        except DistanceError as err:
            elapsed = time.perf_counter() - started
            logger.warning("Skipping distance %d: %s", target_distance, err.reason)
            return DistanceRun(target_distance=target_distance, error=err.reason, elapsed_seconds=elapsed)

        summary = summarize(tree.terminal_nodes)
        elapsed = time.perf_counter() - started
        return DistanceRun(
            target_distance=target_distance,
            tree=tree,
            summary=summary,
            elapsed_seconds=elapsed,
        )

    def iter_range(self, min_distance: int, max_distance: int) -> Iterator[DistanceRun]:
        """
        Yield one run per distance in ``[min_distance, max_distance]``.

        The range is validated before the first tree is built. Runs are
        produced lazily so a caller can render and drop each tree before the
        next one is expanded.

        Raises:
            InvalidRangeError: If the range is negative or empty
        """
        validate_range(min_distance, max_distance)
        return self._iter_range(min_distance, max_distance)

    def _iter_range(self, min_distance: int, max_distance: int) -> Iterator[DistanceRun]:
        for distance in range(min_distance, max_distance + 1):
            yield self.run_distance(distance)

    def run_range(self, min_distance: int, max_distance: int) -> List[DistanceRun]:
        """Eager form of ``iter_range``."""
        return list(self.iter_range(min_distance, max_distance))

    def save_report_to_yaml(self, run: DistanceRun, file_path: str) -> None:
        """
        Save the statistics of one run to a YAML file.

        Args:
            run: Completed (or failed) distance run
            file_path: Output file path
        """
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)

        data = run.to_dict()

        with open(file_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, indent=2, sort_keys=False)


__all__ = ["DistanceRun", "DistanceRunner", "validate_range"]
