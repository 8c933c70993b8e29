"""
Evolution logger for recording a solver run to disk.

This module records the stages of a run as JSON files:
- Run start (seed and configuration)
- Improvement events
- Per-generation statistics
- Final best solution

Logs are written to one directory per run for easy analysis.
"""

import json
import logging
from pathlib import Path
from typing import List, Dict, Any, Optional, Sequence
from datetime import datetime

from ..core.item import Item
from ..core.solution import Solution
from .listeners import EvolutionListener


logger = logging.getLogger(__name__)


class EvolutionLogger(EvolutionListener):
    """
    Detailed JSON logger for a solver run.

    Improvement events are kept in memory and flushed to ``improvements.json``
    after every improvement, so a partial record survives an interrupted run.
    """

    def __init__(
        self,
        output_dir: Path,
        run_id: str,
        items: Optional[Sequence[Item]] = None,
        history_source=None
    ):
        """
        Initialize the evolution logger.

        Args:
            output_dir: Base output directory
            run_id: Run identifier (used for the subdirectory name)
            items: Item set, used to report the weight of the final solution
            history_source: Object with a ``history`` list of GenerationHistory
                (usually the engine), dumped on finish
        """
        self.output_dir = Path(output_dir) / f"run_{run_id}"
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.run_id = run_id
        self.items = list(items) if items is not None else None
        self.history_source = history_source
        self.improvements: List[Dict[str, Any]] = []

        logger.info(f"EvolutionLogger initialized for run {run_id} at {self.output_dir}")

    def on_start(self, seed: int, config: Dict[str, Any]) -> None:
        data = {
            "run_id": self.run_id,
            "phase": "start",
            "timestamp": datetime.now().isoformat(),
            "seed": seed,
            "config": config,
        }

        self._save_json("run_start.json", data)

    def on_improvement(self, fitness: int, generation: int) -> None:
        self.improvements.append({
            "generation": generation,
            "fitness": fitness,
            "timestamp": datetime.now().isoformat(),
        })

        self._save_json("improvements.json", {
            "run_id": self.run_id,
            "phase": "improvements",
            "improvements": self.improvements,
            "total_improvements": len(self.improvements),
        })

    def on_finish(self, solution: Solution) -> None:
        if self.history_source is not None:
            history = [h.to_dict() for h in self.history_source.history]
            self._save_json("history.json", {
                "run_id": self.run_id,
                "phase": "history",
                "generations": history,
            })
            logger.info(f"Logged history for {len(history)} generations")

        summary = {
            "fitness": solution.fitness,
            "found_at_generation": solution.generation,
            "n_selected": len(solution.selected_items()),
        }
        if self.items is not None:
            summary["weight"] = solution.total_weight(self.items)

        data = {
            "run_id": self.run_id,
            "phase": "final_best",
            "timestamp": datetime.now().isoformat(),
            "best_solution": solution.to_dict(),
            "summary": summary,
        }

        self._save_json("final_best.json", data)
        logger.info(f"Logged final best solution with fitness {solution.fitness}")

    def _save_json(self, filename: str, data: Dict):
        """
        Save data to a JSON file.

        Args:
            filename: Name of the file
            data: Data to save
        """
        filepath = self.output_dir / filename

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
