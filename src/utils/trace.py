"""Tracing module: logs deduction ledger appends and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single append to the deduction ledger."""

    timestamp: float
    step_number: int
    action_type: str  # 'deduction', 'deduced'
    variant: Optional[str] = None  # Deduction variant name, e.g. 'Subsets'
    candidate: Optional[str] = None  # 'r1c1#5' for entries proven true
    index: Optional[int] = None  # Position of the record in its ledger buffer
    conflicts: Optional[int] = None  # Number of eliminated candidates


class Tracer:
    """Records ledger appends for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def log_deduction(self, variant: str, index: int, conflicts: int):
        """Log a deduction record appended to a ledger."""
        if not self.enabled:
            return
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type='deduction',
            variant=variant,
            index=index,
            conflicts=conflicts,
        ))

    def log_deduced(self, candidate: Any, index: int):
        """Log a candidate proven true."""
        if not self.enabled:
            return
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type='deduced',
            candidate=str(candidate),
            index=index,
        ))

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'variant', 'candidate', 'index', 'conflicts'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts = {}
        variant_counts = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1
            if step.variant:
                variant_counts[step.variant] = variant_counts.get(step.variant, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'variant_counts': variant_counts,
            'num_deductions': action_counts.get('deduction', 0),
            'num_eliminated': sum(s.conflicts or 0 for s in self.steps),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
