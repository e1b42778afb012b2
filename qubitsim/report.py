# qubitsim/report.py
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .log import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class SimulationReport:
    total: int
    true_count: int
    false_count: int
    true_percent: float
    false_percent: float

    @staticmethod
    def from_outcomes(outcomes: Sequence[bool]) -> "SimulationReport":
        total = len(outcomes)
        true_count = sum(1 for o in outcomes if o)
        false_count = total - true_count
        if total == 0:
            # zero trials reports 0% / 0%, not NaN
            return SimulationReport(0, 0, 0, 0.0, 0.0)
        return SimulationReport(total, true_count, false_count,
                                true_count / total * 100.0,
                                false_count / total * 100.0)

    def format(self, subject) -> str:
        return (f"Simulation report results for {subject}\n"
                f"  true  :  {self.true_count} ({self.true_percent:.2f}%)\n"
                f"  false :  {self.false_count} ({self.false_percent:.2f}%)\n"
                f"  total : {self.total}")


def report(outcomes: Sequence[bool], subject,
           logger: Optional[logging.Logger] = None) -> SimulationReport:
    """Summarize `outcomes` and log one info message about `subject`."""
    rep = SimulationReport.from_outcomes(outcomes)
    (logger or log).info(rep.format(subject))
    return rep
