# qubitsim/gates.py
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np

from .position import (
    BACK_QUARTER_TURN,
    FLIP,
    ONE,
    QUARTER_TURN,
    ZERO,
    QuantumPosition,
    format_amplitude,
)


class QuantumOperator(Enum):
    NOT = "NOT"                      # [[0,1],[1,0]]      (a,b) -> (b,a)
    ROTATE = "ROTATE"                # [[0,-i],[i,0]]     (a,b) -> (-ib, ia)
    PHASE = "PHASE"                  # [[1,0],[0,-1]]     (a,b) -> (a,-b)
    SUPERPOSITION = "SUPERPOSITION"  # Hadamard


def _hadamard() -> Tuple[QuantumPosition, QuantumPosition]:
    s = 1.0 / np.sqrt(2.0)
    return (QuantumPosition(s, s), QuantumPosition(s, -s))


@dataclass(frozen=True)
class QuantumGate:
    """
    A fixed single-qubit unitary. `transform[k]` holds row k of the 2x2 matrix,
    so the gate maps (a, b) to (t0.initial*a + t0.possible*b,
    t1.initial*a + t1.possible*b).
    """
    operator: QuantumOperator
    transform: Tuple[QuantumPosition, QuantumPosition]

    @staticmethod
    def new(operator: QuantumOperator) -> "QuantumGate":
        if not isinstance(operator, QuantumOperator):
            raise TypeError(f"Unknown quantum operator: {operator!r}")

        if operator is QuantumOperator.NOT:
            transform = (ONE, ZERO)
        elif operator is QuantumOperator.ROTATE:
            transform = (BACK_QUARTER_TURN, QUARTER_TURN)
        elif operator is QuantumOperator.PHASE:
            transform = (ZERO, FLIP)
        else:
            transform = _hadamard()
        return QuantumGate(operator, transform)

    @property
    def matrix(self) -> np.ndarray:
        t0, t1 = self.transform
        return np.array([[t0.initial, t0.possible],
                         [t1.initial, t1.possible]], dtype=np.complex128)

    def __str__(self) -> str:
        t0, t1 = self.transform
        cells = [[format_amplitude(t0.initial), format_amplitude(t0.possible)],
                 [format_amplitude(t1.initial), format_amplitude(t1.possible)]]
        w0 = max(len(r[0]) for r in cells)
        w1 = max(len(r[1]) for r in cells)
        pad = " " * (w0 + w1 + 3)
        rows = [f"┃ {r[0]:>{w0}} {r[1]:>{w1}} ┃" for r in cells]
        return "\n".join([f"{self.operator.name}", f"┏{pad}┓", *rows, f"┗{pad}┛"])


NOT = QuantumGate.new(QuantumOperator.NOT)
ROTATE = QuantumGate.new(QuantumOperator.ROTATE)
PHASE = QuantumGate.new(QuantumOperator.PHASE)
SUPERPOSITION = QuantumGate.new(QuantumOperator.SUPERPOSITION)
