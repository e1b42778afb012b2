# qubitsim/qubit.py
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from . import position as P
from .gates import NOT, QuantumGate
from .position import QuantumPosition, format_amplitude


@dataclass
class Qubit:
    """
    A single qubit as an append-only history of positions.

    The *current* state is the first recorded position: `update` appends
    to the history but reads, gates and measurement keep using positions[0].
    """
    positions: List[QuantumPosition] = field(default_factory=list)

    @staticmethod
    def new(position: QuantumPosition) -> "Qubit":
        if not position.has_valid_amplitude():
            raise AssertionError(
                f"Invalid qubit position: |a|^2+|b|^2={position.norm2()}")
        return Qubit([position])

    @staticmethod
    def zero() -> "Qubit":
        return Qubit.new(P.ZERO)

    @staticmethod
    def one() -> "Qubit":
        return Qubit.new(P.ONE)

    @staticmethod
    def flip() -> "Qubit":
        return Qubit.new(P.FLIP)

    @staticmethod
    def quarter_turn() -> "Qubit":
        return Qubit.new(P.QUARTER_TURN)

    @staticmethod
    def back_quarter_turn() -> "Qubit":
        return Qubit.new(P.BACK_QUARTER_TURN)

    # ------------------------------------------------------------------

    def position(self) -> QuantumPosition:
        if not self.positions:
            raise IndexError("Must have an initial qubit position.")
        return self.positions[0]

    def initial_position(self) -> complex:
        return self.position().initial

    def possible_position(self) -> complex:
        return self.position().possible

    def update(self, new_position: QuantumPosition):
        """Record a new position. Does not change the current (first) one."""
        self.positions.append(new_position)

    def apply_gate(self, gate: QuantumGate) -> "Qubit":
        """Return U|psi> as a fresh qubit; self is left untouched."""
        a0, a1 = gate.matrix @ self.position().as_array()
        return Qubit.new(QuantumPosition(a0, a1))

    def measure(self, rng: Optional[np.random.Generator] = None) -> bool:
        """Bernoulli draw: True with probability |alpha|^2."""
        p = self.position().probability()
        if rng is None:
            rng = np.random.default_rng()
        return bool(rng.random() < p)

    def logical_not(self) -> "Qubit":
        return self.apply_gate(NOT)

    __invert__ = logical_not

    def __str__(self) -> str:
        alpha = format_amplitude(self.initial_position())
        beta = format_amplitude(self.possible_position())
        return f"{alpha}|0⟩ + {beta}|1⟩"
