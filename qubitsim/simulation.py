# qubitsim/simulation.py
from typing import List, Optional, Union

import numpy as np

from .gates import SUPERPOSITION
from .log import get_logger
from .qubit import Qubit
from .register import QubitRegister

log = get_logger(__name__)

Target = Union[Qubit, QubitRegister]


def _serial_trials(qubit: Qubit, amount: int, rng: np.random.Generator) -> List[bool]:
    # a fresh transient qubit per trial; the input qubit is never touched
    return [qubit.apply_gate(SUPERPOSITION).measure(rng) for _ in range(amount)]


def _load_numba():
    try:
        from . import apply_numba
    except Exception as e:
        raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
    return apply_numba


def simulate_superposition(target: Target, amount: int,
                           rng: Optional[np.random.Generator] = None,
                           backend: str = "serial",
                           num_threads: Optional[int] = None) -> List[bool]:
    """
    Put `target` through the SUPERPOSITION gate and measure it, `amount`
    times. For a register every qubit gets `amount` trials and the outcomes
    are concatenated qubit by qubit: [q0 t0..tN-1, q1 t0..tN-1, ...].
    `num_threads` caps the numba thread pool; the serial backend ignores it.
    """
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    if rng is None:
        rng = np.random.default_rng()

    if isinstance(target, Qubit):
        qubits = [target]
    elif isinstance(target, QubitRegister):
        qubits = target.qubits
    else:
        raise TypeError(f"Cannot simulate {type(target).__name__}")

    log.debug(f"simulate_superposition: {len(qubits)} qubit(s) x {amount} trials [{backend}]")

    if backend == "serial":
        outcomes: List[bool] = []
        for q in qubits:
            outcomes.extend(_serial_trials(q, amount, rng))
        return outcomes

    elif backend == "numba":
        nb = _load_numba()
        if num_threads is not None:
            nb.set_threads(int(num_threads))
        probs = np.array([q.apply_gate(SUPERPOSITION).position().probability() for q in qubits],
                         dtype=np.float64)
        if probs.size == 0 or amount == 0:
            return []
        if probs.size == 1:
            return nb.sample_bernoulli(probs[0], amount, rng).tolist()
        return nb.sample_bernoulli_rows(probs, amount, rng).ravel().tolist()

    else:
        raise NotImplementedError(f"Unknown backend: {backend}")
