# qubitsim/apply_numba.py
import numpy as np
from numba import njit, prange, set_num_threads, get_num_threads

# ---------- low-level kernels (Numba JIT) ----------

@njit(parallel=True)
def _bernoulli_kernel(uniforms, p, out):
    N = uniforms.shape[0]
    for i in prange(N):
        out[i] = uniforms[i] < p

@njit(parallel=True)
def _bernoulli_rows_kernel(uniforms, probs, out):
    # uniforms/out shaped (qubits, trials); one probability per row
    rows, cols = uniforms.shape
    for r in prange(rows):
        p = probs[r]
        for c in range(cols):
            out[r, c] = uniforms[r, c] < p

# ---------- user-facing helpers ----------

def set_threads(n: int):
    set_num_threads(n)

def get_threads() -> int:
    return get_num_threads()

def sample_bernoulli(p: float, amount: int, rng: np.random.Generator) -> np.ndarray:
    """`amount` independent draws of (u < p), u ~ U[0,1) taken from rng."""
    uniforms = rng.random(amount)
    out = np.empty(amount, dtype=np.bool_)
    _bernoulli_kernel(uniforms, float(p), out)
    return out

def sample_bernoulli_rows(probs: np.ndarray, amount: int, rng: np.random.Generator) -> np.ndarray:
    """Row r holds `amount` draws with success probability probs[r]."""
    probs = np.asarray(probs, dtype=np.float64)
    uniforms = rng.random((probs.shape[0], amount))
    out = np.empty(uniforms.shape, dtype=np.bool_)
    _bernoulli_rows_kernel(uniforms, probs, out)
    return out
