# qubitsim/main.py
import argparse, os
from typing import List, Optional

import numpy as np

from . import config
from .gates import NOT, PHASE, ROTATE, SUPERPOSITION
from .log import get_logger
from .qubit import Qubit
from .register import QubitRegister
from .report import report
from .simulation import simulate_superposition

log = get_logger(__name__)

STATES = {
    "zero": Qubit.zero,
    "one": Qubit.one,
    "flip": Qubit.flip,
    "quarter_turn": Qubit.quarter_turn,
    "back_quarter_turn": Qubit.back_quarter_turn,
}

def banner(title: str) -> str:
    bar = "=" * len(title)
    return f"{bar}\n{title}\n{bar}"

# ---------------------------------------------------------------------
# sub-commands

def run_demo(args):
    print(f"{banner('Zero qubit')}\n{Qubit.zero()}\n")
    print(f"{banner('One qubit')}\n{Qubit.one()}\n")
    print(f"{banner('Zero qubit with NOT gate')}\n{~Qubit.zero()}\n")
    print(f"{banner('One qubit with NOT gate')}\n{~Qubit.one()}\n")
    for gate in (NOT, ROTATE, PHASE, SUPERPOSITION):
        print(f"{gate}\n")
    return 0

def maybe_plot(rep, args, name):
    if not args.plot:
        return
    from .plot_results import plot_report
    path = os.path.join(str(config.DATA_DIR), f"{name}.png")
    plot_report(rep, path)
    log.info(f"plot written to {path}")

def run_qubit(args):
    rng = np.random.default_rng(args.seed)
    qubit = STATES[args.state]()
    outcomes = simulate_superposition(qubit, args.trials, rng=rng, backend=args.backend,
                                      num_threads=args.threads)
    rep = report(outcomes, qubit)
    maybe_plot(rep, args, f"qubit_{args.state}")
    return 0

def run_register(args):
    rng = np.random.default_rng(args.seed)
    register = QubitRegister.new(args.n)
    for k in args.not_index:
        register.apply_single_qubit_gate(NOT, k)
    outcomes = simulate_superposition(register, args.trials, rng=rng, backend=args.backend,
                                      num_threads=args.threads)
    rep = report(outcomes, register)
    maybe_plot(rep, args, f"register_{args.n}")
    return 0

# ---------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="qubitsim",
                                description="single-qubit gates, measurement and Monte-Carlo reports")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("demo", help="print basis qubits, NOT images and the gate catalogue")

    def add_sim_args(sp):
        sp.add_argument("--trials", type=int, default=config.DEFAULT_TRIALS)
        sp.add_argument("--backend", type=str, default=config.DEFAULT_BACKEND, choices=["serial", "numba"])
        sp.add_argument("--seed", type=int, default=config.DEFAULT_SEED)
        sp.add_argument("--threads", type=int, default=None, help="numba thread count (numba backend only)")
        sp.add_argument("--plot", action="store_true", help="save a bar chart under the data dir")

    p_qubit = sub.add_parser("qubit", help="simulate one qubit")
    p_qubit.add_argument("--state", type=str, default="zero", choices=sorted(STATES))
    add_sim_args(p_qubit)

    p_reg = sub.add_parser("register", help="simulate a register of independent qubits")
    p_reg.add_argument("--n", type=int, default=5)
    p_reg.add_argument("--not-index", type=int, action="append", default=[],
                       help="apply NOT to this index first (repeatable)")
    add_sim_args(p_reg)
    return p

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "trials", 0) < 0:
        parser.error("--trials must be non-negative")
    if getattr(args, "n", 0) < 0:
        parser.error("--n must be non-negative")
    if getattr(args, "threads", None) is not None and args.threads < 1:
        parser.error("--threads must be positive")

    if args.cmd == "demo":
        return run_demo(args)
    elif args.cmd == "qubit":
        return run_qubit(args)
    elif args.cmd == "register":
        return run_register(args)
    return 1

if __name__ == "__main__":
    raise SystemExit(main())
