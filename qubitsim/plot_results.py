# qubitsim/plot_results.py
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .report import SimulationReport


def plot_report(report: SimulationReport, path, title=None):
    """Bar chart of true/false counts, saved as PNG at `path`."""
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    fig = plt.figure()
    bars = plt.bar(["true", "false"], [report.true_count, report.false_count],
                   color=["tab:cyan", "tab:grey"])
    for b, pct in zip(bars, (report.true_percent, report.false_percent)):
        plt.annotate(f"{pct:.2f}%", (b.get_x() + b.get_width() / 2, b.get_height()),
                     ha="center", va="bottom")
    plt.ylabel("Trials")
    plt.title(title or f"Measurement outcomes (n={report.total})")
    plt.grid(True, axis="y")
    plt.savefig(path, dpi=200)
    plt.close(fig)
    return path
