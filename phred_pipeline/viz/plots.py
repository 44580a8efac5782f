import os

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.ticker import MultipleLocator


def plot_phred_histogram(hist_df, title="", save_path=None):
    """
    Bar-plot the per-base Phred distribution.
    - trims empty score bins on the left / right
    - y axis as % of bases
    - reference lines at Q20 / Q30
    """
    # ── subset ───────────────────────────────────────────────────────────
    counts = hist_df["count"].to_numpy(dtype=float)
    scores = hist_df["phred_score"].to_numpy()
    total  = counts.sum()
    if total == 0:
        print("⚠️ Histogram is empty – nothing to plot.")
        return None

    nz = np.where(counts > 0)[0]
    first, last = nz[0], nz[-1]
    scores, counts = scores[first:last + 1], counts[first:last + 1]
    percent = counts / total * 100

    # ── figure ───────────────────────────────────────────────────────────
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.bar(scores, percent, width=0.8, color="#145DA0", align="center")

    for q in (20, 30):
        if scores[0] <= q <= scores[-1]:
            ax.axvline(q, color="gray", lw=1, linestyle="--")

    # ── aesthetics ───────────────────────────────────────────────────────
    ax.set_xlim(scores[0] - 0.5, scores[-1] + 0.5)
    if len(scores) > 20:
        ax.xaxis.set_major_locator(MultipleLocator(5))
    ax.set_xlabel("Phred score")
    ax.set_ylabel("% Bases")
    ax.set_title(title or "Per-base quality distribution")
    ax.grid(axis="y", alpha=0.3)
    ax.grid(visible=False, axis="x")
    fig.tight_layout()

    # ── optional save ────────────────────────────────────────────────────
    if save_path:
        out_dir = os.path.dirname(os.fspath(save_path))
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        fig.savefig(save_path, format="svg")
        print(f"✅ Saved plot → {save_path}")

    plt.close(fig)
    return save_path
