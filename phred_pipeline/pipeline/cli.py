"""
Typer CLI wrappers for phredstats.
"""
from __future__ import annotations
import json
import zlib
import pathlib
from typing import Optional

import matplotlib
import typer

from .driver import resolve_config, run_quality_pipeline
from ..io import get_output_paths
from ..utils.summary import (
    load_read_stats, load_histogram,
    compute_summary_statistics, compute_histogram_summary,
)
from ..viz import plot_phred_histogram

matplotlib.use("Agg")     # CLI only writes SVGs

# ──────────────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────────────
def _load_json(path: pathlib.Path) -> dict:
    """Load JSON, falling back to json5 if installed, with a clear error."""
    txt = path.read_text()
    try:
        return json.loads(txt)
    except json.JSONDecodeError as e:
        try:
            import json5
        except ModuleNotFoundError:
            typer.secho(f"❌ JSON parse error in {path} – {e}", fg=typer.colors.RED)
            raise typer.Exit(1)
        try:
            return json5.loads(txt)
        except ValueError:
            typer.secho(f"❌ JSON parse error in {path} – {e}", fg=typer.colors.RED)
            raise typer.Exit(1)


def _extract_run_cfg(cfg: dict) -> dict:
    """
    Accept two layouts:

    1. flat:     {"output_prefix": "...", "compresslevel": 6}
    2. wrapped:  {"run": {...}}
    """
    if "run" in cfg and isinstance(cfg["run"], dict):
        return cfg["run"]
    return cfg


# ──────────────────────────────────────────────────────────────────────────────
# Typer app
# ──────────────────────────────────────────────────────────────────────────────
app = typer.Typer(add_completion=False, help="Per-read quality statistics for gzipped FASTQ")

# ------------------------------------------------------------------ run
@app.command("run")
def run(
    input_file: pathlib.Path = typer.Argument(..., help="Input fastq.gz file"),
    output_prefix: Optional[str] = typer.Argument(
        None, help="Prefix for <prefix>_read_stats.csv.gz and <prefix>_phred_hist.csv "
        "(default: output)"),
    config: Optional[pathlib.Path] = typer.Option(
        None, "--config", help="JSON file with output_prefix / compresslevel / plot"),
    compresslevel: Optional[int] = typer.Option(
        None, "--compresslevel", min=0, max=9, help="gzip level for the read table (default 1)"),
    plot: bool = typer.Option(
        False, "--plot", help="Also render <prefix>_phred_hist.svg"),
    quiet: bool = typer.Option(False, "--quiet", "-q"),
):
    """Compute per-read mean quality and the global Phred histogram."""
    file_cfg = _extract_run_cfg(_load_json(config)) if config else {}
    try:
        cfg = resolve_config(file_cfg, output_prefix=output_prefix,
                             compresslevel=compresslevel, plot=plot or None)
    except ValueError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED)
        raise typer.Exit(1)

    try:
        run_quality_pipeline(input_file, cfg["output_prefix"],
                             compresslevel=cfg["compresslevel"],
                             plot=cfg["plot"], quiet=quiet)
    except (OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
        typer.secho(f"❌ I/O error – {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

# ------------------------------------------------------------------ summarize
@app.command("summarize")
def summarize(output_prefix: str = typer.Argument("output")):
    """Print a QC digest of <prefix>_read_stats.csv.gz and <prefix>_phred_hist.csv."""
    stats_path, hist_path = get_output_paths(output_prefix)
    try:
        reads_df = load_read_stats(stats_path)
        hist_df = load_histogram(hist_path)
    except OSError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.echo(f"Reads: {len(reads_df)}")
    typer.echo(compute_summary_statistics(reads_df).to_string(float_format="{:.2f}".format))
    h = compute_histogram_summary(hist_df)
    typer.echo(f"Bases: {h['total_bases']}")
    typer.echo(f"Mean per-base Phred: {h['mean_base_phred']:.2f}")
    typer.echo(f"Q20+: {h['frac_q20']:.2%}  Q30+: {h['frac_q30']:.2%}")

# ------------------------------------------------------------------ plot-hist
@app.command("plot-hist")
def plot_hist(
    hist_csv: pathlib.Path,
    output: Optional[pathlib.Path] = typer.Option(
        None, "--output", "-o", help="SVG path (default: HIST_CSV with .svg suffix)"),
):
    """Render a Phred histogram CSV as an SVG bar chart."""
    out_svg = output or hist_csv.with_suffix(".svg")
    try:
        hist_df = load_histogram(hist_csv)
    except OSError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    if plot_phred_histogram(hist_df, title=hist_csv.stem, save_path=out_svg) is None:
        raise typer.Exit(1)
    typer.echo("Done – figure saved → {}".format(out_svg))


if __name__ == "__main__":
    app()
