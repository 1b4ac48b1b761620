"""Descriptive statistics over per-block provider counts."""

from dataclasses import dataclass

import pandas as pd

from broadband_eda import config


@dataclass(frozen=True)
class ProviderCountSummary:
    mean: int
    median: float
    blocks_with_mean: int
    blocks_with_median: int
    min: int
    max: int
    blocks: int


def provider_count_summary(counts: pd.Series) -> ProviderCountSummary:
    """Mean (rounded to the nearest integer) and median provider count,
    plus how many blocks sit exactly on each."""
    counts = pd.to_numeric(counts, errors="coerce").dropna()
    if counts.empty:
        raise ValueError("No provider counts to summarize")

    mean = int(round(float(counts.mean())))
    median = float(counts.median())

    return ProviderCountSummary(
        mean=mean,
        median=median,
        blocks_with_mean=int((counts == mean).sum()),
        blocks_with_median=int((counts == median).sum()),
        min=int(counts.min()),
        max=int(counts.max()),
        blocks=len(counts),
    )


def provider_count_frequencies(counts: pd.Series) -> pd.Series:
    """Number of blocks per provider count, ordered by provider count."""
    freq = counts.value_counts().sort_index()
    freq.index.name = "provider_count"
    freq.name = "blocks"
    return freq


def speed_correlations(blocks: pd.DataFrame, metrics=None) -> dict:
    """Pearson r between provider count and each speed metric.

    Incomplete pairs are dropped; a metric with fewer than two complete
    pairs or no variance yields NaN.
    """
    metrics = metrics or config.SPEED_METRICS
    counts = pd.to_numeric(blocks["provider_count"], errors="coerce")
    return {
        m: float(counts.corr(pd.to_numeric(blocks[m], errors="coerce"), method="pearson"))
        for m in metrics
    }


def format_report(summary: ProviderCountSummary, correlations: dict, frequencies=None) -> str:
    lines = [
        f"Blocks: {summary.blocks:,}",
        f"Providers per block: min {summary.min}, max {summary.max}",
        f"Mean providers per block (rounded): {summary.mean} "
        f"({summary.blocks_with_mean:,} blocks)",
        f"Median providers per block: {summary.median:g} "
        f"({summary.blocks_with_median:,} blocks)",
    ]
    for metric, r in correlations.items():
        label = config.MAP_METRICS.get(metric, metric)
        r_text = "n/a" if pd.isna(r) else f"{r:.3f}"
        lines.append(f"Correlation provider count vs {label}: {r_text}")

    if frequencies is not None:
        lines.append("")
        lines.append("Blocks by provider count:")
        for count, n in frequencies.items():
            lines.append(f"  {count:>3}: {n:,}")

    return "\n".join(lines)
