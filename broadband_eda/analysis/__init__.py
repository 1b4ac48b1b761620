from broadband_eda.analysis.stats import (
    ProviderCountSummary,
    format_report,
    provider_count_frequencies,
    provider_count_summary,
    speed_correlations,
)
from broadband_eda.analysis.geo_join import join_blocks, load_block_geometry

__all__ = [
    "ProviderCountSummary",
    "format_report",
    "provider_count_frequencies",
    "provider_count_summary",
    "speed_correlations",
    "join_blocks",
    "load_block_geometry",
]
