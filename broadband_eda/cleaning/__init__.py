from broadband_eda.cleaning.load_fbd import load_coverage, rename_columns
from broadband_eda.cleaning.block_agg import (
    aggregate_blocks,
    dedupe_provider_blocks,
    summarize_counties,
)

__all__ = [
    "load_coverage",
    "rename_columns",
    "aggregate_blocks",
    "dedupe_provider_blocks",
    "summarize_counties",
]
