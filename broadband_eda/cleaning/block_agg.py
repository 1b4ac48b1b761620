import logging

import pandas as pd

from broadband_eda import config

logger = logging.getLogger(__name__)

PAIR_KEYS = ["provider_id", "block_geoid"]


def dedupe_provider_blocks(df: pd.DataFrame) -> pd.DataFrame:
    """Collapse coverage rows to one row per (provider, block).

    A provider reporting several technologies in the same block appears
    once; its speeds are the max over those technology rows.
    Rows without a provider or block id are not coverage and are dropped.
    """
    missing = df[PAIR_KEYS].isna().any(axis=1)
    if missing.any():
        logger.info("Dropped %d rows missing provider_id or block_geoid", missing.sum())
        df = df[~missing]

    pairs = df.groupby(PAIR_KEYS, as_index=False).agg(
        county_fips=("county_fips", "first"),
        brand_name=("brand_name", "first"),
        max_advertised_download_speed=("max_advertised_download_speed", "max"),
        max_advertised_upload_speed=("max_advertised_upload_speed", "max"),
    )
    logger.info("Provider-block pairs after dedup: %d (from %d rows)", len(pairs), len(df))
    return pairs


def agg_tech(s: pd.Series) -> str:
    """Combine unique technology groups into one string."""
    vals = s.dropna().unique().tolist()
    return "; ".join(sorted(vals))


def classify_row(row):
    # Unserved:    <25/3
    # Underserved: <100/20 (but not unserved)
    # Served:      >=100 and >=20
    down = row["max_down"]
    up = row["max_up"]
    if pd.isna(down) or pd.isna(up):
        return "Unknown"
    if down < config.UNSERVED_DOWN or up < config.UNSERVED_UP:
        return "Unserved"
    if down < config.UNDERSERVED_DOWN or up < config.UNDERSERVED_UP:
        return "Underserved"
    return "Served"


def aggregate_blocks(df: pd.DataFrame) -> pd.DataFrame:
    """Per-block provider count and max advertised speeds."""
    pairs = dedupe_provider_blocks(df)

    blocks = pairs.groupby("block_geoid").agg(
        county_fips=("county_fips", "first"),
        provider_count=("provider_id", "nunique"),
        max_down=("max_advertised_download_speed", "max"),
        max_up=("max_advertised_upload_speed", "max"),
    )

    if "tech_group" in df.columns:
        blocks["tech_types"] = df.groupby("block_geoid")["tech_group"].agg(agg_tech)

    blocks = blocks.reset_index()
    if blocks.empty:
        blocks["service_category"] = pd.Series(dtype=str)
    else:
        blocks["service_category"] = blocks.apply(classify_row, axis=1)

    logger.info("Grouped rows (unique blocks): %d", len(blocks))
    return blocks


def summarize_counties(blocks: pd.DataFrame) -> pd.DataFrame:
    """Roll per-block metrics up to county level."""
    county = blocks.groupby("county_fips").agg(
        block_count=("block_geoid", "count"),
        avg_provider_count=("provider_count", "mean"),
        median_max_down=("max_down", "median"),
        unserved_blocks=("service_category", lambda x: (x == "Unserved").sum()),
        underserved_blocks=("service_category", lambda x: (x == "Underserved").sum()),
    ).reset_index()

    county["pct_unserved"] = county["unserved_blocks"] / county["block_count"] * 100
    county["pct_underserved"] = county["underserved_blocks"] / county["block_count"] * 100
    return county
