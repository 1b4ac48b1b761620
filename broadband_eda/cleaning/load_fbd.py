import logging

import pandas as pd

from broadband_eda import config

logger = logging.getLogger(__name__)


def rename_columns(df: pd.DataFrame, source="coverage data") -> pd.DataFrame:
    """Replace the raw Form 477 headers with their semantic names.

    The mapping is positional, so a file with a different column count
    is rejected instead of being silently mislabelled.
    """
    if len(df.columns) != config.EXPECTED_COLUMNS:
        raise ValueError(
            f"{source}: expected {config.EXPECTED_COLUMNS} columns, "
            f"found {len(df.columns)}"
        )
    df = df.copy()
    df.columns = list(config.COLUMN_MAP.values())
    return df


def load_coverage(path, state_abbr=None, consumer_only=False) -> pd.DataFrame:
    """Load a Form 477 fixed deployment CSV into one row per
    (provider, block, technology)."""
    df = pd.read_csv(path, dtype=str, encoding="latin-1")
    logger.info("Loaded %d coverage rows from %s", len(df), path)

    df = rename_columns(df, source=str(path))

    # ------------------------------------------------
    # 1. NUMERIC SPEEDS + FLAGS
    # ------------------------------------------------
    for col in ["max_advertised_download_speed", "max_advertised_upload_speed"]:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    for col in ["consumer", "business"]:
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0).astype(int)

    # ------------------------------------------------
    # 2. KEYS: 15-digit block GEOID + county FIPS
    # ------------------------------------------------
    df["block_geoid"] = df["block_geoid"].str.strip().str.zfill(config.BLOCK_GEOID_WIDTH)
    df["county_fips"] = df["block_geoid"].str[: config.COUNTY_FIPS_WIDTH]
    df["technology"] = df["technology"].str.strip()

    # ------------------------------------------------
    # 3. OPTIONAL FILTERS
    # ------------------------------------------------
    if state_abbr:
        df = df[df["state_abbr"] == state_abbr]
        logger.info("Rows after %s filter: %d", state_abbr, len(df))

    if consumer_only:
        df = df[df["consumer"] == 1]
        logger.info("Rows after consumer filter: %d", len(df))

    df["tech_group"] = df["technology"].map(config.TECH_MAP).fillna(config.TECH_UNKNOWN)

    return df.reset_index(drop=True)
