import logging

import geopandas as gpd
import pandas as pd

from broadband_eda import config

logger = logging.getLogger(__name__)


def normalize_geoid(s: pd.Series) -> pd.Series:
    # converted TIGER files sometimes store GEOID10 as a number
    if pd.api.types.is_numeric_dtype(s):
        s = s.astype("Int64").astype(str)
    return s.astype(str).str.zfill(config.BLOCK_GEOID_WIDTH)


def load_block_geometry(path, key_field=config.GEOMETRY_KEY) -> gpd.GeoDataFrame:
    """Read census block polygons keyed by ``block_geoid`` in WGS84."""
    gdf = gpd.read_file(path)
    logger.info("Loaded %d block polygons from %s", len(gdf), path)

    if key_field not in gdf.columns:
        raise ValueError(f"{path}: key field {key_field!r} not found")

    gdf = gdf[[key_field, "geometry"]].rename(columns={key_field: "block_geoid"})
    gdf["block_geoid"] = normalize_geoid(gdf["block_geoid"])

    # TIGER files ship in NAD83; web maps want WGS84
    if gdf.crs is None:
        gdf = gdf.set_crs(epsg=4326)
    elif gdf.crs != "EPSG:4326":
        gdf = gdf.to_crs(epsg=4326)

    return gdf


def join_blocks(geometry: gpd.GeoDataFrame, blocks: pd.DataFrame) -> gpd.GeoDataFrame:
    """Inner join of block polygons and block metrics on ``block_geoid``."""
    joined = geometry.merge(blocks, on="block_geoid", how="inner")

    logger.info(
        "Joined blocks: %d (geometry without metrics: %d, metrics without geometry: %d)",
        len(joined),
        len(geometry) - geometry["block_geoid"].isin(blocks["block_geoid"]).sum(),
        len(blocks) - blocks["block_geoid"].isin(geometry["block_geoid"]).sum(),
    )
    return joined
