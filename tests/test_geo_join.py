import geopandas as gpd
import pandas as pd
import pytest
from shapely.geometry import box

from broadband_eda.analysis.geo_join import join_blocks, load_block_geometry

from tests.conftest import B1, B2, B3, B4, NO_METRICS


def test_load_block_geometry(blocks_geojson):
    gdf = load_block_geometry(blocks_geojson)

    assert list(gdf.columns) == ["block_geoid", "geometry"]
    assert set(gdf["block_geoid"]) == {B1, B2, B3, NO_METRICS}
    assert gdf.crs.to_epsg() == 4326


def test_load_block_geometry_reprojects(tmp_path):
    gdf = gpd.GeoDataFrame(
        {"GEOID10": [B1]},
        geometry=[box(-85.0, 37.0, -84.99, 37.01)],
        crs="EPSG:4326",
    ).to_crs(epsg=4269)
    path = tmp_path / "nad83.geojson"
    gdf.to_file(path, driver="GeoJSON")

    assert load_block_geometry(path).crs.to_epsg() == 4326


def test_missing_key_field_raises(blocks_geojson):
    with pytest.raises(ValueError, match="GEOID20"):
        load_block_geometry(blocks_geojson, key_field="GEOID20")


def test_inner_join_drops_unmatched_ids(blocks_geojson):
    geometry = load_block_geometry(blocks_geojson)
    blocks = pd.DataFrame({
        "block_geoid": [B1, B2, B3, B4],
        "provider_count": [2, 1, 3, 2],
    })

    joined = join_blocks(geometry, blocks)

    assert isinstance(joined, gpd.GeoDataFrame)
    assert set(joined["block_geoid"]) == {B1, B2, B3}
    assert B4 not in set(joined["block_geoid"])
    assert NO_METRICS not in set(joined["block_geoid"])
    assert joined.set_index("block_geoid").loc[B3, "provider_count"] == 3


def test_numeric_key_field_still_joins(tmp_path):
    gdf = gpd.GeoDataFrame(
        {"GEOID10": [float(B1), float("10010201001000")]},
        geometry=[box(-85.0, 37.0, -84.99, 37.01), box(-86.0, 32.0, -85.99, 32.01)],
        crs="EPSG:4326",
    )
    path = tmp_path / "numeric_geoid.geojson"
    gdf.to_file(path, driver="GeoJSON")

    geometry = load_block_geometry(path)
    joined = join_blocks(geometry, pd.DataFrame({"block_geoid": [B1], "provider_count": [2]}))

    assert set(geometry["block_geoid"]) == {B1, "010010201001000"}
    assert joined["block_geoid"].tolist() == [B1]
