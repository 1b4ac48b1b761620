"""Shared fixtures: a small Form 477 extract and matching block polygons."""

import geopandas as gpd
import pandas as pd
import pytest
from shapely.geometry import box

from broadband_eda import config

HEADER = list(config.COLUMN_MAP)

B1 = "211110001001000"
B2 = "211110001001001"
B3 = "211110001001002"
B4 = "211130002002000"
NO_METRICS = "211119999999999"

# (provider, name, state, block, tech, consumer, down, up, business)
ROWS = [
    ("1001", "Alpha Net", "KY", B1, "10", 1, "10", "1", 0),
    ("1001", "Alpha Net", "KY", B1, "50", 1, "1000", "1000", 0),
    ("1002", "Beta Cable", "KY", B1, "40", 1, "300", "20", 0),
    ("1001", "Alpha Net", "KY", B2, "10", 1, "6", "1", 0),
    ("1001", "Alpha Net", "KY", B3, "40", 1, "50", "5", 0),
    ("1002", "Beta Cable", "KY", B3, "70", 1, "25", "3", 0),
    ("1003", "Gamma Fiber", "KY", B3, "50", 1, "75", "10", 0),
    ("1002", "Beta Cable", "KY", B4, "40", 1, "100", "10", 0),
    ("1003", "Gamma Fiber", "KY", B4, "50", 0, "", "5", 1),
    ("2001", "Delta Wireless", "AL", "10010201001000", "70", 1, "25", "3", 0),
]


def coverage_frame(rows=ROWS) -> pd.DataFrame:
    records = []
    for i, (pid, name, state, block, tech, consumer, down, up, business) in enumerate(rows):
        records.append([
            str(i + 1), pid, f"00{pid}", name, name, f"{name} Holdings", pid, name,
            state, block, tech, consumer, down, up, business,
        ])
    return pd.DataFrame(records, columns=HEADER)


@pytest.fixture
def coverage_csv(tmp_path):
    path = tmp_path / "fbd_sample.csv"
    coverage_frame().to_csv(path, index=False)
    return path


@pytest.fixture
def blocks_geojson(tmp_path):
    ids = [B1, B2, B3, NO_METRICS]
    gdf = gpd.GeoDataFrame(
        {"GEOID10": ids, "ALAND10": [100, 200, 300, 400]},
        geometry=[box(-85.0 + i * 0.01, 37.0, -84.99 + i * 0.01, 37.01) for i in range(len(ids))],
        crs="EPSG:4326",
    )
    path = tmp_path / "blocks.geojson"
    gdf.to_file(path, driver="GeoJSON")
    return path
