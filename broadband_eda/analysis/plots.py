import json
import logging
from pathlib import Path

import geopandas as gpd
import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from broadband_eda import config

logger = logging.getLogger(__name__)


def sqrt_ticks(vmax, n=5):
    """Colour bar ticks for a sqrt-scaled colour axis, labelled in raw units."""
    if pd.isna(vmax) or vmax <= 0:
        return [0.0], ["0"]
    raw = np.unique(np.round(np.linspace(0, np.sqrt(vmax), n) ** 2, 1))
    return np.sqrt(raw).tolist(), [f"{v:,.1f}".rstrip("0").rstrip(".") for v in raw]


def map_center(gdf: gpd.GeoDataFrame) -> dict:
    minx, miny, maxx, maxy = gdf.total_bounds
    return {"lat": (miny + maxy) / 2, "lon": (minx + maxx) / 2}


def choropleth(gdf: gpd.GeoDataFrame, metric, title=None, zoom=6, height=650) -> go.Figure:
    """Block choropleth of ``metric`` on a square-root colour scale."""
    df_map = gdf.copy()
    color_col = f"sqrt_{metric}"
    df_map[color_col] = np.sqrt(pd.to_numeric(df_map[metric], errors="coerce").clip(lower=0))

    geojson = json.loads(df_map[["block_geoid", "geometry"]].to_json())
    label = config.MAP_METRICS.get(metric, metric)

    fig = px.choropleth_map(
        df_map.drop(columns="geometry"),
        geojson=geojson,
        locations="block_geoid",
        featureidkey="properties.block_geoid",
        color=color_col,
        hover_name="block_geoid",
        hover_data={metric: True, color_col: False},
        labels={metric: label},
        color_continuous_scale=config.COLOR_SCALE,
        map_style="carto-positron",
        center=map_center(df_map) if len(df_map) else None,
        zoom=zoom,
        opacity=0.85,
        height=height,
        title=title or label,
    )

    tickvals, ticktext = sqrt_ticks(df_map[metric].max())
    fig.update_layout(
        margin={"r": 0, "t": 40, "l": 0, "b": 0},
        coloraxis_colorbar=dict(title=label, tickvals=tickvals, ticktext=ticktext),
    )
    return fig


def choropleths(gdf: gpd.GeoDataFrame, metrics=None) -> dict:
    metrics = metrics or list(config.MAP_METRICS)
    return {f"map_{m}": choropleth(gdf, m) for m in metrics}


def provider_count_histogram(blocks: pd.DataFrame, bin_width=config.HISTOGRAM_BIN_WIDTH) -> go.Figure:
    """Blocks per provider count, fixed-width bins centred on whole counts."""
    counts = blocks["provider_count"]
    fig = px.histogram(
        blocks,
        x="provider_count",
        title="Distribution of providers per block",
        labels={"provider_count": "Providers per block"},
    )
    start = (counts.min() if len(counts) else 0) - bin_width / 2
    end = (counts.max() if len(counts) else 0) + bin_width / 2
    fig.update_traces(xbins=dict(start=start, end=end, size=bin_width))
    fig.update_layout(yaxis_title="Blocks", bargap=0.05)
    return fig


def write_figures(figures: dict, out_dir) -> list:
    """Write each figure to ``out_dir/<name>.html``."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    paths = []
    for name, fig in figures.items():
        path = out_dir / f"{name}.html"
        fig.write_html(path, include_plotlyjs="cdn")
        logger.info("Saved %s", path)
        paths.append(path)
    return paths
