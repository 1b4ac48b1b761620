"""Run the block-level broadband analysis top to bottom.

    python -m broadband_eda.pipeline --coverage fbd.csv --geometry blocks.shp
"""

import argparse
import logging
from dataclasses import dataclass, field

import geopandas as gpd
import pandas as pd

from broadband_eda import config
from broadband_eda.analysis.geo_join import join_blocks, load_block_geometry
from broadband_eda.analysis.plots import choropleths, provider_count_histogram, write_figures
from broadband_eda.analysis.stats import (
    ProviderCountSummary,
    format_report,
    provider_count_frequencies,
    provider_count_summary,
    speed_correlations,
)
from broadband_eda.cleaning.block_agg import aggregate_blocks, summarize_counties
from broadband_eda.cleaning.load_fbd import load_coverage

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    coverage: pd.DataFrame
    blocks: pd.DataFrame
    counties: pd.DataFrame
    summary: ProviderCountSummary
    frequencies: pd.Series
    correlations: dict
    joined: gpd.GeoDataFrame
    figures: dict = field(default_factory=dict)

    @property
    def report(self) -> str:
        return format_report(self.summary, self.correlations, self.frequencies)


def run(
    coverage_path=config.PATH_COVERAGE,
    geometry_path=config.PATH_BLOCKS,
    geometry_key=config.GEOMETRY_KEY,
    state_abbr=config.STATE_ABBR,
    consumer_only=False,
) -> PipelineResult:
    # 1. load + rename
    coverage = load_coverage(coverage_path, state_abbr=state_abbr, consumer_only=consumer_only)

    # 2. dedupe + per-block aggregates
    blocks = aggregate_blocks(coverage)
    counties = summarize_counties(blocks)

    # 3. statistics
    summary = provider_count_summary(blocks["provider_count"])
    frequencies = provider_count_frequencies(blocks["provider_count"])
    correlations = speed_correlations(blocks)

    # 4. geo-join
    geometry = load_block_geometry(geometry_path, key_field=geometry_key)
    joined = join_blocks(geometry, blocks)

    # 5. figures
    figures = choropleths(joined)
    figures["hist_provider_count"] = provider_count_histogram(blocks)

    return PipelineResult(
        coverage=coverage,
        blocks=blocks,
        counties=counties,
        summary=summary,
        frequencies=frequencies,
        correlations=correlations,
        joined=joined,
        figures=figures,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--coverage", default=config.PATH_COVERAGE, help="Form 477 deployment CSV")
    parser.add_argument("--geometry", default=config.PATH_BLOCKS, help="census block boundary file")
    parser.add_argument("--geometry-key", default=config.GEOMETRY_KEY)
    parser.add_argument("--state", default=config.STATE_ABBR, help="state abbreviation, '' for all rows")
    parser.add_argument("--consumer-only", action="store_true", help="keep residential records only")
    parser.add_argument("--out-dir", help="write figures as HTML here instead of showing them")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = run(
        coverage_path=args.coverage,
        geometry_path=args.geometry,
        geometry_key=args.geometry_key,
        state_abbr=args.state or None,
        consumer_only=args.consumer_only,
    )

    print(result.report)

    if args.out_dir:
        paths = write_figures(result.figures, args.out_dir)
        print(f"\nSaved {len(paths)} figures to: {args.out_dir}")
    else:
        for fig in result.figures.values():
            fig.show()

    return result


if __name__ == "__main__":
    main()
