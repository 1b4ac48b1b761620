import pytest

from broadband_eda.pipeline import main, run

from tests.conftest import B1, B2, B3


def test_run_end_to_end(coverage_csv, blocks_geojson):
    result = run(coverage_csv, blocks_geojson, state_abbr="KY")

    assert len(result.blocks) == 4
    assert result.summary.mean == 2
    assert result.summary.median == 2
    assert result.summary.blocks_with_mean == 2
    assert set(result.joined["block_geoid"]) == {B1, B2, B3}
    assert set(result.figures) == {
        "map_provider_count",
        "map_max_down",
        "map_max_up",
        "hist_provider_count",
    }
    for r in result.correlations.values():
        assert -1.0 <= r <= 1.0


def test_main_writes_html_and_prints_report(coverage_csv, blocks_geojson, tmp_path, capsys):
    out_dir = tmp_path / "figures"

    main([
        "--coverage", str(coverage_csv),
        "--geometry", str(blocks_geojson),
        "--state", "KY",
        "--out-dir", str(out_dir),
    ])

    out = capsys.readouterr().out
    assert "Blocks: 4" in out
    assert "Median providers per block: 2" in out
    assert sorted(p.name for p in out_dir.iterdir()) == [
        "hist_provider_count.html",
        "map_max_down.html",
        "map_max_up.html",
        "map_provider_count.html",
    ]


def test_main_all_states(coverage_csv, blocks_geojson, tmp_path):
    result = main([
        "--coverage", str(coverage_csv),
        "--geometry", str(blocks_geojson),
        "--state", "",
        "--out-dir", str(tmp_path),
    ])

    assert len(result.blocks) == 5


def test_bad_schema_propagates(tmp_path, blocks_geojson):
    bad = tmp_path / "bad.csv"
    bad.write_text("a,b,c\n1,2,3\n")

    with pytest.raises(ValueError):
        run(bad, blocks_geojson)
