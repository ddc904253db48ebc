# test_route_writer.py
import pandas as pd

from ambot.models import Route
from ambot.route_writer import COLUMNS, RouteWriter


def test_header_written_on_open(tmp_path):
    path = tmp_path / "routes_1.csv"
    with RouteWriter(path):
        pass
    assert path.read_text(encoding="utf-8").strip() == ",".join(COLUMNS)


def test_duplicate_keys_dropped(tmp_path):
    path = tmp_path / "routes_1.csv"
    with RouteWriter(path) as writer:
        assert writer.write("JFK-LHR", Route("JFK-LHR", distance=5540, demand_large=3000))
        assert not writer.write("JFK-LHR", Route("JFK-LHR", distance=1))
        assert writer.write("JFK-CDG", Route("JFK-CDG", distance=5830))
        assert writer.written == 2

    df = pd.read_csv(path)
    assert list(df.columns) == COLUMNS
    assert df["RouteName"].tolist() == ["JFK-LHR", "JFK-CDG"]
    assert df["Distance"].tolist() == [5540, 5830]
    assert df["DemandLarge"].tolist() == [3000, 0]


def test_new_writer_starts_fresh(tmp_path):
    path = tmp_path / "routes_1.csv"
    with RouteWriter(path) as writer:
        writer.write("A-B", Route("A-B"))
    with RouteWriter(path) as writer:
        assert writer.write("A-B", Route("A-B"))
    assert len(pd.read_csv(path)) == 1
