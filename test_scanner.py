# test_scanner.py
"""Route scan over the scripted fleet research form."""
from dataclasses import replace

import pandas as pd
import pytest

from ambot import selectors as sel
from ambot.errors import AuthError
from ambot.scanner import Scanner
from conftest import session_for


def research_form(page, hubs):
    page.show(sel.BUTTON_MAIN_HUBS)
    page.show(sel.TEXTFIELD_FLEET_RESEARCH_MIN_RUNWAY)
    options = []
    for value, name in hubs:
        option = f"option:{value}"
        options.append(option)
        page.set_text(option, name)
        page.attrs[(option, "value")] = value
    page.lists[(sel.LIST_FLEET_RESEARCH_DEPARTING_FROM, None)] = options


def route_elem(page, elem, origin, dest, distance, large="2", heavy=""):
    page.set_text(sel.TEXT_FLEET_RESEARCH_ROUTE_FROM, origin, scope=elem)
    page.set_text(sel.TEXT_FLEET_RESEARCH_ROUTE_TO, dest, scope=elem)
    for name, value in (
        ("data-distance", str(distance)),
        ("data-rwy", "10000"),
        ("data-yclass", "500"),
        ("data-jclass", "120"),
        ("data-fclass", "40"),
        ("data-large", large),
        ("data-heavy", heavy),
    ):
        page.attrs[(elem, name)] = value
    return elem


@pytest.fixture
def scan_conf(conf):
    return replace(
        conf,
        hubs_list=("New York JFK",),
        max_route_range_km=7000,
        min_route_range_km=6800,
        scan_step_km=100,
        min_runway_length=9680,
    )


@pytest.mark.asyncio
async def test_scan_walks_distances_and_dedups(page, scan_conf, tmp_path):
    research_form(page, [("3", "New York JFK"), ("7", "Paris CDG")])
    lhr = route_elem(page, "r:lhr", "JFK", "LHR", 5540)
    fra = route_elem(page, "r:fra", "JFK", "FRA", 6200, large="", heavy="3")
    # every search shows the same two routes
    page.lists[(sel.LIST_FLEET_RESEARCH_SEARCH_RESULTS, None)] = [lhr, fra]

    written = await Scanner(scan_conf, session_for(page), output_dir=tmp_path).run()

    assert written == {"New York JFK": 2}
    assert (sel.SELECT_FLEET_RESEARCH_DEPARTING_FROM, "3", None) in page.values
    distances = [v for s, v, _ in page.values if s == sel.TEXTFIELD_FLEET_RESEARCH_MAX_DISTANCE]
    assert distances == ["7000", "6900", "6800"]
    assert page.clicked(sel.BUTTON_FLEET_RESEARCH_SEARCH) == 3
    assert not (tmp_path / "routes_7.csv").exists()

    df = pd.read_csv(tmp_path / "routes_3.csv")
    assert df["RouteName"].tolist() == ["JFK-LHR", "JFK-FRA"]
    assert df["DemandLarge"].tolist() == [2000, 0]
    assert df["DemandHeavy"].tolist() == [0, 3000]
    assert df["Runway"].tolist() == [10000, 10000]


@pytest.mark.asyncio
async def test_scan_with_no_results(page, scan_conf, tmp_path):
    research_form(page, [("3", "New York JFK")])

    written = await Scanner(scan_conf, session_for(page), output_dir=tmp_path).run()

    assert written == {"New York JFK": 0}
    assert len(pd.read_csv(tmp_path / "routes_3.csv")) == 0
    assert page.clicked(sel.BUTTON_COMMON_CLOSE_POPUP) == 1


@pytest.mark.asyncio
async def test_scan_needs_login(page, scan_conf, tmp_path):
    with pytest.raises(AuthError):
        await Scanner(scan_conf, session_for(page), output_dir=tmp_path).run()
    assert page.clicked(sel.BUTTON_MAIN_FLEET) == 0
