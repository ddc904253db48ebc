# ambot/scanner.py
"""
Route scanner: one-shot sweep of the fleet research form.

For every configured hub the max-distance filter walks down from
``max_route_range_km`` to ``min_route_range_km`` in ``scan_step_km`` steps
and every route not seen before for that hub goes to ``routes_<id>.csv``.
"""
import time
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from . import selectors as sel
from .bot import SessionFactory, authenticate
from .config import Config
from .models import Route
from .page import BrowserSession, PageAccessor
from .route_writer import RouteWriter
from .utils.parsing import atoi_safe

CARGO_DEMAND_SCALE = 1000


class Scanner:
    def __init__(
        self,
        conf: Config,
        session_factory: Optional[SessionFactory] = None,
        writer_factory: Callable[[Path], RouteWriter] = RouteWriter,
        output_dir: str | Path = ".",
    ):
        self.conf = conf
        self.session_factory = session_factory or BrowserSession.from_config
        self.writer_factory = writer_factory
        self.output_dir = Path(output_dir)

    async def run(self) -> dict[str, int]:
        """Log in and scan. Returns the number of routes written per hub."""
        start = time.monotonic()
        async with self.session_factory(self.conf) as page:
            await authenticate(page, self.conf)
            written = await self.scan(page)
        logger.success(f"🏁 Scan complete in {time.monotonic() - start:.1f}s: {written}")
        return written

    async def scan(self, page: PageAccessor) -> dict[str, int]:
        logger.info(f"🔭 Scanning routes for hubs {list(self.conf.hubs_list)}")
        written: dict[str, int] = {}
        await page.click(sel.BUTTON_MAIN_FLEET)
        try:
            await page.click(sel.BUTTON_COMMON_TAB3)
            await page.wait_visible(sel.TEXTFIELD_FLEET_RESEARCH_MIN_RUNWAY)
            options = await page.find_all(sel.LIST_FLEET_RESEARCH_DEPARTING_FROM)
            for option in options:
                hub = await page.text(option)
                if hub not in self.conf.hubs_list:
                    continue
                value = await page.attribute(option, "value")
                logger.info(f"🛫 Researching routes from {hub}")
                await page.set_value(sel.SELECT_FLEET_RESEARCH_DEPARTING_FROM, value)
                with self.writer_factory(self.output_dir / f"routes_{value}.csv") as writer:
                    await self.scan_hub(page, hub, writer)
                    written[hub] = writer.written
        finally:
            await page.click(sel.BUTTON_COMMON_CLOSE_POPUP)

        missing = set(self.conf.hubs_list) - set(written)
        if missing:
            logger.warning(f"⚠️ Hubs not offered by the research form: {sorted(missing)}")
        return written

    async def scan_hub(self, page: PageAccessor, hub: str, writer: RouteWriter) -> None:
        c = self.conf
        logger.debug(
            f"📏 {hub}: {c.max_route_range_km}..{c.min_route_range_km} km "
            f"step {c.scan_step_km}, runway >= {c.min_runway_length}"
        )
        distance = c.max_route_range_km
        while distance >= c.min_route_range_km:
            await self.scan_distance(page, hub, distance, writer)
            distance -= c.scan_step_km

    async def scan_distance(self, page: PageAccessor, hub: str, distance: int, writer: RouteWriter) -> None:
        await page.set_value(sel.TEXTFIELD_FLEET_RESEARCH_MAX_DISTANCE, str(distance))
        await page.set_value(sel.TEXTFIELD_FLEET_RESEARCH_MIN_RUNWAY, str(self.conf.min_runway_length))
        await page.click(sel.BUTTON_FLEET_RESEARCH_SEARCH)

        results = await page.find_all(sel.LIST_FLEET_RESEARCH_SEARCH_RESULTS)
        if not results:
            logger.debug(f"🔍 {hub}: no routes up to {distance} km")
            return
        logger.debug(f"🔍 {hub}: {len(results)} routes up to {distance} km")

        for elem in results:
            key, route = await read_route(page, elem)
            writer.write(key, route)


async def read_route(page: PageAccessor, elem) -> tuple[str, Route]:
    origin = await page.text(sel.TEXT_FLEET_RESEARCH_ROUTE_FROM, scope=elem)
    dest = await page.text(sel.TEXT_FLEET_RESEARCH_ROUTE_TO, scope=elem)

    async def attr(name: str) -> int:
        return atoi_safe(await page.attribute(elem, name))

    key = f"{origin}-{dest}"
    route = Route(
        name=key,
        distance=await attr("data-distance"),
        runway=await attr("data-rwy"),
        demand_y=await attr("data-yclass"),
        demand_j=await attr("data-jclass"),
        demand_f=await attr("data-fclass"),
        demand_large=await attr("data-large") * CARGO_DEMAND_SCALE,
        demand_heavy=await attr("data-heavy") * CARGO_DEMAND_SCALE,
    )
    return key, route
