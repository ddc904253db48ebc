# ambot/route_writer.py
from pathlib import Path

import pandas as pd
from loguru import logger

from .models import Route

COLUMNS = ["RouteName", "Distance", "Runway", "DemandY", "DemandJ", "DemandF", "DemandLarge", "DemandHeavy"]


class RouteWriter:
    """CSV sink for one hub's scan.

    The file is created with its header on open. A route key is written at
    most once per writer; later duplicates are dropped.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.seen: set[str] = set()
        self.written = 0
        self.path.parent.mkdir(parents=True, exist_ok=True)
        pd.DataFrame(columns=COLUMNS).to_csv(self.path, index=False)

    def write(self, key: str, route: Route) -> bool:
        if key in self.seen:
            return False
        self.seen.add(key)
        pd.DataFrame([route.as_row()], columns=COLUMNS).to_csv(self.path, mode="a", header=False, index=False)
        self.written += 1
        logger.debug(f"🧭 New route {key}: {route}")
        return True

    def close(self) -> None:
        logger.success(f"💾 Saved {self.written} routes to {self.path.name}")

    def __enter__(self) -> "RouteWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
