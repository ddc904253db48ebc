# ambot/metrics.py
"""
Prometheus gauges published by the bot.

All gauges live in a dedicated ``CollectorRegistry`` owned by ``Metrics`` so
several instances (tests, scanner) never clash on the global registry.
"""
from prometheus_client import CollectorRegistry, Gauge
from loguru import logger

NAMESPACE = "am4"


class Metrics:
    def __init__(self, registry: CollectorRegistry | None = None):
        self.registry = registry if registry is not None else CollectorRegistry()

        def gauge(name, documentation, labels=(), namespace=NAMESPACE):
            return Gauge(name, documentation, labels, namespace=namespace, registry=self.registry)

        # Run status
        self.up = gauge("up", "Was the last execution successful.", namespace="")
        self.start_time = gauge("process_start_time_seconds", "Start time of the process since unix epoch in seconds.", namespace="")
        self.duration = gauge("duration_seconds", "Duration of execution in seconds.")

        # Company
        self.company_rank = gauge("company_rank", "Company rank value.")
        self.training_points = gauge("company_training_points", "Company training points value.")
        self.fleet_size = gauge("ac_fleet_size", "Company fleet size value.")
        self.routes = gauge("ac_routes", "Company routes number value.")
        self.hubs = gauge("company_hubs", "Company hubs number value.")
        self.hangar_capacity = gauge("ac_hangar_capacity", "Company hangar capacity value.")
        self.share_value = gauge("company_share_value", "Company share price value.")
        self.flights_operated = gauge("stats_flights_operated", "Company flights operated value.")
        self.passengers = gauge("stats_passengers_transported", "Passengers transported by type.", ["type"])
        self.cargo = gauge("stats_cargo_transported", "Cargo transported by type.", ["type"])
        self.aircraft_status = gauge("ac_status", "Aircraft status by type.", ["type"])
        self.reputation = gauge("company_reputation", "Company reputation by company type.", ["type"])
        self.money = gauge("company_money", "Company money by account type.", ["type"])
        self.staff_salary = gauge("company_staff_salary", "Company staff salary by staff type.", ["type"])
        self.staff_morale = gauge("company_staff_morale", "Company staff morale percent by staff type.", ["type"])

        # Operations
        self.marketing_duration = gauge("marketing_company_duration_seconds", "Marketing company duration in seconds by company type.", ["type"])
        self.hub_stats = gauge("hub_stats", "Company hub info by hub name and stat type.", ["name", "type"])
        self.fuel_holding = gauge("company_fuel_holding", "Fuel amount holding by fuel type.", ["type"])
        self.fuel_limit = gauge("company_fuel_limit", "Fuel amount limit by fuel type.", ["type"])
        self.fuel_price = gauge("market_fuel_price", "Fuel amount price by fuel type.", ["type"])

        # Alliance
        self.alliance_contributed_total = gauge("alliance_contributed_total", "Alliance contributed total value.")
        self.alliance_contributed_per_day = gauge("alliance_contributed_per_day", "Alliance contributed per day value.")
        self.alliance_flights = gauge("alliance_flights", "Alliance flights value.")
        self.alliance_season_money = gauge("alliance_season_money", "Alliance season money value.")
        member = ["uid", "name"]
        self.member_share_price = gauge("alliance_member_share_price", "Alliance member share price.", member)
        self.member_contributed_total = gauge("alliance_member_contributed_total", "Alliance member contributed total.", member)
        self.member_contributed_per_day = gauge("alliance_member_contributed_per_day", "Alliance member contributed per day.", member)
        self.member_season_money = gauge("alliance_member_season_money", "Alliance member season contributed money.", member)
        self.member_flights = gauge("alliance_member_flights", "Alliance member flights.", member)

        self.start_time.set_to_current_time()

    def member_gauges(self) -> tuple:
        return (
            self.member_share_price,
            self.member_contributed_total,
            self.member_contributed_per_day,
            self.member_season_money,
            self.member_flights,
        )

    def reset_members(self) -> None:
        for g in self.member_gauges():
            g.clear()

    @staticmethod
    def set_non_negative(gauge: Gauge, value: float, *labels: str) -> bool:
        """Set ``gauge`` (with ``labels``) unless ``value`` is negative."""
        if value < 0:
            logger.error(f"❌ Negative value {value} for metric {gauge.describe()[0].name} {list(labels)}, leaving it unset")
            return False
        target = gauge.labels(*labels) if labels else gauge
        target.set(value)
        return True

    def value(self, name: str, labels: dict | None = None) -> float | None:
        """Current sample value, as exported (full metric name)."""
        return self.registry.get_sample_value(name, labels or {})
