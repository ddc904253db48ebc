# ambot/config.py
"""
YAML configuration for the bot and the route scanner.

A ``Config`` is an immutable snapshot. ``ConfigProvider`` holds the current
snapshot and swaps it for a new one only when the file checksum changed and
the new file loads and validates completely.
"""
import hashlib
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml
from croniter import croniter
from loguru import logger

from .errors import ConfigError
from .utils.log import LEVELS
from .utils.parsing import mask_username

DEFAULT_URL = "https://www.airlinemanager.com/"
DEFAULT_SERVICES = (
    "company_stats",
    "alliance_stats",
    "staff_morale",
    "hubs",
    "claim_rewards",
    "buy_fuel",
    "marketing",
    "ac_maintenance",
    "depart",
)
DEFAULT_CAMPAIGNS = ("airline_reputation", "cargo_reputation", "eco_friendly")

ENV_USERNAME = "AM4_USERNAME"
ENV_PASSWORD = "AM4_PASSWORD"


@dataclass(frozen=True)
class BudgetPercent:
    maintenance: float = 50.0
    marketing: float = 70.0
    fuel: float = 70.0

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class GoodPrice:
    fuel: float = 500.0
    co2: float = 120.0


@dataclass(frozen=True)
class Config:
    url: str = DEFAULT_URL
    username: str = ""
    password: str = field(default="", repr=False)
    log_level: str = "info"

    budget_percent: BudgetPercent = field(default_factory=BudgetPercent)
    good_price: GoodPrice = field(default_factory=GoodPrice)

    repair_lounges: bool = True
    buy_catering_if_missing: bool = True
    catering_duration_hours: str = "168"
    catering_amount_option: str = "20000"
    hubs_maintenance_limit: int = 5
    fuel_critical_percent: float = 20.0
    aircraft_wear_percent: str = "80"
    aircraft_max_hours_to_check: int = 24
    aircraft_modify_limit: int = 3
    marketing_campaigns: tuple = DEFAULT_CAMPAIGNS
    marketing_duration_option: str = "6"
    raise_salary_if_low_morale: bool = False
    staff_morale_min_percent: float = 90.0

    services: tuple = DEFAULT_SERVICES
    cron_schedule: str = "*/5 * * * *"
    timeout_seconds: float = 180.0
    element_timeout_seconds: float = 10.0
    visible_timeout_seconds: float = 2.0

    prometheus_address: str = ":9150"
    chrome_headless: bool = True
    chrome_debug: bool = False

    hubs_list: tuple = ()
    max_route_range_km: int = 14500
    min_route_range_km: int = 6500
    min_runway_length: int = 9680
    scan_step_km: int = 100

    def __str__(self) -> str:
        return (
            f"Config(url={self.url}, user={mask_username(self.username)}, "
            f"services={list(self.services)}, cron={self.cron_schedule!r}, "
            f"timeout={self.timeout_seconds:g}s)"
        )


def file_checksum(path: str | Path) -> str:
    """SHA-256 of the file contents, hex encoded."""
    try:
        return hashlib.sha256(Path(path).read_bytes()).hexdigest()
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e


def _coerce(name: str, default: Any, value: Any) -> Any:
    if value is None:
        return default
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"{name}: expected true/false, got {value!r}")
        return value
    if isinstance(default, tuple):
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ConfigError(f"{name}: expected a list, got {value!r}")
        return tuple(str(v) for v in value)
    try:
        return type(default)(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name}: invalid value {value!r} ({e})") from e


def _nested(cls, name: str, raw: Any):
    if raw is None:
        return cls()
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{name}: expected a mapping, got {raw!r}")
    defaults = cls()
    known = {f.name for f in fields(cls)}
    unknown = set(raw) - known
    if unknown:
        raise ConfigError(f"{name}: unknown keys {sorted(unknown)}")
    values = {key: _coerce(f"{name}.{key}", getattr(defaults, key), raw[key]) for key in raw}
    return replace(defaults, **values)


def _validate(conf: Config) -> None:
    if not croniter.is_valid(conf.cron_schedule):
        raise ConfigError(f"cron_schedule: invalid expression {conf.cron_schedule!r}")
    if conf.timeout_seconds <= 0:
        raise ConfigError("timeout_seconds must be positive")
    for name in ("hubs_maintenance_limit", "aircraft_modify_limit", "aircraft_max_hours_to_check"):
        if getattr(conf, name) < 0:
            raise ConfigError(f"{name} must not be negative")
    if conf.scan_step_km <= 0:
        raise ConfigError("scan_step_km must be positive")
    if conf.log_level.lower() not in LEVELS:
        raise ConfigError(f"log_level: expected one of {list(LEVELS)}, got {conf.log_level!r}")
    for name, value in asdict(conf.budget_percent).items():
        if not 0 <= value <= 100:
            raise ConfigError(f"budget_percent.{name} must be within 0..100")


def config_from_mapping(raw: Mapping) -> Config:
    defaults = Config()
    values = {}
    for f in fields(Config):
        if f.name not in raw:
            continue
        if f.name == "budget_percent":
            values[f.name] = _nested(BudgetPercent, f.name, raw[f.name])
        elif f.name == "good_price":
            values[f.name] = _nested(GoodPrice, f.name, raw[f.name])
        else:
            values[f.name] = _coerce(f.name, getattr(defaults, f.name), raw[f.name])

    unknown = set(raw) - {f.name for f in fields(Config)}
    if unknown:
        logger.warning(f"⚠️ Ignoring unknown config keys: {sorted(unknown)}")

    if os.getenv(ENV_USERNAME):
        values["username"] = os.getenv(ENV_USERNAME)
    if os.getenv(ENV_PASSWORD):
        values["password"] = os.getenv(ENV_PASSWORD)

    conf = replace(defaults, **values)
    _validate(conf)
    return conf


def load_config(path: str | Path) -> Config:
    """Read, parse and validate a YAML config file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse config file {path}: {e}") from e
    if not isinstance(raw, Mapping):
        raise ConfigError(f"config file {path} must contain a mapping")
    conf = config_from_mapping(raw)
    logger.debug(f"📄 Loaded {conf} from {path}")
    return conf


class ConfigProvider:
    """Current config snapshot plus reload-on-change."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.config = load_config(self.path)
        self.checksum = file_checksum(self.path)

    def reload_if_changed(self) -> bool:
        """
        Swap in a new snapshot if the file changed since the last good load.

        Returns:
            True when a new snapshot was applied. A file that fails to load
            keeps the previous snapshot and is tried again on the next call.
        """
        try:
            checksum = file_checksum(self.path)
        except ConfigError as e:
            logger.error(f"❌ Config check failed, keeping current config: {e}")
            return False
        if checksum == self.checksum:
            return False

        logger.info(f"🔄 Config file {self.path} changed, reloading")
        try:
            conf = load_config(self.path)
        except ConfigError as e:
            logger.error(f"❌ Config reload failed, keeping current config: {e}")
            return False

        self.config = conf
        self.checksum = checksum
        logger.success(f"✅ Applied new config: {conf}")
        return True
