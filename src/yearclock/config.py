"""Environment-driven configuration.

Entry points call ``load_dotenv()`` first, so values may come from a
``.env`` file or the process environment:

- YEARCLOCK_TZ: IANA zone name ("Europe/Stockholm")
- YEARCLOCK_LAT / YEARCLOCK_LNG: coordinates, used to find the zone when
  YEARCLOCK_TZ is unset
- YEARCLOCK_PALETTE: "season" or "month"
- YEARCLOCK_ROTATION_OFFSET: degrees, default -45
- YEARCLOCK_TICKS: number of outer ring ticks, default 60
- YEARCLOCK_SHOW_PROGRESS: draw the continuous year-progress arc
"""

import logging
from collections.abc import Mapping

from pydantic import AliasChoices, Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pytz import UnknownTimeZoneError, timezone
from pytz.tzinfo import BaseTzInfo
from timezonefinder import TimezoneFinder

from yearclock.models import Palette

logger = logging.getLogger(__name__)

DEFAULT_ROTATION_OFFSET = -45.0
DEFAULT_TICK_COUNT = 60

# Field name -> environment variable
_ENV_NAMES: dict[str, str] = {
    "lat": "YEARCLOCK_LAT",
    "lng": "YEARCLOCK_LNG",
    "tz_name": "YEARCLOCK_TZ",
    "palette": "YEARCLOCK_PALETTE",
    "rotation_offset": "YEARCLOCK_ROTATION_OFFSET",
    "tick_count": "YEARCLOCK_TICKS",
    "show_progress": "YEARCLOCK_SHOW_PROGRESS",
}

_tf: TimezoneFinder | None = None


class ConfigError(ValueError):
    """Invalid configuration value."""


def resolve_timezone(lat: float, lng: float) -> str:
    """Find the IANA zone name for a coordinate pair.

    Raises:
        ConfigError: When no zone covers the coordinates.
    """
    global _tf
    if _tf is None:
        _tf = TimezoneFinder()
    tz_str = _tf.timezone_at(lat=lat, lng=lng)
    if tz_str is None:
        raise ConfigError(f"Timezone not found: lat={lat}, lng={lng}")
    return tz_str


class DialConfig(BaseSettings):
    """Resolved dial settings. Immutable once loaded."""

    model_config = SettingsConfigDict(
        env_prefix="YEARCLOCK_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    # lat/lng come before tz_name: the tz_name validator reads them
    lat: float | None = None
    lng: float | None = None
    tz_name: str = Field(
        default="",
        validation_alias=AliasChoices("tz_name", "YEARCLOCK_TZ"),
        validate_default=True,
    )
    palette: Palette = Palette.SEASON
    rotation_offset: float = DEFAULT_ROTATION_OFFSET
    tick_count: int = Field(
        default=DEFAULT_TICK_COUNT,
        ge=0,
        validation_alias=AliasChoices("tick_count", "YEARCLOCK_TICKS"),
    )
    show_progress: bool = False

    @field_validator("palette", mode="before")
    @classmethod
    def normalize_palette(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("tz_name")
    @classmethod
    def resolve_tz_name(cls, v: str, info: ValidationInfo) -> str:
        tz_name = v.strip()
        lat = info.data.get("lat")
        lng = info.data.get("lng")

        if not tz_name and lat is not None and lng is not None:
            tz_name = resolve_timezone(lat, lng)
            logger.debug("Resolved timezone %s from coordinates", tz_name)

        if not tz_name:
            logger.info("No YEARCLOCK_TZ configured, using UTC")
            return "UTC"

        try:
            timezone(tz_name)
        except UnknownTimeZoneError:
            raise ValueError(f"Unknown timezone: {tz_name!r}") from None
        return tz_name

    @property
    def tz(self) -> BaseTzInfo:
        return timezone(self.tz_name)


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = str(err["loc"][0]) if err["loc"] else ""
        name = _ENV_NAMES.get(field, field.upper())
        parts.append(f"{name}: {err['msg']}")
    return "; ".join(parts)


def load_config(env: Mapping[str, str] | None = None) -> DialConfig:
    """Build a DialConfig from environment variables.

    Args:
        env: Mapping to read from instead of the process environment.

    Returns:
        Validated DialConfig.

    Raises:
        ConfigError: On any malformed value.
    """
    try:
        if env is None:
            return DialConfig()
        values = {
            field: env[name]
            for field, name in _ENV_NAMES.items()
            if env.get(name, "").strip()
        }
        return DialConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(_describe(e)) from e
