"""Typed models for Dark Sky forecast and time machine responses.

Models are frozen once validated. Attributes are snake_case; the API's
camelCase keys are accepted through aliases.
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from darksky.utils import TimeUtils


class ApiModel(BaseModel):
    """Base for all response models: immutable, camelCase aware."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _none_as_empty(v: object) -> object:
    # The API sends null for an empty list
    return () if v is None else v


# ─────────────────────────── primitives ──────────────────────────────────────


class DataPoint(ApiModel):
    """Weather conditions for an instant (currently), a minute, an hour or a day.

    Each value is the average over the period unless the field says
    otherwise. Fields the API leaves out for the period are None.
    """

    time: int | None = None
    summary: str | None = None
    icon: str | None = None

    # Temperature
    temperature: float | None = None
    temperature_high: float | None = None
    temperature_high_time: int | None = None
    temperature_low: float | None = None
    temperature_low_time: int | None = None
    apparent_temperature: float | None = None
    apparent_temperature_high: float | None = None
    apparent_temperature_high_time: int | None = None
    apparent_temperature_low: float | None = None
    apparent_temperature_low_time: int | None = None
    dew_point: float | None = None

    # Atmosphere
    humidity: float | None = None
    pressure: float | None = None
    cloud_cover: float | None = None
    ozone: float | None = None
    visibility: float | None = None
    uv_index: int | None = None
    uv_index_time: int | None = None

    # Wind
    wind_speed: float | None = None
    wind_gust: float | None = None
    wind_gust_time: int | None = None
    wind_bearing: float | None = None

    # Precipitation
    precip_intensity: float | None = None
    precip_intensity_error: float | None = None
    precip_intensity_max: float | None = None
    precip_intensity_max_time: int | None = None
    precip_probability: float | None = None
    precip_accumulation: float | None = None
    precip_type: str | None = None

    # Storms
    nearest_storm_distance: int | None = None
    nearest_storm_bearing: int | None = None

    # Sun and moon (daily only)
    sunrise_time: int | None = None
    sunset_time: int | None = None
    moon_phase: float | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def dt(self) -> datetime | None:
        """Timestamp of the data point as a UTC datetime."""
        if self.time is None:
            return None
        return TimeUtils.epoch_to_datetime(self.time)


class DataBlock(ApiModel):
    """Data points covering a period of time, in chronological order."""

    data: tuple[DataPoint, ...] = ()
    summary: str | None = None
    icon: str | None = None

    @field_validator("data", mode="before")
    @classmethod
    def null_data_as_empty(cls, v: object) -> object:
        return _none_as_empty(v)

    @property
    def first(self) -> DataPoint | None:
        """Earliest data point, or None for an empty block."""
        return self.data[0] if self.data else None


class Alert(ApiModel):
    """Severe weather alert pertinent to the requested location."""

    title: str | None = None
    description: str | None = None
    severity: str | None = None
    uri: str | None = None
    regions: tuple[str, ...] = ()
    time: int | None = None
    expires: int | None = None

    @field_validator("regions", mode="before")
    @classmethod
    def null_regions_as_empty(cls, v: object) -> object:
        return _none_as_empty(v)

    @property
    def issued_at(self) -> datetime | None:
        """When the alert was issued."""
        return TimeUtils.epoch_to_datetime(self.time) if self.time is not None else None

    @property
    def expires_at(self) -> datetime | None:
        """When the alert expires, if it does."""
        if self.expires is None:
            return None
        return TimeUtils.epoch_to_datetime(self.expires)


class Flags(ApiModel):
    """Miscellaneous metadata about the request."""

    sources: tuple[str, ...] = ()
    nearest_station: float | None = Field(None, alias="nearest-station")
    units: str | None = None
    darksky_unavailable: str | None = Field(None, alias="darksky-unavailable")

    @field_validator("sources", mode="before")
    @classmethod
    def null_sources_as_empty(cls, v: object) -> object:
        return _none_as_empty(v)


# ─────────────────────────── top-level response ──────────────────────────────


class WeatherPayload(ApiModel):
    """Whole response body of a forecast or time machine query.

    Sections excluded through ExcludeOption, or not available for the
    location, are None (alerts is an empty tuple).
    """

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    currently: DataPoint | None = None
    minutely: DataBlock | None = None
    hourly: DataBlock | None = None
    daily: DataBlock | None = None
    alerts: tuple[Alert, ...] = ()
    flags: Flags | None = None

    model_config = ConfigDict(extra="allow")

    @field_validator("alerts", mode="before")
    @classmethod
    def null_alerts_as_empty(cls, v: object) -> object:
        return _none_as_empty(v)

    @property
    def location(self) -> tuple[float | None, float | None]:
        """Get the (latitude, longitude) pair."""
        return (self.latitude, self.longitude)

    def get_timezone(self) -> ZoneInfo | None:
        """Get the location's timezone as a ZoneInfo object.

        Returns:
            ZoneInfo for the IANA identifier, or None when absent
        """
        return ZoneInfo(self.timezone) if self.timezone else None


class ApiErrorBody(ApiModel):
    """JSON body of an error response."""

    code: int | None = None
    error: str
