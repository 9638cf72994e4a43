"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the edge: a payload that does not match the expected
  shape is rejected as a whole, never half-built.
- Aliases keep the wire names (camelCase) out of the Python attribute names.

Note:
- These models describe *what* the remote data is, not *how* it is fetched.
- Strict mode: `"yes"` is not a bool and `"20"` is not an int. Validate wire
  payloads with `model_validate_json`, where ISO date strings are accepted.
"""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic.config import ConfigDict


def fahrenheit_from_celsius(temperature_c: int) -> int:
    """Same conversion the remote service uses (0.5556 ~ 5/9)."""

    return 32 + round(temperature_c / 0.5556)


class SystemInfo(BaseModel):
    """Snapshot of the remote host, as reported by `/api/info`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True, strict=True)

    current_date_time: dt.datetime = Field(
        ...,
        alias="currentDateTime",
        description="Server-side timestamp at the moment of the call.",
    )
    is_containerized: bool = Field(
        ...,
        alias="isContainerized",
        description="Whether the remote service detected a container runtime.",
    )
    hostname: str = Field(
        ...,
        alias="hostname",
        description="Hostname (or container id) of the remote service.",
    )
    system_info: str = Field(
        ...,
        alias="systemInfo",
        description="Free-text OS/resource note.",
    )

    @field_validator("current_date_time", mode="before")
    @classmethod
    def _accept_plain_date(cls, value: Any) -> Any:
        # Some backends send a bare date here ("2024-05-01"); strict datetime
        # parsing rejects it, so it is read as midnight of that day.
        if isinstance(value, str) and len(value) == 10:
            try:
                return dt.datetime.combine(dt.date.fromisoformat(value), dt.time())
            except ValueError:
                return value
        return value


class WeatherForecast(BaseModel):
    """One entry of `/api/weatherforecast`.

    `temperatureF` is never read from the wire; it is always derived from
    `temperatureC`.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True, strict=True)

    date: dt.date = Field(
        ...,
        alias="date",
        description="Calendar day of the forecast.",
    )
    temperature_c: int = Field(
        ...,
        alias="temperatureC",
        description="Temperature in degrees Celsius.",
    )
    summary: str | None = Field(
        default=None,
        alias="summary",
        description="Short textual description (may be null).",
    )

    @computed_field(alias="temperatureF")  # type: ignore[prop-decorator]
    @property
    def temperature_f(self) -> int:
        return fahrenheit_from_celsius(self.temperature_c)
