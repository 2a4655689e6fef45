"""Flattened forecast models returned to API callers."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ForecastSlot:
    start_time: str = ""
    end_time: str = ""
    weather: str = ""
    rain: str = ""
    min_temp: str = ""
    max_temp: str = ""
    comfort: str = ""
    wind_speed: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "weather": self.weather,
            "rain": self.rain,
            "minTemp": self.min_temp,
            "maxTemp": self.max_temp,
            "comfort": self.comfort,
            "windSpeed": self.wind_speed,
        }


@dataclass(frozen=True)
class ForecastResult:
    city: str
    update_time: str  # dataset description, passed through verbatim
    forecasts: list[ForecastSlot] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "city": self.city,
            "updateTime": self.update_time,
            "forecasts": [slot.to_dict() for slot in self.forecasts],
        }
