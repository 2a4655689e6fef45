"""Flatten CWA per-element time series into one record per time slot."""

import logging

from gateway.models.forecast import ForecastResult, ForecastSlot

logger = logging.getLogger(__name__)

PERCENT = "%"
CELSIUS = "°C"


def normalize(payload: dict) -> ForecastResult:
    """Reshape a raw F-C0032-001 payload into a ForecastResult.

    The slot count comes from weather element 0. Other elements are trusted
    to share its length and ordering; a shorter element leaves its field
    blank for the missing slots.
    """
    records = payload["records"]
    location = records["location"][0]
    elements = location.get("weatherElement", [])

    slots: list[ForecastSlot] = []
    if elements:
        base_times = elements[0].get("time", [])
        for i, base in enumerate(base_times):
            fields = {"start_time": base.get("startTime", ""), "end_time": base.get("endTime", "")}
            for element in elements:
                times = element.get("time", [])
                if i >= len(times):
                    logger.debug(
                        "Element %s has %d time entries, expected %d",
                        element.get("elementName"), len(times), len(base_times),
                    )
                    continue
                _apply_element(fields, element.get("elementName"), times[i].get("parameter"))
            slots.append(ForecastSlot(**fields))

    return ForecastResult(
        city=location.get("locationName", ""),
        update_time=records.get("datasetDescription", ""),
        forecasts=slots,
    )


def _apply_element(fields: dict[str, str], tag: str | None, parameter: dict | None) -> None:
    value = parameter.get("parameterName") if parameter else None
    if tag == "Wx":
        fields["weather"] = value or ""
    elif tag == "PoP":
        fields["rain"] = (value if value is not None else "0") + PERCENT
    elif tag == "MinT":
        fields["min_temp"] = (value if value is not None else "-") + CELSIUS
    elif tag == "MaxT":
        fields["max_temp"] = (value if value is not None else "-") + CELSIUS
    elif tag == "CI":
        fields["comfort"] = value or ""
    elif tag == "WS":
        fields["wind_speed"] = value or ""
    # Unknown tags are ignored
