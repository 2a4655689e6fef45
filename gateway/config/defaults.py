"""Default location table: caller-facing codes mapped to CWA county/city names."""

from gateway.config.schema import LocationConfig

# Names must match the locationName values of CWA dataset F-C0032-001.
DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(code="kaohsiung", name="高雄市"),
    LocationConfig(code="taipei", name="臺北市"),
    LocationConfig(code="taichung", name="臺中市"),
    LocationConfig(code="miaoli", name="苗栗縣"),
]
