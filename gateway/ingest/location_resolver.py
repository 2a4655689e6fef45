"""Resolve caller-facing location codes to CWA region names."""

from collections.abc import Mapping

from gateway.errors import UnknownLocationError
from gateway.models.common import LocationCode, RegionName


def resolve(code: LocationCode, locations: Mapping[str, str]) -> RegionName:
    """Exact-match lookup. No case or whitespace normalization is applied.

    Raises UnknownLocationError carrying every supported code on a miss.
    """
    name = locations.get(code)
    if not name:
        raise UnknownLocationError(code, supported_codes(locations))
    return name


def supported_codes(locations: Mapping[str, str]) -> list[str]:
    return list(locations.keys())
