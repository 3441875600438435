"""Address lookups against a MapQuest compatible geocoding API."""
from dataclasses import dataclass
from typing import Optional

from flask import current_app
import requests

from errors import UpstreamFailure


@dataclass
class GeocodeResult:
    latitude: float
    longitude: float
    formatted_address: str
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    country: Optional[str] = None


def _parse_location(location: dict) -> GeocodeResult:
    lat_lng = location.get('latLng') or {}
    parts = [
        location.get('street'),
        location.get('adminArea5'),
        ' '.join(p for p in (location.get('adminArea3'), location.get('postalCode')) if p),
        location.get('adminArea1'),
    ]
    return GeocodeResult(
        latitude=lat_lng['lat'],
        longitude=lat_lng['lng'],
        formatted_address=', '.join(p for p in parts if p),
        street=location.get('street') or None,
        city=location.get('adminArea5') or None,
        state=location.get('adminArea3') or None,
        zipcode=location.get('postalCode') or None,
        country=location.get('adminArea1') or None,
    )


def geocode(address: str) -> Optional[GeocodeResult]:
    """Resolve ``address`` to coordinates.

    Returns None when no geocoder is configured or the address is unknown.
    Raises UpstreamFailure when the provider cannot be reached.
    """
    api_key = current_app.config.get('GEOCODER_API_KEY')
    if not api_key:
        current_app.logger.info(f'Geocoder not configured. Skipping lookup for "{address}"')
        return None

    try:
        response = requests.get(
            current_app.config['GEOCODER_URL'],
            params={'key': api_key, 'location': address, 'maxResults': 1},
            timeout=current_app.config.get('GEOCODER_TIMEOUT', 10),
        )
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as e:
        current_app.logger.error(f'Geocoding failed for "{address}": {e}')
        raise UpstreamFailure('Geocoding service unavailable')

    results = payload.get('results') or []
    locations = results[0].get('locations') if results else None
    if not locations or not locations[0].get('latLng'):
        return None
    return _parse_location(locations[0])
