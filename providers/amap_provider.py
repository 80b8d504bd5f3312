"""
Adaptador de AMap (restapi.amap.com) al contrato común de proveedores de geolocalización.
"""

import logging
from typing import Any, Callable, Dict, Optional

from config import AMAP_URL
from services.amap import build_request_body, decode_response, send_request

from .base import LocationProviderCallback
from .types import (
    GeolocationError,
    LocationFailure,
    LocationOutcome,
    LocationSuccess,
    Network,
)

logger = logging.getLogger(__name__)

Transport = Callable[[Dict[str, Any]], str]


class AmapProvider:
    provider_id = "AMAP"
    provider_name = "AMap"

    def __init__(self, api_key: str, send: Optional[Transport] = None, url: str = AMAP_URL):
        self._api_key = api_key
        self._url = url
        self._send = send if send is not None else self._send_http

    @property
    def api_key(self) -> str:
        return self._api_key

    def _send_http(self, payload: Dict[str, Any]) -> str:
        return send_request(payload, url=self._url)

    def locate(self, network: Network) -> LocationOutcome:
        payload = build_request_body(network, self._api_key)
        try:
            raw_body = self._send(payload)
        except GeolocationError as e:
            return self._failure(e)
        except Exception as e:
            # Transportes inyectados pueden lanzar sus propias excepciones.
            error = GeolocationError(GeolocationError.TRANSPORT, f"Error de conexión con AMap: {e}")
            error.__cause__ = e
            return self._failure(error)

        try:
            location = decode_response(raw_body)
        except GeolocationError as e:
            return self._failure(e)

        logger.info(f"AMap: {location.latitude:.6f}, {location.longitude:.6f} (±{location.radius} m)")
        return LocationSuccess(location=location)

    def _failure(self, error: GeolocationError) -> LocationFailure:
        logger.warning(f"AMap sin posición ({error.kind}): {error.message}")
        return LocationFailure(error=error)

    def get_location(self, network: Network, callback: LocationProviderCallback) -> None:
        outcome = self.locate(network)
        if isinstance(outcome, LocationSuccess):
            loc = outcome.location
            callback.on_success(loc.latitude, loc.longitude, loc.radius)
        else:
            callback.on_failure(outcome.error)
