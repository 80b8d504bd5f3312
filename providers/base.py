"""
Contrato base para proveedores de geolocalización.
"""
from typing import Protocol

from .types import Network


class LocationProviderCallback(Protocol):
    """Recibe exactamente una de las dos notificaciones por petición."""

    def on_success(self, latitude: float, longitude: float, radius: int) -> None:
        ...

    def on_failure(self, error: Exception) -> None:
        ...


class GeolocationProvider(Protocol):
    """Interfaz común para estimar posición a partir de redes observadas."""
    provider_id: str
    provider_name: str

    def get_location(self, network: Network, callback: LocationProviderCallback) -> None:
        """Resuelve la posición y notifica el resultado al callback."""
        ...
