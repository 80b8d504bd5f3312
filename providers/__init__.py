"""
Capa de acceso a proveedores de geolocalización.
"""
from .types import (
    CellTower,
    GeolocationError,
    LocationFailure,
    LocationOutcome,
    LocationResult,
    LocationSuccess,
    Network,
    WifiAccessPoint,
)
from .amap_provider import AmapProvider
from .registry import get_provider, get_providers

__all__ = [
    "AmapProvider",
    "CellTower",
    "GeolocationError",
    "LocationFailure",
    "LocationOutcome",
    "LocationResult",
    "LocationSuccess",
    "Network",
    "WifiAccessPoint",
    "get_provider",
    "get_providers",
]
