"""
Tipos de dominio para proveedores de geolocalización.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class WifiAccessPoint:
    mac_address: str
    signal_strength: int


@dataclass(frozen=True)
class CellTower:
    mobile_country_code: int
    mobile_network_code: int
    location_area_code: int
    cell_id: int
    radio_type: Optional[str] = None
    signal_strength: Optional[int] = None


@dataclass(frozen=True)
class Network:
    """Observación de redes inalámbricas, en orden de escaneo."""
    wifi_access_points: Tuple[WifiAccessPoint, ...] = field(default_factory=tuple)
    cell_towers: Tuple[CellTower, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Network":
        """
        Construye la observación desde el formato JSON habitual
        (wifiAccessPoints / cellTowers en camelCase).
        """
        wifis = tuple(
            WifiAccessPoint(
                mac_address=str(item["macAddress"]),
                signal_strength=int(item.get("signalStrength", 0)),
            )
            for item in data.get("wifiAccessPoints") or []
        )
        cells = []
        for item in data.get("cellTowers") or []:
            signal = item.get("signalStrength")
            cells.append(
                CellTower(
                    mobile_country_code=int(item["mobileCountryCode"]),
                    mobile_network_code=int(item["mobileNetworkCode"]),
                    location_area_code=int(item["locationAreaCode"]),
                    cell_id=int(item["cellId"]),
                    radio_type=item.get("radioType"),
                    signal_strength=int(signal) if signal is not None else None,
                )
            )
        return cls(wifi_access_points=wifis, cell_towers=tuple(cells))


@dataclass(frozen=True)
class LocationResult:
    latitude: float
    longitude: float
    radius: int = 0


class GeolocationError(Exception):
    """Fallo clasificado de un proveedor: transport, parse o rejected."""
    TRANSPORT = "transport"
    PARSE = "parse"
    REJECTED = "rejected"

    def __init__(self, kind: str, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class LocationSuccess:
    location: LocationResult


@dataclass(frozen=True)
class LocationFailure:
    error: GeolocationError


LocationOutcome = Union[LocationSuccess, LocationFailure]
