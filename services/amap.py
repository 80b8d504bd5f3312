"""
Servicio para posicionamiento por WiFi/celdas con la API IoT de AMap (restapi.amap.com).

Codifica la observación en los campos que espera /v5/position/IoT y
normaliza su respuesta JSON (status/position/radius/info).
"""

import json
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from config import (
    AMAP_ACCESS_TYPE_CELL,
    AMAP_ACCESS_TYPE_WIFI,
    AMAP_CELL_NETWORK,
    AMAP_MAX_WIFI_ACCESS_POINTS,
    AMAP_STATUS_OK,
    AMAP_TIMEOUT_SECONDS,
    AMAP_UNKNOWN_ERROR,
    AMAP_URL,
)
from providers.types import (
    CellTower,
    GeolocationError,
    LocationResult,
    Network,
    WifiAccessPoint,
)

logger = logging.getLogger(__name__)


# ============================================================
# CODIFICACIÓN DE LA PETICIÓN
# ============================================================

def format_wifi_entry(access_point: WifiAccessPoint) -> str:
    # mac,señal,ssid(vacío),-1
    return f"{access_point.mac_address},{int(access_point.signal_strength)},,-1"


def format_bts(tower: CellTower) -> str:
    signal = tower.signal_strength if tower.signal_strength is not None else 0
    return (
        f"{int(tower.mobile_country_code)},{int(tower.mobile_network_code)},"
        f"{int(tower.location_area_code)},{int(tower.cell_id)},{int(signal)},0"
    )


def _is_cdma(radio_type: Optional[str]) -> bool:
    return radio_type is not None and radio_type.lower() == "cdma"


def build_request_body(network: Network, api_key: str) -> Dict[str, Any]:
    """
    Construye el cuerpo de la petición a partir de la observación.

    Con WiFi: mmac (primer punto de acceso) y macs (hasta 29 más, separados por "|").
    Con celdas: solo se envía la primera torre en bts; accesstype pasa a celda
    aunque también haya WiFi.
    """
    body: Dict[str, Any] = {"key": api_key}

    wifis = list(network.wifi_access_points or ())
    if wifis:
        body["accesstype"] = AMAP_ACCESS_TYPE_WIFI
        body["mmac"] = format_wifi_entry(wifis[0])
        if len(wifis) > 1:
            extra = wifis[1:AMAP_MAX_WIFI_ACCESS_POINTS]
            body["macs"] = "|".join(format_wifi_entry(ap) for ap in extra)

    cells = list(network.cell_towers or ())
    if cells:
        main_cell = cells[0]
        body["accesstype"] = AMAP_ACCESS_TYPE_CELL
        body["network"] = AMAP_CELL_NETWORK
        body["cdma"] = "1" if _is_cdma(main_cell.radio_type) else "0"
        body["bts"] = format_bts(main_cell)

    logger.debug(
        f"Petición AMap: {len(wifis)} WiFi ({min(len(wifis), AMAP_MAX_WIFI_ACCESS_POINTS)} enviadas), "
        f"{len(cells)} celdas ({min(len(cells), 1)} enviada), accesstype={body.get('accesstype')}"
    )
    return body


# ============================================================
# INTERPRETACIÓN DE LA RESPUESTA
# ============================================================

@dataclass(frozen=True)
class AmapResponse:
    status: Optional[str] = None
    position: Optional[str] = None
    radius: Optional[Any] = None
    info: Optional[str] = None


def parse_response(raw_body: str) -> AmapResponse:
    try:
        data = json.loads(raw_body)
    except (TypeError, ValueError) as e:
        raise GeolocationError(GeolocationError.PARSE, f"Respuesta AMap no es JSON válido: {e}") from e
    if not isinstance(data, dict):
        raise GeolocationError(GeolocationError.PARSE, "Respuesta AMap no es un objeto JSON")

    status = data.get("status")
    position = data.get("position")
    info = data.get("info")
    return AmapResponse(
        status=str(status) if status is not None else None,
        position=position,
        radius=data.get("radius"),
        info=str(info) if info is not None else None,
    )


def parse_position(position: Any) -> LocationResult:
    """Convierte "lon,lat" (longitud primero) en latitud/longitud."""
    if not isinstance(position, str):
        raise GeolocationError(GeolocationError.PARSE, f"Posición AMap inválida: {position!r}")
    parts = position.split(",")
    if len(parts) != 2:
        raise GeolocationError(GeolocationError.PARSE, f"Posición AMap inválida: {position!r}")
    try:
        longitude = float(parts[0].strip())
        latitude = float(parts[1].strip())
    except ValueError as e:
        raise GeolocationError(GeolocationError.PARSE, f"Posición AMap inválida: {position!r}") from e
    # float() acepta "nan" e "inf"
    if not (math.isfinite(longitude) and math.isfinite(latitude)):
        raise GeolocationError(GeolocationError.PARSE, f"Posición AMap inválida: {position!r}")
    return LocationResult(latitude=latitude, longitude=longitude)


def parse_radius(radius: Any) -> int:
    if radius is None:
        return 0
    if isinstance(radius, bool):
        raise GeolocationError(GeolocationError.PARSE, f"Radio AMap inválido: {radius!r}")
    if isinstance(radius, (int, float)):
        value = radius
    else:
        try:
            value = float(str(radius).strip())
        except ValueError as e:
            raise GeolocationError(GeolocationError.PARSE, f"Radio AMap inválido: {radius!r}") from e
    # enteros JSON enormes no caben en float; solo se comprueban los float
    if (isinstance(value, float) and not math.isfinite(value)) or value < 0:
        raise GeolocationError(GeolocationError.PARSE, f"Radio AMap inválido: {radius!r}")
    return int(value)


def decode_response(raw_body: str) -> LocationResult:
    """
    Interpreta el cuerpo devuelto por AMap.

    Éxito solo si status == "1" y hay position. En cualquier otro caso se
    lanza GeolocationError(rejected) con el texto de info o uno genérico.
    """
    response = parse_response(raw_body)
    if response.status == AMAP_STATUS_OK and response.position is not None:
        location = parse_position(response.position)
        return LocationResult(
            latitude=location.latitude,
            longitude=location.longitude,
            radius=parse_radius(response.radius),
        )
    info = response.info if response.info is not None else AMAP_UNKNOWN_ERROR
    raise GeolocationError(GeolocationError.REJECTED, info)


# ============================================================
# TRANSPORTE HTTP
# ============================================================

def send_request(payload: Dict[str, Any], url: str = AMAP_URL, timeout: float = AMAP_TIMEOUT_SECONDS) -> str:
    """POST JSON a AMap; devuelve el cuerpo crudo de la respuesta."""
    try:
        response = requests.post(url, json=payload, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise GeolocationError(GeolocationError.TRANSPORT, f"Error de conexión con AMap: {e}") from e
    return response.text
