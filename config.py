"""
Configuración global del proveedor de geolocalización AMap
"""
import os

# ============================================================
# API AMAP (POSICIONAMIENTO IoT)
# ============================================================
AMAP_URL = "https://restapi.amap.com/v5/position/IoT"
AMAP_TIMEOUT_SECONDS = 15
AMAP_API_KEY_ENV = "AMAP_API_KEY"

# ============================================================
# LÍMITES DE LA PETICIÓN
# ============================================================
AMAP_MAX_WIFI_ACCESS_POINTS = 30  # mmac + 29 en macs
AMAP_ACCESS_TYPE_CELL = 1
AMAP_ACCESS_TYPE_WIFI = 2
AMAP_CELL_NETWORK = "GSM"

# ============================================================
# RESPUESTA
# ============================================================
AMAP_STATUS_OK = "1"
AMAP_UNKNOWN_ERROR = "Error desconocido"


def get_amap_api_key() -> str:
    """Lee la clave de AMap del entorno (sin validarla)."""
    return os.getenv(AMAP_API_KEY_ENV, "")
