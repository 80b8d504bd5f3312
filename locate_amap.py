#!/usr/bin/env python3
"""
Script para localizar una observación WiFi/celdas con AMap
Uso: AMAP_API_KEY=... python locate_amap.py observacion.json
"""
import json
import logging
import sys
from typing import List, Optional

from config import AMAP_API_KEY_ENV, get_amap_api_key
from providers import AmapProvider, LocationSuccess, Network


def load_network(path: str) -> Network:
    """Lee la observación (wifiAccessPoints / cellTowers) desde un JSON"""
    with open(path, "r", encoding="utf-8") as f:
        return Network.from_dict(json.load(f))


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Uso: locate_amap.py <observacion.json>")
        return 2

    logging.basicConfig(level=logging.INFO)

    api_key = get_amap_api_key()
    if not api_key:
        print(f"⚠️  {AMAP_API_KEY_ENV} no definida, AMap rechazará la petición")

    try:
        network = load_network(args[0])
    except (OSError, ValueError, KeyError, TypeError) as e:
        print(f"❌ ERROR leyendo observación: {e}")
        return 1

    print(f"📡 {len(network.wifi_access_points)} WiFi, {len(network.cell_towers)} celdas")
    outcome = AmapProvider(api_key).locate(network)

    if isinstance(outcome, LocationSuccess):
        loc = outcome.location
        print(f"✅ {loc.latitude:.6f}, {loc.longitude:.6f} | radio {loc.radius} m")
        return 0

    print(f"❌ ERROR ({outcome.error.kind}): {outcome.error.message}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
