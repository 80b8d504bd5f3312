"""
Registro de proveedores de geolocalización.
"""
from typing import Dict, Optional

from config import get_amap_api_key

from .amap_provider import AmapProvider


def get_providers() -> Dict[str, object]:
    """
    Devuelve proveedores habilitados, configurados desde el entorno.
    Nota: por ahora solo AMap.
    """
    providers = [AmapProvider(get_amap_api_key())]
    return {p.provider_id: p for p in providers}


def get_provider(provider_id: str) -> Optional[object]:
    return get_providers().get(provider_id)
