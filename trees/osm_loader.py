import requests
import time
from typing import List, Dict, Tuple

from .KD_tree import KdTreeST
from .logger import logger
from Nodes.Point import Point

# Descarga de POIs desde Overpass (OpenStreetMap)
# Devuelve lista de elementos {'id': id, 'lat': ..., 'lon': ..., 'tags': {...}}
# Usa bbox = (south, west, north, east)

DEFAULT_OVERPASS_ENDPOINTS = [
    'https://overpass-api.de/api/interpreter',
    'https://overpass.openstreetmap.fr/api/interpreter',
    'https://lz4.overpass-api.de/api/interpreter'
]


def _build_query(bbox: Tuple[float, float, float, float], amenity: str, limit: int, timeout: int) -> str:
    south, west, north, east = bbox
    return f"""
    [out:json][timeout:{timeout}];
    (
      node["amenity"="{amenity}"]({south},{west},{north},{east});
      way["amenity"="{amenity}"]({south},{west},{north},{east});
      relation["amenity"="{amenity}"]({south},{west},{north},{east});
    );
    out center {limit};
    """


def _parse_elements(data: Dict) -> List[Dict]:
    results = []
    for elem in data.get('elements', []):
        if elem.get('type') == 'node':
            lat = elem.get('lat')
            lon = elem.get('lon')
        else:
            center = elem.get('center')
            if center is None:
                continue
            lat = center.get('lat')
            lon = center.get('lon')
        if lat is None or lon is None:
            continue
        results.append({'id': elem.get('id'), 'lat': lat, 'lon': lon, 'tags': elem.get('tags', {})})
    return results


def fetch_pois_by_bbox(bbox: Tuple[float, float, float, float], amenity: str = 'restaurant', limit: int = 500,
                       timeout: int = 25, endpoints: List[str] = None, max_retries: int = 3,
                       backoff: float = 1.0) -> List[Dict]:
    """Descarga POIs probando varios endpoints y varios reintentos.

    Parámetros:
    - bbox: (south, west, north, east)
    - amenity: categoría OSM
    - limit: máximo de resultados solicitados a Overpass
    - timeout: tiempo de espera por petición
    - endpoints: endpoints Overpass (si None, DEFAULT_OVERPASS_ENDPOINTS)
    - max_retries: reintentos por endpoint (backoff exponencial)
    - backoff: espera base en segundos entre reintentos

    Lanza RuntimeError si ningún endpoint devuelve una respuesta válida.
    """
    if endpoints is None:
        endpoints = DEFAULT_OVERPASS_ENDPOINTS

    query = _build_query(bbox, amenity, limit, timeout)

    last_error = None
    for ep in endpoints:
        for attempt in range(1, max_retries + 1):
            try:
                r = requests.post(ep, data={'data': query}, timeout=timeout + 5)
                r.raise_for_status()
                results = _parse_elements(r.json())
                logger.info("%d POIs (amenity=%s) desde %s", len(results), amenity, ep)
                return results
            except (requests.RequestException, ValueError) as e:
                last_error = e
                logger.warning("fallo en %s (intento %d/%d): %s", ep, attempt, max_retries, e)
                # último intento para este endpoint: pasar al siguiente
                if attempt < max_retries:
                    time.sleep(backoff * (2 ** (attempt - 1)))

    raise RuntimeError(f"Error fetching OSM data (tried {len(endpoints)} endpoints): {last_error}") from last_error


def load_pois_into_tree(pois: List[Dict], tree: KdTreeST = None) -> KdTreeST:
    """Inserta cada POI con clave Point(lon, lat) y el propio dict como valor.

    Los POIs sin coordenadas se omiten; dos POIs en la misma coordenada se
    quedan con el último.
    """
    if tree is None:
        tree = KdTreeST()
    skipped = 0
    for p in pois:
        lat = p.get('lat')
        lon = p.get('lon')
        if lat is None or lon is None:
            skipped += 1
            continue
        tree.put(Point(float(lon), float(lat)), p)
    if skipped:
        logger.debug("%d POIs sin coordenadas omitidos", skipped)
    return tree
