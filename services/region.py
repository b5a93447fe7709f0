# services/region.py
import logging
import os

import requests

logger = logging.getLogger(__name__)

GEO_API_URL = os.getenv("GEO_API_URL", "https://ipapi.co")
DEFAULT_REGION = os.getenv("DEFAULT_REGION", "AU")
GEO_HTTP_TIMEOUT = 5


def _geo_url(ip: str | None) -> str:
    base = GEO_API_URL.rstrip("/")
    return f"{base}/{ip}/json/" if ip else f"{base}/json/"


def detect_region(ip: str | None = None) -> str:
    """
    Two-letter country code for ip (or the caller's own address).
    Never raises: any failure yields DEFAULT_REGION.
    """
    url = _geo_url(ip)
    try:
        r = requests.get(url, timeout=GEO_HTTP_TIMEOUT)
        if r.status_code != 200:
            logger.debug("Region lookup %s -> HTTP %s", url, r.status_code)
            return DEFAULT_REGION
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.debug("Region lookup failed: %s: %s", type(e).__name__, e)
        return DEFAULT_REGION

    code = data.get("country_code") if isinstance(data, dict) else None
    if not code or not isinstance(code, str):
        return DEFAULT_REGION
    return code.strip().upper()
