# routers/debug.py
import os
from fastapi import APIRouter, HTTPException
from services.fixtures import FetchError, FIXTURES_API_URL, fetch_raw
from services.mock_data import mock_payload
from utils.dates import iso_day, today_iso

router = APIRouter()

def require_debug():
    if os.getenv("DEBUG", "0") != "1":
        raise HTTPException(status_code=404, detail="Not found")

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/debug/env")
def debug_env():
    require_debug()
    return {"fixtures_api_url": FIXTURES_API_URL}

@router.get("/debug/upstream")
def debug_upstream(day: str | None = None):
    require_debug()
    params = {"day": iso_day(day) if day else today_iso()}
    try:
        data = fetch_raw(params)
    except FetchError as e:
        raise HTTPException(status_code=502, detail=e.detail())
    events = data.get("events") or []
    return {"count": len(events), "events": events[:25]}

@router.get("/debug/mock")
def debug_mock():
    require_debug()
    return mock_payload()
