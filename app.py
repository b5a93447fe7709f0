from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, RedirectResponse

from models import FilterCriteria
from routers import debug
from services.build import all_upcoming, fixtures_for_day, fixtures_for_range, load_dashboard
from services.fixtures import FetchError, fetch_all_upcoming
from services.region import detect_region
from services.sports import SPORTS, events_for_sport, sport_icon
from utils.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Fixtures Dashboard")
app.include_router(debug.router)

LOCAL_HOSTS = {"127.0.0.1", "::1", "localhost", "testclient"}


@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/ui")


# ---------- Request helpers ----------

def _criteria(date: str | None, sport: str | None, country: str | None,
              team: str | None, q: str | None) -> FilterCriteria:
    return FilterCriteria(
        date=date or None,
        sport=sport or None,
        country=country or None,
        team=(team or "").strip() or None,
        search_text=(q or "").strip() or None,
    )


def _region(request: Request, region: str | None) -> str:
    if region:
        return region.strip().upper()
    host = request.client.host if request.client else None
    return detect_region(None if host in LOCAL_HOSTS else host)


# ---------- Fixtures ----------

@app.get("/fixtures")
def fixtures(
    request: Request,
    day: str | None = Query(default=None),
    days: int | None = Query(default=None, ge=1, le=31),
    date: str | None = Query(default=None),
    sport: str | None = Query(default=None),
    country: str | None = Query(default=None),
    team: str | None = Query(default=None),
    q: str | None = Query(default=None),
    tz: str | None = Query(default=None),
    region: str | None = Query(default=None),
):
    """
    Fixtures for one day (day=YYYY-MM-DD, default today UTC) or a range
    of `days` days starting at `day`. Upstream failures surface as 502.
    """
    criteria = _criteria(date, sport, country, team, q)
    user_region = _region(request, region)
    try:
        if days:
            return fixtures_for_range(day, days, criteria, user_region, tz)
        return fixtures_for_day(day, criteria, user_region, tz)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Bad day: {e}")
    except FetchError as e:
        logger.error("Fixtures fetch failed: %s", e)
        raise HTTPException(status_code=502, detail=e.detail())


@app.get("/fixtures/upcoming")
def fixtures_upcoming(
    request: Request,
    date: str | None = Query(default=None),
    sport: str | None = Query(default=None),
    country: str | None = Query(default=None),
    team: str | None = Query(default=None),
    q: str | None = Query(default=None),
    tz: str | None = Query(default=None),
    region: str | None = Query(default=None),
):
    # falls back to mock data internally; never fails on upstream errors
    return all_upcoming(_criteria(date, sport, country, team, q), _region(request, region), tz)


@app.get("/dashboard")
async def dashboard(
    request: Request,
    day: str | None = Query(default=None),
    days: int = Query(default=7, ge=1, le=31),
    tz: str | None = Query(default=None),
    region: str | None = Query(default=None),
):
    try:
        # geolocation uses blocking requests; keep it off the event loop
        user_region = await run_in_threadpool(_region, request, region)
        return await load_dashboard(day, days, user_region, tz)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Bad day: {e}")


@app.get("/sports")
def sports():
    return {"count": len(SPORTS), "sports": SPORTS}


@app.get("/sports/{name}/fixtures")
def sport_fixtures(name: str):
    """All-upcoming events whose league is one of the catalog competitions for `name`."""
    if not any(s["name"].lower() == name.lower() for s in SPORTS):
        raise HTTPException(status_code=404, detail=f"Unknown sport: {name}")
    events = events_for_sport(fetch_all_upcoming(), name)
    return {"sport": name, "icon": sport_icon(name), "count": len(events), "events": [e.to_dict() for e in events]}


@app.get("/region")
def region(request: Request):
    return {"region": _region(request, None)}


# ---------- UI endpoint ----------

@app.get("/ui", response_class=HTMLResponse)
def ui():
    return """
<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>Sports Fixtures</title>
  <style>
    body { font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; margin: 20px; background: #fff; color: #111; }
    body.dark { background: #111827; color: #e5e7eb; }
    .row { display: flex; gap: 12px; flex-wrap: wrap; align-items: center; }
    button, select, input { padding: 8px 10px; font-size: 14px; }
    button { cursor: pointer; }
    .error { color: #b00020; white-space: pre-wrap; margin-top: 12px; }
    .muted { color: #666; font-size: 12px; }
    details { border: 1px solid #e5e5e5; border-radius: 10px; margin-top: 12px; padding: 8px 12px; }
    summary { font-weight: 600; cursor: pointer; }
    .event { display: flex; justify-content: space-between; border-bottom: 1px solid #eee; padding: 8px 0; }
    .live { color: #fff; background: #dc2626; border-radius: 6px; padding: 1px 6px; font-size: 11px; margin-left: 6px; }
    .right { text-align: right; white-space: nowrap; }
    #filters.hidden { display: none; }
    @media (max-width: 640px) { body { margin: 12px; } }
  </style>
</head>
<body>
  <h1>Sports Fixtures</h1>
  <div class="muted">Live and upcoming fixtures, grouped by sport</div>

  <div class="row" style="margin-top: 12px;">
    <select id="mode">
      <option value="today">Today</option>
      <option value="week">Next 7 days</option>
      <option value="all" selected>All upcoming</option>
    </select>
    <input id="q" placeholder="Search teams, leagues..." />
    <button id="toggleFilters">Filters</button>
    <button id="darkBtn">Dark mode</button>
    <button id="reloadBtn">Reload</button>
  </div>

  <div id="filters" class="row hidden" style="margin-top: 10px;">
    <select id="date"><option value="">All dates</option></select>
    <select id="sport"><option value="">All sports</option></select>
    <select id="country"><option value="">All countries</option></select>
    <input id="team" placeholder="Team" />
    <select id="tz"></select>
  </div>

  <div id="error" class="error"></div>
  <div id="summary" class="muted" style="margin-top: 10px;"></div>
  <div id="sections"></div>

<script>
  const $ = (id) => document.getElementById(id);
  const ZONES = [Intl.DateTimeFormat().resolvedOptions().timeZone, "UTC", "Australia/Sydney",
                 "Australia/Perth", "Pacific/Auckland", "Europe/London", "America/New_York"];

  function fillSelect(el, values, allLabel) {
    const cur = el.value;
    el.innerHTML = `<option value="">${allLabel}</option>` +
      values.map(v => `<option value="${v}">${v}</option>`).join("");
    el.value = values.includes(cur) ? cur : "";
  }

  function url() {
    const p = new URLSearchParams();
    for (const k of ["q", "date", "sport", "country", "team", "tz"]) {
      if ($(k).value) p.set(k, $(k).value);
    }
    const mode = $("mode").value;
    if (mode === "all") return `/fixtures/upcoming?${p}`;
    if (mode === "week") p.set("days", "7");
    return `/fixtures?${p}`;
  }

  function eventHtml(e) {
    const when = e.local_start ? new Date(e.local_start).toLocaleString([], {timeZone: $("tz").value, weekday: "short", hour: "2-digit", minute: "2-digit"})
                               : `${e.display_date} ${e.display_time}`;
    const score = (e.home_score != null && e.away_score != null) ? `<div>${e.home_score} - ${e.away_score}</div>` : "";
    return `<div class="event">
      <div><strong>${e.title}</strong>${e.is_live ? '<span class="live">LIVE</span>' : ""}
        <div class="muted">${e.league}${e.venue ? " · " + e.venue : ""}${e.city ? " · " + e.city : ""}</div></div>
      <div class="right">${when}${score}<div class="muted">${e.status_text || ""}</div></div>
    </div>`;
  }

  function render(data) {
    fillSelect($("date"), data.filters.dates, "All dates");
    fillSelect($("sport"), data.filters.sports, "All sports");
    fillSelect($("country"), data.filters.countries, "All countries");
    $("summary").textContent = `${data.count} of ${data.total} events · ${data.live_count} live · region ${data.region}`;
    $("sections").innerHTML = data.sports.length === 0
      ? "<p>No events scheduled.</p>"
      : data.sports.map(s => `<details open>
          <summary>${s.icon} ${s.sport} <span class="muted">(${s.count} events${s.live_count ? ", " + s.live_count + " live" : ""})</span></summary>
          ${s.events.map(eventHtml).join("")}
        </details>`).join("");
  }

  async function load() {
    $("error").textContent = "";
    $("summary").textContent = "Loading...";
    try {
      const r = await fetch(url());
      const body = await r.json();
      if (!r.ok) throw new Error(JSON.stringify(body.detail, null, 2));
      render(body);
    } catch (err) {
      $("summary").textContent = "";
      $("sections").innerHTML = '<button onclick="load()">Try again</button>';
      $("error").textContent = "Failed to load fixtures. " + err.message;
    }
  }

  $("tz").innerHTML = [...new Set(ZONES)].map(z => `<option>${z}</option>`).join("");
  if (localStorage.getItem("dark") === "1") document.body.classList.add("dark");
  $("darkBtn").onclick = () => {
    document.body.classList.toggle("dark");
    localStorage.setItem("dark", document.body.classList.contains("dark") ? "1" : "0");
  };
  $("toggleFilters").onclick = () => $("filters").classList.toggle("hidden");
  $("reloadBtn").onclick = load;
  for (const id of ["mode", "date", "sport", "country", "tz"]) $(id).onchange = load;
  for (const id of ["q", "team"]) $(id).oninput = load;
  load();
</script>
</body>
</html>
"""
