"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse

if TYPE_CHECKING:
    from donor_impact.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/donors", dependencies=[Depends(require_admin)])
async def list_donors(
    request: Request, limit: int = Query(default=50, ge=1, le=500)
) -> dict[str, object]:
    """Return donors with giving summaries."""
    container: AppContainer = request.app.state.container
    return {"donors": container.admin_service.list_donors(limit)}


@router.get("/donors/{donor_id}", dependencies=[Depends(require_admin)])
async def donor_detail(donor_id: int, request: Request) -> dict[str, object]:
    """Return a donor's recent donations and lifetime impact."""
    container: AppContainer = request.app.state.container
    detail = container.admin_service.get_donor_detail(donor_id)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return detail


@router.get("/summary", dependencies=[Depends(require_admin)])
async def donation_summary(
    request: Request, days: int = Query(default=30, ge=1, le=366)
) -> dict[str, object]:
    """Return donation totals and combined impact for a recent window."""
    container: AppContainer = request.app.state.container
    return container.admin_service.summary(days)


@router.get("/ui", response_class=HTMLResponse)
async def admin_ui() -> HTMLResponse:
    """Minimal admin UI that consumes the admin API."""
    return HTMLResponse(_ADMIN_UI_HTML)


_ADMIN_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Donor Impact Admin</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 320px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Donor Impact Admin</h1>
    <div class="row">
      <label>Admin token</label><br />
      <input id="token" type="password" placeholder="X-Admin-Token" />
    </div>
    <div class="row">
      <label>Donor id</label><br />
      <input id="donor" type="number" min="1" placeholder="42" />
    </div>
    <div class="row">
      <button onclick="loadEndpoint('/admin/donors')">Donors</button>
      <button onclick="loadDonor()">Donor detail</button>
      <button onclick="loadEndpoint('/admin/summary?days=30')">Last 30 days</button>
      <button onclick="loadEndpoint('/admin/summary?days=365')">Last year</button>
    </div>
    <pre id="output">Ready.</pre>
    <script>
      function loadDonor() {
        const donorId = document.getElementById('donor').value;
        if (!donorId) {
          document.getElementById('output').textContent = 'Enter a donor id.';
          return;
        }
        loadEndpoint('/admin/donors/' + encodeURIComponent(donorId));
      }

      async function loadEndpoint(path) {
        const token = document.getElementById('token').value;
        const output = document.getElementById('output');
        output.textContent = 'Loading...';
        const res = await fetch(path, {
          headers: { 'X-Admin-Token': token }
        });
        if (!res.ok) {
          output.textContent = 'Error: ' + res.status;
          return;
        }
        const data = await res.json();
        output.textContent = JSON.stringify(data, null, 2);
      }
    </script>
  </body>
</html>
"""
