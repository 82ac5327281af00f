"""
FastAPI routers grouped by concern (records API, liveness probe, form page).

Each module exposes an APIRouter that the app factory includes.
"""
