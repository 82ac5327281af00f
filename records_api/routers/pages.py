from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

router = APIRouter(tags=["pages"])


def _get_templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


@router.get("/", response_class=HTMLResponse)
def record_form(request: Request):
    templates = _get_templates(request)
    return templates.TemplateResponse(request, "form.html", {"api_base": "/api/records"})
