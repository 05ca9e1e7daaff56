# access_tokens/adapters/inbound/api/endpoints/console_endpoint.py

"""
Browser test console for the token API.

Serves one HTML page whose forms call POST and GET /api/tokens.
"""

from pathlib import Path
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

router = APIRouter(tags=["Console"], include_in_schema=False)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[4] / "templates"))

EXPIRY_OPTIONS = [
    ("10 mins", 10),
    ("30 mins", 30),
    ("1 hour", 60),
    ("6 hours", 360),
    ("12 hours", 720),
    ("24 hours", 1440),
]


@router.get("/", response_class=HTMLResponse)
async def token_console(request: Request):
    """
    Shows the create/list forms.
    """
    return templates.TemplateResponse(request, "token_console.html", {
        "expiry_options": EXPIRY_OPTIONS,
        "default_expiry": 10,
        "tokens_url": "/api/tokens",
    })
