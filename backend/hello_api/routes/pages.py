"""
Hello API — Demo Page Route
============================

What:  Serves the browser demo page that exercises /api/hello.
How:   GET / returns static/index.html; its script and stylesheet are served
       by the StaticFiles mount registered in main.py under /static.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter(tags=["Demo"])


@router.get(
    "/",
    include_in_schema=False,
    summary="Demo page",
)
async def index() -> FileResponse:
    """Serve the demo page."""
    return FileResponse(
        path=str(STATIC_DIR / "index.html"),
        media_type="text/html",
        headers={"Cache-Control": "no-cache"},
    )
