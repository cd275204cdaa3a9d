from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent / "static"

router = APIRouter(tags=["page"])


@router.get("/share", include_in_schema=False)
async def share_page():
    """The share page itself. Session selection happens client-side via ?session=<id>."""
    return FileResponse(STATIC_DIR / "share.html", media_type="text/html")
