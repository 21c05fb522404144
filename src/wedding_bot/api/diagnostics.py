"""Diagnostics endpoints for checking store connectivity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError

from wedding_bot.domain.errors import PersistenceError

if TYPE_CHECKING:
    from wedding_bot.containers import AppContainer

router = APIRouter(tags=["diagnostics"])


@router.get("/test-db")
async def test_db(request: Request) -> JSONResponse:
    """Report store configuration and a sample of confirmation rows."""
    container: AppContainer = request.app.state.container
    missing = container.settings.missing_supabase_settings()
    if missing:
        env = {
            name: "MISSING" if name in missing else "SET"
            for name in ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY")
        }
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "env": env},
        )
    try:
        rows = container.rsvp_service.list_confirmations(limit=5)
    except PersistenceError as exc:
        cause = exc.__cause__ or exc
        if isinstance(cause, APIError):
            content = {"ok": False, "error": cause.json()}
        else:
            content = {"ok": False, "message": str(cause) or type(cause).__name__}
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
        )
    return JSONResponse(
        content={
            "ok": True,
            "rows": [
                {
                    "user_id": row.user_id,
                    "full_name": row.full_name,
                    "guests_count": row.guests_count,
                    "updated_at": row.updated_at.isoformat()
                    if row.updated_at
                    else None,
                }
                for row in rows
            ],
        }
    )
