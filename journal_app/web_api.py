"""FastAPI application exposing the quick-entry parser over HTTP."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from journal_app.main import build_parser, describe_result
from journal_input.parser import InputParser

logger = logging.getLogger(__name__)


class ParseRequest(BaseModel):
    text: Optional[str] = None
    today: Optional[date] = None


def create_app(parser: Optional[InputParser] = None) -> FastAPI:
    """WHAT: instantiate FastAPI around a shared ``InputParser``.

    WHY: editor plugins and scripts that cannot import Python still need the
    same reading of quick-entry lines as the CLI.
    HOW: accept a parser override (tests), cache it on ``app.state`` and
    register the health and parse routes.
    """
    app = FastAPI(title="Journal Quick-Entry API", version="1.0.0")
    app.state.parser = parser or build_parser()

    @app.get("/api/health")
    def health_check() -> Dict[str, Any]:
        return {
            "status": "ok",
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        }

    @app.post("/api/parse")
    def parse(payload: ParseRequest) -> Dict[str, Any]:
        """Parse one line; cancellations come back as ``status: cancelled``.

        Validation failures map to 422 and unreadable dates to 400, with the
        error metadata as the response detail.
        """
        result = app.state.parser.parse(payload.text, today=payload.today)
        if result.status == "invalid":
            raise HTTPException(status_code=422, detail=result.error.to_metadata())
        if result.status == "error":
            logger.warning("Rejected quick-entry line %r: %s", payload.text, result.error)
            raise HTTPException(status_code=400, detail=result.error.to_metadata())
        return describe_result(result)

    return app


def serve() -> None:
    """Run the API with uvicorn on the configured host and port."""
    import uvicorn
    from journal_app.config import get_web_host, get_web_port

    uvicorn.run(
        create_app(),
        host=get_web_host(),
        port=get_web_port(),
        reload=False,
    )


if __name__ == "__main__":
    serve()
