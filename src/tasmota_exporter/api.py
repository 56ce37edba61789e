from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Query
from fastapi.responses import PlainTextResponse, Response

from tasmota_exporter import __version__
from tasmota_exporter.probe import run_probe

app = FastAPI(title="Tasmota Exporter", version=__version__)


@app.get("/probe")
async def probe(target: Optional[str] = Query(default=None)) -> Response:
    if not target:
        return PlainTextResponse("Target parameter is missing", status_code=400)

    scope = await run_probe(target)
    return Response(content=scope.render(), media_type=scope.content_type)


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {"ok": True}
