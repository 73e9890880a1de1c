"""
Source Inspector FastAPI Application.

  POST /analyze/file     → syntax, security, style, complexity and grade for one file
  POST /analyze/content  → same, for content submitted inline
  POST /analyze/tree     → per-file rows and severity histogram for a directory
  POST /diagnose         → context window + hints for a runtime error
  POST /snippet/check    → syntax/security vetting of a snippet
  GET  /debug-log        → parsed tail of the debug log
  GET  /audit/recent     → latest audit events
  GET  /health           → {"status": "ok"}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inspector.api.routes.analyze import router as analyze_router
from inspector.api.routes.audit import router as audit_router
from inspector.api.routes.diagnose import router as diagnose_router
from inspector.api.routes.health import router as health_router
from inspector.config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("inspector")

app = FastAPI(
    title="Source Inspector",
    description="Heuristic PHP source inspection with letter grades",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(analyze_router)
app.include_router(diagnose_router)
app.include_router(audit_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = (await request.body()).decode("utf-8", errors="replace")
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()} | body: {body[:500]}")
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
