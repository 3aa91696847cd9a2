"""HR Platform: candidate and skill management API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import LOG_FORMAT, LOG_LEVEL, SEED_ON_STARTUP
from app.core.database import Base, async_session_factory, engine
from app.core.exceptions import CandidateServiceError
from app.services.reference_data import seed_demo_candidates, seed_skills

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# --------------- Lifespan ---------------


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Optionally create tables and seed reference data on startup."""
    if SEED_ON_STARTUP:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with async_session_factory() as db:
            await seed_skills(db)
            await seed_demo_candidates(db)
    logger.info("HR Platform started")
    yield
    await engine.dispose()


# --------------- App ---------------

app = FastAPI(title="HR Platform", lifespan=lifespan)


# --------------- Error handlers ---------------


@app.exception_handler(CandidateServiceError)
async def candidate_error_handler(request: Request, exc: CandidateServiceError):
    """Render workflow errors as the standard failure envelope."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Request body/query/path validation failures are reported as 400."""
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    message = "; ".join(f"{e['field']}: {e['message']}" for e in errors) or "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": message, "errors": errors},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": str(exc)},
    )


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


# --------------- Include routers ---------------

from app.api.candidates import router as candidates_router  # noqa: E402

app.include_router(candidates_router)


# --------------- Run ---------------

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=True)
