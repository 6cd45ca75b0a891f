from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from core.exceptions import TournamentException, TournamentValidationFailed
from core.middleware import RequestLoggingMiddleware

from core.config import settings
from core.logging import logger

# ROUTES
from api.routers.health import router as health_router
from api.routers.tournaments import router as tournaments_router


app = FastAPI(title=settings.app_name, version=settings.app_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Added last so it wraps CORS and logs preflight responses too
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(TournamentValidationFailed)
async def tournament_validation_handler(request: Request, exc: TournamentValidationFailed):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "errors": exc.errors,
            "issues": [issue.model_dump(mode="json") for issue in exc.issues],
            "type": "validation_error",
        }
    )


@app.exception_handler(TournamentException)
async def tournament_exception_handler(request: Request, exc: TournamentException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "type": "tournament_error"}
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    content = {"detail": "Internal server error", "type": type(exc).__name__}
    if settings.debug:
        content["detail"] = str(exc)
    return JSONResponse(status_code=500, content=content)


@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting up {settings.app_name} v{settings.app_version}...")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down application...")


app.include_router(health_router)
app.include_router(tournaments_router)
