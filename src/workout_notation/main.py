"""Main FastAPI application."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from workout_notation.api.routes import router
from workout_notation.config import settings
from workout_notation.notation import NotationParseError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Workout Notation API")

# Configure CORS to allow requests from the UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotationParseError)
async def notation_error_handler(request: Request, exc: NotationParseError) -> JSONResponse:
    logger.info(f"Rejected {exc.field} notation on {request.url.path}: {exc.reason}")
    return JSONResponse(status_code=422, content={"detail": exc.to_dict()})


app.include_router(router)
