import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.main import api_router
from app.core.config import settings
from app.core.database import Base, engine
from app.initial_data import create_initial_data
from app import models  # noqa: F401  registers every table on Base.metadata

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_STR}/openapi.json",
)

# Parse CORS origins from comma-separated string in settings
cors_origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,  # session cookie
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_STR)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/")
async def read_root():
    return {"message": "MindsAI ToolsHub backend is running"}


@app.on_event("startup")
async def on_startup():
    logger.info("[Startup] Creating database tables")
    Base.metadata.create_all(bind=engine)
    if settings.SEED_INITIAL_DATA:
        create_initial_data()


@app.on_event("shutdown")
async def on_shutdown():
    logger.info("[Shutdown] Server is shutting down")


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
