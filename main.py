import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

import cache
from config import API_PREFIX, CORS_ORIGINS, LOG_LEVEL
from database import init_models, dispose_engine
from errors import BrainlyError, StoreError, ValidationError
from validation import request_errors
from routers import users, content, brain

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Brainly",
    version="1.0.0",
    description="Save links to videos, posts and repositories, and share your collection with a public link.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router, prefix=API_PREFIX, tags=["users"])
app.include_router(content.router, prefix=f"{API_PREFIX}/content", tags=["content"])
app.include_router(brain.router, prefix=f"{API_PREFIX}/brain", tags=["brain"])

@app.exception_handler(BrainlyError)
async def brainly_error_handler(request: Request, exc: BrainlyError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = ValidationError(request_errors(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())

@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    error = StoreError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.on_event("startup")
async def startup():
    await init_models()
    await cache.init_cache()

@app.on_event("shutdown")
async def shutdown():
    await cache.close_cache()
    await dispose_engine()
