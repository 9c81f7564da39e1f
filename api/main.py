import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from articles import router as articles_router
from comments import router as comments_router
from core import catalog, db, errors, settings
from core.log import configure_logging
from topics import router as topics_router
from users import router as users_router

configure_logging()
logger = logging.getLogger("api")


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="news-api", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.install(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        logger.info(
            "request method=%s path=%s status=%s duration_ms=%.1f",
            request.method,
            request.url.path,
            status_code,
            (time.perf_counter() - started) * 1000,
        )


app.include_router(topics_router.router, prefix="/api", tags=["topics"])
app.include_router(articles_router.router, prefix="/api", tags=["articles"])
app.include_router(comments_router.router, prefix="/api", tags=["comments"])
app.include_router(users_router.router, prefix="/api", tags=["users"])


@app.get("/api")
def api_index() -> dict:
    return {"endpoints": catalog.endpoints()}


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
