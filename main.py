"""Application entry point for the Meal Planner API.

Defines the FastAPI app, middleware, exception handlers and includes the API
routers from the `api` package. The `lifespan` handler builds the planner
store from the configured data directory and loads it before serving.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from core.config import get_settings
from core.logger import get_logger, set_level
from core.error_handlers import register_exception_handlers
from database import JSONStorage, make_session_factory
from services.planner_store import PlannerStore
from api.meals import router as meals_router
from api.profile import router as profile_router
from api.plans import router as plans_router
from api.suggestions import router as suggestions_router
from api.activity import router as activity_router

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build storage, activity log and store before serving requests."""
    settings = get_settings()
    set_level(settings.log_level)
    session_factory = make_session_factory(settings.database_url)
    store = PlannerStore(JSONStorage(settings.data_dir), session_factory=session_factory)
    store.load_all()
    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.store = store
    logger.info("Meal planner ready (data_dir=%s)", settings.data_dir)
    yield


app = FastAPI(title="Meal Planner API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise


@app.get("/health")
def health(request: Request):
    """Return basic health status and catalog size."""
    store = request.app.state.store
    return {"status": "healthy", "meals": len(store.meals), "plans": len(store.plans)}


app.include_router(meals_router)
app.include_router(profile_router)
app.include_router(plans_router)
app.include_router(suggestions_router)
app.include_router(activity_router)


if __name__ == "__main__":
    # Allow starting the app via `python ./main.py`
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
