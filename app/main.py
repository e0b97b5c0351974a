import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.observability import RequestLoggingMiddleware, setup_logging
from app.core.store import DataStore
from app.api.error_handlers import register_error_handlers

from app.api.routes.auth import router as auth_router
from app.api.routes.events import router as events_router

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

ENDPOINTS = {
    "auth": {
        "register": "POST /register",
        "login": "POST /login",
        "profile": "GET /profile (requires auth)",
    },
    "events": {
        "getAllEvents": "GET /events",
        "getEvent": "GET /events/{id}",
        "createEvent": "POST /events (organizers only)",
        "updateEvent": "PUT /events/{id} (owner only)",
        "deleteEvent": "DELETE /events/{id} (owner only)",
        "registerForEvent": "POST /events/{id}/register (requires auth)",
        "myRegistrations": "GET /events/my-registrations (requires auth)",
        "myEvents": "GET /events/my-events (organizers only)",
    },
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Event Management Platform API running on port {settings.PORT} ({settings.ENV})")
    for group, endpoints in ENDPOINTS.items():
        for route in endpoints.values():
            logger.info(f"  [{group}] {route}")
    yield


def create_app(store: DataStore | None = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Event Management Platform API", version=API_VERSION, lifespan=lifespan)
    app.state.store = store if store is not None else DataStore()

    # CORS first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        allow_credentials=False,
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(events_router)

    @app.get("/")
    def root():
        return {
            "success": True,
            "message": "Welcome to Event Management Platform API",
            "version": API_VERSION,
            "endpoints": ENDPOINTS,
        }

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
