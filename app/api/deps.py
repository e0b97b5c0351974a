from fastapi import Request

from app.core.store import DataStore


# Dependency for FastAPI: injects the app store into endpoints
def get_store(request: Request) -> DataStore:
    return request.app.state.store
