"""
Entry point for running the coach API with `python -m backend`.

Auto-reload is enabled only in the development environment.
"""
import uvicorn

from backend.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
