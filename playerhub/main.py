"""
PlayerHub Profile Completion API

Run with: uvicorn playerhub.main:app --reload --port 8000
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from playerhub.config import Settings, get_settings
from playerhub.core.categories import load_category_table
from playerhub.models import HealthResponse
from playerhub.routes import v1_completion

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # A bad table is a programming error: fail here, before serving anything
    table = load_category_table(settings.completion_categories_file)

    app = FastAPI(title="PlayerHub Profile Completion API", version="1.0.0")
    app.state.category_table = table

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="ok", categories=len(app.state.category_table))

    app.include_router(v1_completion.router, prefix=settings.api_prefix, tags=["completion"])

    logger.info(f"PlayerHub API ready: {len(table)} categories under {settings.api_prefix}")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
