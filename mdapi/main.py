# mdapi/main.py

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mdapi.api.markdown import router as markdown_router
from mdapi.config import Settings, get_settings, port_from_env

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API. Passing `settings` pins them for every request; otherwise
    they are read from the environment.
    """
    cors_settings = settings or get_settings()

    app = FastAPI(
        title="Markdown Files API",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    if settings is not None:
        app.dependency_overrides[get_settings] = lambda: settings

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(markdown_router)
    return app


app = create_app()


def run_server(settings: Optional[Settings] = None, port: Optional[int] = None) -> None:
    import uvicorn

    settings = settings or get_settings()
    port = port or port_from_env()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    logger.info(
        "Serving markdown from %s at http://%s:%s/markdown/",
        settings.markdown_dir,
        settings.host,
        port,
    )
    uvicorn.run(create_app(settings), host=settings.host, port=port, log_level="info")
