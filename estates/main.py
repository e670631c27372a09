# estates/main.py
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import Settings
from .db import init_db, make_engine
from .routers import admin, properties, seller, sitemap

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="Estates API", version="0.1.0")
    app.state.settings = settings
    app.state.engine = make_engine(settings)

    settings.upload_dir.mkdir(parents=True, exist_ok=True)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(admin.router)
    app.include_router(properties.router)
    app.include_router(seller.router)
    app.include_router(sitemap.router)

    @app.on_event("startup")
    def on_startup():
        init_db(app.state.engine)
        logger.info("Database ready, uploads in %s", settings.upload_dir)

    @app.on_event("shutdown")
    def on_shutdown():
        app.state.engine.dispose()

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # Static files; the public site goes last so it does not shadow the API
    app.mount("/uploads", StaticFiles(directory=settings.upload_root), name="uploads")
    app.mount("/data", StaticFiles(directory=settings.data_dir, check_dir=False), name="data")
    app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")

    return app


app = create_app()


def run():
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)


if __name__ == "__main__":
    run()
