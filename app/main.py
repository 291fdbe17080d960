from __future__ import annotations

from fastapi import FastAPI


def create_app() -> FastAPI:
    app = FastAPI(title="Movie Prize Intervals API", version="0.1.0")

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    from app.routes import movies  # noqa: WPS433

    app.include_router(movies.router)
    return app


app = create_app()
