from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from motivator.api.routes import router
from motivator.core.config import Settings, settings as default_settings
from motivator.core.errors import GENERIC_FAILURE, RelayError
from motivator.core.logging import get_logger
from motivator.llm.relay import CompletionRelay

log = get_logger("main")


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(title="Motivator Relay", version="0.1.0")
    app.state.settings = settings
    app.state.relay = CompletionRelay(settings, transport=transport)

    @app.exception_handler(RelayError)
    async def on_relay_error(request: Request, exc: RelayError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def on_unexpected_error(request: Request, exc: Exception):
        log.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": GENERIC_FAILURE})

    app.include_router(router)

    static_dir = settings.STATIC_DIR

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(static_dir / "index.html")

    # everything else in the static dir; registered last so API routes win
    app.mount("/", StaticFiles(directory=static_dir), name="static")
    return app


app = create_app()


def run():
    log.info(f"Server is running on http://{default_settings.HOST}:{default_settings.PORT}")
    if not default_settings.has_api_key:
        log.warning("API_KEY is not set; /motivate will answer 500 until it is configured")
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


"""
Application entry point and it does:
- Builds the FastAPI app around one CompletionRelay
- Translates RelayError into {"error": ...} JSON bodies
- Serves the landing page and co-located static files
- Runs uvicorn on HOST:PORT (default 3000)

The main purpose:
Wire settings, relay, routes and static serving together.
"""
