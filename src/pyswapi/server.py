"""Presentation server: a minimal FastAPI front end for the demo."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pyswapi import __version__
from pyswapi.client import SwapiClient
from pyswapi.config import SwapiConfig
from pyswapi.demo import DemoOrchestrator
from pyswapi.stats import StatsSnapshot

_logger = logging.getLogger(__name__)


_INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
    <head>
        <title>Star Wars API Demo</title>
        <style>
            body {{ font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }}
            h1 {{ color: #FFE81F; background-color: #000; padding: 10px; }}
            button {{ background-color: #FFE81F; border: none; padding: 10px 20px; cursor: pointer; }}
            .footer {{ margin-top: 50px; font-size: 12px; color: #666; }}
            pre {{ background: #f4f4f4; padding: 10px; border-radius: 5px; }}
        </style>
    </head>
    <body>
        <h1>Star Wars API Demo</h1>
        <p>This page demonstrates fetching data from the Star Wars API.</p>
        <button onclick="fetchData()">Fetch Star Wars Data</button>
        <pre id="results"></pre>
        <script>
            function fetchData() {{
                const results = document.getElementById('results');
                results.textContent = 'Loading data...';
                fetch('/api')
                    .then(res => res.text())
                    .then(text => {{ results.textContent = text; }})
                    .catch(err => {{ results.textContent = 'Error: ' + err.message; }});
            }}
        </script>
        <div class="footer">
            <p>API calls: {api_calls} | Cache entries: {cache_size} | Errors: {errors}</p>
            <pre>Debug mode: {debug} | Timeout: {timeout}ms</pre>
        </div>
    </body>
</html>
"""


def render_index(stats: StatsSnapshot) -> str:
    return _INDEX_TEMPLATE.format(
        api_calls=stats.api_calls,
        cache_size=stats.cache_size,
        errors=stats.errors,
        debug="ON" if stats.debug else "OFF",
        timeout=stats.timeout,
    )


def create_app(
    config: SwapiConfig,
    *,
    client: SwapiClient | None = None,
    orchestrator: DemoOrchestrator | None = None,
) -> FastAPI:
    """Build the FastAPI app around one client and one orchestrator.

    When *client* is omitted the app creates its own and opens it for the
    lifetime of the server.
    """
    owns_client = client is None
    swapi = client if client is not None else SwapiClient(config)
    demo = orchestrator if orchestrator is not None else DemoOrchestrator(swapi)

    @contextlib.asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        async with contextlib.AsyncExitStack() as stack:
            if owns_client:
                await stack.enter_async_context(swapi)
            yield

    app = FastAPI(
        title="Star Wars API Demo",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.client = swapi
    app.state.orchestrator = demo

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        if exc.status_code == 404:
            return PlainTextResponse("Not Found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.get("/", response_class=HTMLResponse)
    @app.get("/index.html", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        return HTMLResponse(render_index(swapi.stats()))

    @app.get("/api", response_class=PlainTextResponse)
    async def api() -> PlainTextResponse:
        report = await demo.run()
        if not report.ok:
            _logger.info("Demo run aborted: %s", report.error)
        return PlainTextResponse(report.text())

    @app.get("/stats")
    async def stats() -> JSONResponse:
        return JSONResponse(swapi.stats().model_dump())

    return app
