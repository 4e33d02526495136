"""FastAPI application factory for the summary web interface."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx  # noqa: TC002
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from tldr_cli import __version__
from tldr_cli.errors import TLDRError
from tldr_cli.services import SummaryService  # noqa: TC001
from tldr_cli.tldr import TLDRConfig, tldr

LOGGER = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

ADDRESS_FIELD = "summaryUrl"


@dataclass
class WebSettings:
    """Everything the web app needs, built once at startup.

    Attributes:
        templates: Parsed page and fragment templates.
        static_dir: Directory served under ``/static``.
        tldr_config: Limits applied to every summary request.
        http_client: Client used to fetch submitted pages. A client is
            opened per request when unset.

    """

    templates: Jinja2Templates
    static_dir: Path = STATIC_DIR
    tldr_config: TLDRConfig = field(default_factory=TLDRConfig)
    http_client: httpx.AsyncClient | None = None

    @classmethod
    def default(
        cls,
        tldr_config: TLDRConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> WebSettings:
        """Load the bundled templates and static assets."""
        return cls(
            templates=Jinja2Templates(directory=str(TEMPLATES_DIR)),
            static_dir=STATIC_DIR,
            tldr_config=tldr_config or TLDRConfig(),
            http_client=http_client,
        )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    version: str


def create_app(settings: WebSettings, service: SummaryService) -> FastAPI:
    """Create the FastAPI app."""
    app = FastAPI(title="TL;DR", version=__version__)
    app.state.settings = settings
    app.state.service = service
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Any) -> Any:
        response = await call_next(request)
        LOGGER.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        return settings.templates.TemplateResponse(request, "index.html")

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="ok", version=__version__)

    @app.post("/api/chat/", response_class=HTMLResponse, name="chat")
    @app.post("/api/chat", response_class=HTMLResponse, include_in_schema=False)
    async def chat(request: Request) -> HTMLResponse:
        """Summarize the submitted address and render it as a card fragment."""
        address = await _read_address(request)
        try:
            # Submitted addresses are fetched over HTTP only, never read from this host
            result = await tldr(
                address,
                service,
                settings.tldr_config,
                client=settings.http_client,
                allow_local=False,
            )
        except TLDRError as e:
            LOGGER.warning("Could not summarize %s: %s", address, e)
            return settings.templates.TemplateResponse(
                request,
                "error.html",
                {"address": address, "error": str(e)},
            )
        return settings.templates.TemplateResponse(
            request,
            "card.html",
            {
                "address": result.address,
                "url": result.url,
                "title": result.title,
                "summary": result.summary,
            },
        )

    return app


async def _read_address(request: Request) -> str:
    """Return the submitted address, rejecting malformed or empty forms with 400."""
    try:
        form = await request.form()
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Malformed form body: {e}") from e

    address = form.get(ADDRESS_FIELD)
    if not isinstance(address, str) or not address.strip():
        raise HTTPException(status_code=400, detail=f"Missing form field '{ADDRESS_FIELD}'")
    return address.strip()
