# ABOUTME: Dependency container for the page components using Pydantic BaseModel.
# ABOUTME: Holds the DOM adapters, storage, scheduler and the httpx.AsyncClient used for the forecast call.

import httpx
from pydantic import BaseModel, ConfigDict

from shoresquad.config import Settings
from shoresquad.dom import Document, Window
from shoresquad.preferences import Storage
from shoresquad.scheduling import Scheduler

USER_AGENT = "shoresquad/0.1.0"


class PageDeps(BaseModel):
    """Everything an initializer may touch, injected once at page-ready."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    document: Document
    window: Window
    storage: Storage
    scheduler: Scheduler
    http_client: httpx.AsyncClient
    settings: Settings = Settings()


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an httpx client for the forecast endpoint.

    Failures are terminal per attempt; the widget surfaces them with a manual retry.
    """
    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )
