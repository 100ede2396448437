# ABOUTME: Dependency container for the dashboard pipeline using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient shared by all upstream API calls.

import httpx
from pydantic import BaseModel, ConfigDict

from src import config


class DashboardDeps(BaseModel):
    """Dependencies shared by every pipeline run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient


def create_http_client() -> httpx.AsyncClient:
    """Create the httpx client used for geocoding, forecast and reverse geocoding.

    No retries: a failed request is reported once to the viewer. A timeout counts as a
    transport failure.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.HTTP_TIMEOUT),
        headers={"Accept": "application/json"},
        follow_redirects=True,
    )
