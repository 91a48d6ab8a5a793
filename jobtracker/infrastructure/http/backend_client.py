"""
HTTP Job Backend - REST client for the job backend.

Endpoints:
- GET    /jobs        full collection
- GET    /jobs/stats  per-status counts
- POST   /jobs        create
- PUT    /jobs/{id}   full replacement
- DELETE /jobs/{id}   delete

The bearer token is read from the session context on every request, so a
logout takes effect immediately. Without a session the request is sent
unauthenticated and the backend decides.
"""

import logging
from typing import Any, Optional

import httpx

from jobtracker.application.interfaces import BackendError, JobBackendPort
from jobtracker.application.use_cases.session_context import SessionContext
from jobtracker.config.settings import Settings
from jobtracker.domain.entities import Job
from jobtracker.domain.services import stats_aggregator
from jobtracker.domain.value_objects import StatsSummary


logger = logging.getLogger(__name__)


def _backend_message(response: httpx.Response) -> Optional[str]:
    """Extract the backend's ``msg`` field from an error response."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        msg = data.get("msg") or data.get("message")
        return str(msg) if msg else None
    return None


class HttpJobBackend(JobBackendPort):
    """
    httpx based adapter for the job backend.

    Usage:
        async with HttpJobBackend(settings, session) as backend:
            jobs = await backend.list_jobs()
    """

    def __init__(
        self,
        settings: Settings,
        session: SessionContext,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            settings: Application settings with the base URL.
            session: Session context providing the bearer token.
            transport: Optional httpx transport (tests use MockTransport).
        """
        self.settings = settings
        self.session = session
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def open(self) -> None:
        """Create the HTTP client."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            timeout=httpx.Timeout(self.settings.request_timeout),
            transport=self._transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpJobBackend":
        await self.open()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the active client or raise error."""
        if not self._client:
            raise RuntimeError("Backend client not opened. Call open() first.")
        return self._client

    def _headers(self) -> dict[str, str]:
        session = self.session.session
        if session is None:
            return {}
        return {"Authorization": session.authorization_header}

    async def _request(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        """
        Send one request and decode the JSON body.

        Raises:
            BackendError: Transport failure, error status or undecodable body.
        """
        logger.debug(f"{method} {path}")
        try:
            response = await self.client.request(
                method, path, json=payload, headers=self._headers()
            )
        except httpx.HTTPError as e:
            raise BackendError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            raise BackendError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                detail=_backend_message(response),
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(
                f"{method} {path} returned invalid JSON",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _parse_job(data: Any, path: str) -> Job:
        if not isinstance(data, dict):
            raise BackendError(f"{path} returned a non-object job")
        try:
            return Job.from_dict(data)
        except ValueError as e:
            raise BackendError(f"{path} returned an invalid job: {e}") from e

    async def list_jobs(self) -> list[Job]:
        data = await self._request("GET", "/jobs")
        if not isinstance(data, list):
            raise BackendError("/jobs did not return a list")
        return [self._parse_job(item, "/jobs") for item in data]

    async def get_stats(self) -> StatsSummary:
        data = await self._request("GET", "/jobs/stats")
        if not isinstance(data, dict):
            raise BackendError("/jobs/stats did not return an object")
        try:
            return stats_aggregator.from_summary(data)
        except ValueError as e:
            raise BackendError(f"/jobs/stats returned invalid counts: {e}") from e

    async def create_job(self, payload: dict) -> Job:
        data = await self._request("POST", "/jobs", payload)
        return self._parse_job(data, "/jobs")

    async def update_job(self, job_id: str, payload: dict) -> Job:
        path = f"/jobs/{job_id}"
        data = await self._request("PUT", path, payload)
        return self._parse_job(data, path)

    async def delete_job(self, job_id: str) -> None:
        await self._request("DELETE", f"/jobs/{job_id}")
