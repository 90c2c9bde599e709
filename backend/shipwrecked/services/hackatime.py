"""Client for the Hackatime time-tracking API."""
from dataclasses import dataclass
from typing import List, Optional

import httpx

from shipwrecked.config import settings
from shipwrecked.utils.exceptions import HackatimeError
from shipwrecked.utils.logger import logger


@dataclass
class HackatimeProject:
    """A tracked project as reported by Hackatime."""
    name: str
    hours: float


class HackatimeClient:
    """Reads per-project tracked time for a Hackatime user."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.hackatime_api_url).rstrip("/")
        self.api_token = api_token if api_token is not None else settings.hackatime_api_token
        self.timeout = timeout if timeout is not None else settings.hackatime_timeout_seconds
        self._transport = transport

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    async def fetch_projects(self, hackatime_id: str) -> List[HackatimeProject]:
        """
        Fetch all tracked projects of a user.

        Args:
            hackatime_id: Hackatime user identifier

        Returns:
            Projects with their total tracked hours

        Raises:
            HackatimeError: On transport errors or non-2xx answers
        """
        url = f"{self.base_url}/users/{hackatime_id}/stats"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(
                    url,
                    params={"features": "projects"},
                    headers=self._headers(),
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Hackatime returned {e.response.status_code} for user {hackatime_id}: {e.response.text}"
            )
            raise HackatimeError(f"Hackatime request failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Hackatime request for user {hackatime_id} failed: {e}")
            raise HackatimeError(f"Hackatime request failed: {e}") from e

        projects = payload.get("data", {}).get("projects", []) or []
        return [
            HackatimeProject(
                name=item["name"],
                hours=round((item.get("total_seconds") or 0) / 3600, 2),
            )
            for item in projects
            if item.get("name")
        ]
