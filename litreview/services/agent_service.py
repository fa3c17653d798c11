"""HTTP client for the external literature-analysis engine."""

import logging
from typing import Any, Optional

import httpx

from litreview.config import EngineConfig
from litreview.errors import TransportError

logger = logging.getLogger(__name__)


class AgentService:
    """Sends one analysis request to the engine and returns its envelope."""

    def __init__(
        self,
        engine: EngineConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the engine client.

        Args:
            engine: Endpoint, agent id, credentials and timeout
            transport: Optional httpx transport (used by tests)
        """
        self.engine = engine
        self._transport = transport

    def _build_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.engine.api_key:
            headers["x-api-key"] = self.engine.api_key
        return headers

    async def analyze(self, payload: dict[str, Any]) -> Any:
        """POST *payload* to the engine.

        Args:
            payload: Request body built by :func:`build_request`

        Returns:
            The decoded JSON envelope (not yet validated)

        Raises:
            TransportError: On connection errors, HTTP errors or a non-JSON body
        """
        url = self.engine.base_url
        logger.info("Submitting analysis request to %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self.engine.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(url, json=payload, headers=self._build_headers())
        except httpx.TimeoutException as e:
            raise TransportError("Analysis engine timed out", details={"url": url}) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"Could not reach analysis engine: {e}",
                details={"url": url},
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                f"Analysis engine returned {response.status_code} with a non-JSON body",
                status_code=response.status_code,
            ) from e

        # Engines report their own failures as {"success": false, "error": ...}
        # even on 4xx/5xx; hand those envelopes on so the message surfaces.
        if response.status_code >= 400 and not (isinstance(data, dict) and "success" in data):
            raise TransportError(
                f"Analysis engine returned {response.status_code}",
                status_code=response.status_code,
            )
        return data
