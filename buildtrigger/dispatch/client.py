"""HTTP client for the build trigger endpoint."""

from __future__ import annotations

import typing as typ

import httpx
import msgspec

from buildtrigger.logging import get_logger, log_debug, log_info

from .errors import DispatchError

if typ.TYPE_CHECKING:
    from .config import DispatchConfig
    from .payload import TriggerPayload

logger = get_logger(__name__)


class DispatchClient:
    """Send trigger requests; each request is attempted exactly once."""

    def __init__(
        self,
        config: DispatchConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client for the configured endpoint."""
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout_s)

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._config.auth_key:
            headers["Authorization"] = f"Bearer {self._config.auth_key}"
        return headers

    async def send(self, payload: TriggerPayload) -> str:
        """POST ``payload`` and return the response body.

        Raises
        ------
        DispatchError
            If the endpoint answers with a non-2xx status.
        httpx.HTTPError
            If the request cannot be completed.

        """
        response = await self._client.post(
            self._config.dispatch_url,
            content=msgspec.json.encode(payload),
            headers=self._headers(),
        )
        body = response.text
        log_debug(logger, "Response from dispatch endpoint: %s", body)
        if not response.is_success:
            raise DispatchError.rejected(response.status_code, body)
        log_info(logger, "Dispatch request successful.")
        return body
