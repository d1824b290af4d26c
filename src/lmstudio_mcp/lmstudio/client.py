"""Async client for the LM Studio REST API (``/api/v0``)."""

from types import TracebackType
from typing import Any, Dict, List, Optional, Type
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..core.config import DEFAULT_BASE_URL
from ..core.exceptions import LMStudioAPIError
from ..core.logger import get_logger
from .models import CompletionProbe, ModelDescriptor, ModelsResponse

logger = get_logger(__name__)

MODELS_ENDPOINT = "/api/v0/models"
CHAT_COMPLETIONS_ENDPOINT = "/api/v0/chat/completions"


class LMStudioClient:
    """
    Thin wrapper around the LM Studio REST API.

    Every method performs exactly one HTTP request. Nothing is cached and
    nothing is retried. Failures of any kind surface as LMStudioAPIError.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initializes the client.

        Args:
            base_url: Root URL of the LM Studio server.
            timeout: Request timeout in seconds. None waits indefinitely, since loading
                     a large model can take minutes.
            http_client: Optional preconfigured httpx client (e.g. with a mock transport).
                         A client passed in is not closed by this wrapper.
        """
        self.base_url = base_url.rstrip("/")
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "LMStudioClient":
        return self

    async def __aexit__(
        self, exc_type: Optional[Type[BaseException]], exc_val: Optional[BaseException], exc_tb: Optional[TracebackType]
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this wrapper created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def request(self, method: str, endpoint: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make one HTTP request to LM Studio and return the decoded JSON body.

        Args:
            method: HTTP method.
            endpoint: Path below the base URL, starting with ``/``.
            payload: Optional JSON body.

        Returns:
            The decoded JSON body.

        Raises:
            LMStudioAPIError: On transport errors, non-2xx statuses and malformed bodies.
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s", method, url)

        try:
            response = await self._http_client.request(
                method,
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise LMStudioAPIError(f"LM Studio API request failed: {str(e) or type(e).__name__}") from e

        if not response.is_success:
            reason = response.reason_phrase
            logger.debug("%s %s answered HTTP %d %s", method, url, response.status_code, reason)
            raise LMStudioAPIError(
                f"LM Studio API request failed: HTTP {response.status_code}: {reason}",
                status_code=response.status_code,
                reason=reason,
            )

        try:
            return response.json()
        except ValueError as e:
            raise LMStudioAPIError(f"LM Studio API request failed: malformed JSON response: {e}") from e

    async def list_models(self) -> List[ModelDescriptor]:
        """List all models LM Studio knows about."""
        body = await self.request("GET", MODELS_ENDPOINT)
        try:
            return ModelsResponse.model_validate(body).data
        except ValidationError as e:
            raise LMStudioAPIError(f"LM Studio API request failed: unexpected models response: {e}") from e

    async def get_model(self, model_id: str) -> ModelDescriptor:
        """Fetch a single model by id."""
        body = await self.request("GET", f"{MODELS_ENDPOINT}/{quote(model_id, safe='')}")
        try:
            return ModelDescriptor.model_validate(body)
        except ValidationError as e:
            raise LMStudioAPIError(f"LM Studio API request failed: unexpected model response: {e}") from e

    async def send_probe(self, probe: CompletionProbe) -> Any:
        """Send a lifecycle probe to the chat completions endpoint. The completion is not inspected."""
        return await self.request("POST", CHAT_COMPLETIONS_ENDPOINT, payload=probe.to_payload())
