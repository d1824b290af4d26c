"""The model lifecycle tools exposed to agents."""

import json
from typing import Annotated, Optional

from pydantic import Field

from ..core.exceptions import LMStudioAPIError, ToolExecutionError
from ..core.logger import get_logger
from ..core.tools import ToolRegistry
from .client import LMStudioClient
from .models import DEFAULT_LOAD_TTL, CompletionProbe, TTLSeconds

logger = get_logger(__name__)


class LMStudioModelTools:
    """
    Binds the five model tools to one LM Studio client.

    The docstring of each tool method is the description advertised to agents,
    and its annotated signature is the tool's input schema.
    """

    def __init__(self, client: LMStudioClient) -> None:
        self.client = client

    def register_into(self, registry: ToolRegistry) -> ToolRegistry:
        """Register all model tools into ``registry`` and return it."""
        registry.register(self.list_models)
        registry.register(self.get_model_details)
        registry.register(self.load_model)
        registry.register(self.unload_model)
        registry.register(self.configure_model)
        logger.info("Registered %d LM Studio tools.", len(registry.tools))
        return registry

    async def list_models(self) -> str:
        """List all available models in LM Studio with their current state (loaded/not-loaded)"""
        models = await self.client.list_models()
        return json.dumps([model.to_json_dict() for model in models], indent=2)

    async def get_model_details(
        self,
        model_id: Annotated[str, Field(description="The ID of the model to get details for")],
    ) -> str:
        """Get detailed information about a specific model including architecture, quantization, and context length"""
        details = await self.client.get_model(model_id)
        return json.dumps(details.to_json_dict(), indent=2)

    async def load_model(
        self,
        model_id: Annotated[str, Field(description="The ID of the model to load")],
        ttl: Annotated[
            Optional[TTLSeconds], Field(description="Time-To-Live in seconds before auto-unload (default: 3600)")
        ] = DEFAULT_LOAD_TTL,
    ) -> str:
        """Load a model into memory with configurable Time-To-Live (TTL). The model will auto-unload after the TTL expires."""
        if ttl is None:
            ttl = DEFAULT_LOAD_TTL
        probe = CompletionProbe.build(model_id, "ping", ttl=ttl)
        try:
            await self.client.send_probe(probe)
        except LMStudioAPIError as e:
            raise ToolExecutionError(f"Failed to load model: {e}") from e

        return f"Model '{model_id}' loaded successfully with TTL of {ttl} seconds"

    async def unload_model(
        self,
        model_id: Annotated[str, Field(description="The ID of the model to unload")],
    ) -> str:
        """Unload a model from memory immediately by setting its TTL to 0"""
        probe = CompletionProbe.build(model_id, "unload", ttl=0)
        try:
            await self.client.send_probe(probe)
        except LMStudioAPIError as e:
            raise ToolExecutionError(f"Failed to unload model: {e}") from e

        return f"Model '{model_id}' unloaded successfully"

    async def configure_model(
        self,
        model_id: Annotated[str, Field(description="The ID of the model to configure")],
        ttl: Annotated[Optional[TTLSeconds], Field(description="Time-To-Live in seconds (optional)")] = None,
        draft_model: Annotated[
            Optional[str], Field(description="Draft model ID for speculative decoding (optional)")
        ] = None,
    ) -> str:
        """Configure model settings such as TTL and draft model for speculative decoding"""
        probe = CompletionProbe.build(model_id, "configure", ttl=ttl, draft_model=draft_model)
        try:
            await self.client.send_probe(probe)
        except LMStudioAPIError as e:
            raise ToolExecutionError(f"Failed to configure model: {e}") from e

        updates = []
        if ttl is not None:
            updates.append(f"TTL: {ttl}s")
        if draft_model is not None:
            updates.append(f"Draft model: {draft_model}")

        return f"Model '{model_id}' configured: {', '.join(updates) or 'no settings changed'}"
