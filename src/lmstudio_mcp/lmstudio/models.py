from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, WithJsonSchema

# Seconds; integral values stay integers on the wire.
TTLSeconds = Annotated[Union[int, float], WithJsonSchema({"type": "number"})]

DEFAULT_LOAD_TTL = 3600


class ModelDescriptor(BaseModel):
    """
    A model known to the LM Studio server, as last reported by its REST API.

    Keys the API adds beyond the declared fields are kept, so serializing a
    descriptor reproduces what the server sent.

    Attributes:
        id: The model identifier used in every other request.
        type: Kind of model: language model, vision-language model or embedding model.
        publisher: Publisher of the model weights.
        architecture: Model architecture (e.g. ``llama``).
        compatibility: Format/runtime compatibility tag (e.g. ``gguf``).
        quantization: Quantization tag (e.g. ``Q4_K_M``).
        state: Whether the model is currently loaded.
        max_context_length: Maximum context length in tokens.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    type: Literal["llm", "vlm", "embeddings"]
    publisher: Optional[str] = None
    architecture: Optional[str] = None
    compatibility: Optional[str] = None
    quantization: Optional[str] = None
    state: Optional[Literal["loaded", "not-loaded"]] = None
    max_context_length: Optional[int] = None

    def to_json_dict(self) -> Dict[str, Any]:
        """Dump only what the server reported."""
        reported = self.model_dump(mode="json", exclude_unset=True)
        reported.update(self.model_extra or {})
        return reported


class ModelsResponse(BaseModel):
    """Body of ``GET /api/v0/models``."""

    data: List[ModelDescriptor]


class ProbeMessage(BaseModel):
    role: str = "system"
    content: str


class CompletionProbe(BaseModel):
    """
    A one-token chat completion request used to drive LM Studio's model lifecycle.

    LM Studio loads a model on demand when a request names it, applies ``ttl``
    as the idle time before auto-unload (0 unloads immediately) and attaches
    ``draft_model`` for speculative decoding. The completion itself is discarded.
    Optional fields are sent only when supplied.
    """

    model: str
    messages: List[ProbeMessage]
    max_tokens: int = 1
    ttl: Optional[TTLSeconds] = None
    draft_model: Optional[str] = None

    @classmethod
    def build(
        cls,
        model_id: str,
        content: str,
        ttl: Optional[Union[int, float]] = None,
        draft_model: Optional[str] = None,
    ) -> "CompletionProbe":
        return cls(
            model=model_id,
            messages=[ProbeMessage(content=content)],
            ttl=ttl,
            draft_model=draft_model,
        )

    def to_payload(self) -> Dict[str, Any]:
        # None means "not supplied"; 0 and "" are real values and are kept.
        return self.model_dump(mode="json", exclude_none=True)
