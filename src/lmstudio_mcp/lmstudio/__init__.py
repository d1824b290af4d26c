"""LM Studio REST client, its data models and the model lifecycle tools."""

from .client import LMStudioClient
from .models import ModelDescriptor, ModelsResponse, CompletionProbe, DEFAULT_LOAD_TTL
from .tools import LMStudioModelTools

__all__ = [
    "LMStudioClient",
    "ModelDescriptor",
    "ModelsResponse",
    "CompletionProbe",
    "DEFAULT_LOAD_TTL",
    "LMStudioModelTools",
]
