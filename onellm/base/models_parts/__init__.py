"""One-class-per-file implementations behind ``onellm.base.models``."""

from .model_id import ModelId, ProviderFamily
from .message import Content, Message, Part
from .tool import Function, Tool
from .generation_config import GenerationConfig, SafetySetting
from .response_format import ResponseFormat
from .api_input import APIInput
from .api_response import APIResponse, LlmUnifiedResponse, LlmUsage

__all__ = [
    "ModelId",
    "ProviderFamily",
    "Message",
    "Part",
    "Content",
    "Function",
    "Tool",
    "SafetySetting",
    "GenerationConfig",
    "ResponseFormat",
    "APIInput",
    "APIResponse",
    "LlmUnifiedResponse",
    "LlmUsage",
]
