"""
Gateway envelope and response models public surface.

This module re-exports the implementations under
``onellm.base.models_parts`` so callers have one stable import path.
"""

from .models_parts.model_id import ModelId, ProviderFamily
from .models_parts.message import Content, Message, Part
from .models_parts.tool import Function, Tool
from .models_parts.generation_config import GenerationConfig, SafetySetting
from .models_parts.response_format import ResponseFormat
from .models_parts.api_input import ALWAYS_PRESENT_FIELDS, OPTIONAL_FIELDS, APIInput
from .models_parts.api_response import APIResponse, LlmUnifiedResponse, LlmUsage

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
    "ALWAYS_PRESENT_FIELDS",
    "OPTIONAL_FIELDS",
    "APIResponse",
    "LlmUnifiedResponse",
    "LlmUsage",
]
