"""
onellm base package

Provider-agnostic building blocks for talking to the unified gateway:

- Models: request envelope, conversation/tool/Gemini DTOs, unified response
- Pricing: the static model-to-unit-price table
- Errors: normalized error taxonomy
- HTTP: pooled clients and the transport boundary
- Logging: structured JSON events
"""

from .errors import (
    AuthenticationError,
    DecodeError,
    ErrorCode,
    GatewayError,
    SerializationError,
    TransportError,
    UnknownModelError,
)
from .http import HttpxTransport, Transport
from .models import (
    APIInput,
    APIResponse,
    Content,
    Function,
    GenerationConfig,
    LlmUnifiedResponse,
    LlmUsage,
    Message,
    ModelId,
    Part,
    ProviderFamily,
    ResponseFormat,
    SafetySetting,
    Tool,
)
from .pricing import MODEL_PRICES, get_price, verify_price_table

__all__ = [
    # Models
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
    # Pricing
    "MODEL_PRICES",
    "get_price",
    "verify_price_table",
    # Errors
    "ErrorCode",
    "GatewayError",
    "SerializationError",
    "AuthenticationError",
    "TransportError",
    "DecodeError",
    "UnknownModelError",
    # HTTP
    "Transport",
    "HttpxTransport",
]
