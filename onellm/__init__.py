"""onellm package

Client-side model of the unified LLM gateway.

Purpose:
    Build one request envelope that can carry any supported provider's
    parameters, send it to the gateway with a single blocking call, decode the
    provider-agnostic reply, and look up per-model unit prices.

Public API (re-exported):
    - Version: ``__version__``
    - Envelope: :class:`APIInput` plus :class:`Message`, :class:`Content`,
      :class:`Part`, :class:`Tool`, :class:`Function`, :class:`SafetySetting`,
      :class:`GenerationConfig`, :class:`ResponseFormat`
    - Response: :class:`APIResponse`, :class:`LlmUnifiedResponse`,
      :class:`LlmUsage`
    - Models & pricing: :class:`ModelId`, :class:`ProviderFamily`,
      :data:`MODEL_PRICES`, :func:`get_price`
    - Transmission: :func:`send_request`, :class:`Transport`,
      :class:`HttpxTransport`, :func:`get_gateway_config`
    - Errors: :class:`GatewayError` and its subclasses, :class:`ErrorCode`

Example::

    from onellm import APIInput, ModelId

    req = APIInput.create("chat", ModelId.GPT_4_1, [{"role": "user", "content": "hi"}], 16)
    req.set_stop_sequences(["STOP"])
    resp = req.send("sk-...")
    print(resp.output.content)
"""

from .base.errors import (
    AuthenticationError,
    DecodeError,
    ErrorCode,
    GatewayError,
    SerializationError,
    TransportError,
    UnknownModelError,
)
from .base.http import HttpxTransport, Transport
from .base.models import (
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
from .base.pricing import MODEL_PRICES, get_price
from .config import GatewayConfig, get_gateway_config
from .gateway import send_request

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Envelope
    "APIInput",
    "Message",
    "Content",
    "Part",
    "Tool",
    "Function",
    "SafetySetting",
    "GenerationConfig",
    "ResponseFormat",
    # Response
    "APIResponse",
    "LlmUnifiedResponse",
    "LlmUsage",
    # Models & pricing
    "ModelId",
    "ProviderFamily",
    "MODEL_PRICES",
    "get_price",
    # Transmission
    "send_request",
    "Transport",
    "HttpxTransport",
    "GatewayConfig",
    "get_gateway_config",
    # Errors
    "ErrorCode",
    "GatewayError",
    "SerializationError",
    "AuthenticationError",
    "TransportError",
    "DecodeError",
    "UnknownModelError",
]
