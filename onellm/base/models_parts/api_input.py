"""
APIInput: the unified request envelope sent to the gateway.

One envelope shape serves every provider family. Its fields fall into three
tiers:

* always present: ``endpoint``, ``model``, ``messages``, ``max_tokens``,
  ``top_p``;
* defaulted and always emitted: ``temperature`` (1.0), ``stream`` (False);
* optional and provider-specific: absent (``None``) until explicitly set and
  omitted from the wire document while absent.

``None`` is the absence marker. Zero and empty values (``seed=0``,
``top_k=0``, ``stop_sequences=[]``) count as set and are emitted, so they stay
distinguishable from "never set".

No check ties the populated optional fields to the model's provider family;
the gateway enforces that. When both conversation shapes are populated the
gateway uses ``contents`` (and ``generation_config``) for Gemini-family models
and ``messages`` (and the top-level sampling fields) otherwise;
:meth:`APIInput.active_shape` reports which one applies.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Literal, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from ...config.defaults import DEFAULT_STREAM, DEFAULT_TEMPERATURE, DEFAULT_TOP_P
from ..errors import SerializationError
from .generation_config import GenerationConfig, SafetySetting
from .message import Content, Message
from .model_id import ModelId, ProviderFamily
from .response_format import ResponseFormat
from .tool import Tool

if TYPE_CHECKING:
    from ...config import GatewayConfig
    from ..http.transport import Transport
    from .api_response import APIResponse


ALWAYS_PRESENT_FIELDS = ("endpoint", "model", "temperature", "stream", "messages", "max_tokens", "top_p")

OPTIONAL_FIELDS = (
    "stop_sequences",
    "tools",
    "contents",
    "safety_settings",
    "generation_config",
    "frequency_penalty",
    "presence_penalty",
    "n",
    "response_format",
    "seed",
    "tool_choice",
    "user",
    "logprobs",
    "top_logprobs",
    "system",
    "top_k",
)

# Fields only Gemini-family providers read.
GEMINI_FIELDS = ("contents", "safety_settings", "generation_config")

ConversationShape = Literal["messages", "contents"]

# Count-like fields are unsigned 32-bit on the gateway side.
UINT32_MAX = 2**32 - 1


class APIInput(BaseModel):
    """Unified request envelope.

    Build with :meth:`create`, adjust optional fields with the ``set_*``
    methods (or plain attribute assignment, which is validated the same way),
    then serialize with :meth:`to_wire` / :meth:`to_json` or transmit with
    :meth:`send`.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True, allow_inf_nan=False)

    # Always present
    endpoint: str
    model: ModelId
    temperature: float = DEFAULT_TEMPERATURE
    stream: bool = DEFAULT_STREAM
    messages: List[Message]
    max_tokens: int = Field(..., ge=0, le=UINT32_MAX, strict=True)
    top_p: float = DEFAULT_TOP_P

    # Optional, provider-specific
    stop_sequences: Optional[List[str]] = None
    tools: Optional[List[Tool]] = None

    contents: Optional[List[Content]] = None
    safety_settings: Optional[List[SafetySetting]] = None
    generation_config: Optional[GenerationConfig] = None

    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None

    n: Optional[int] = Field(default=None, ge=0, le=UINT32_MAX, strict=True)
    response_format: Optional[ResponseFormat] = None
    seed: Optional[int] = Field(default=None, ge=0, le=UINT32_MAX, strict=True)
    tool_choice: Optional[str] = None
    user: Optional[str] = None

    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = Field(default=None, ge=0, le=UINT32_MAX, strict=True)

    system: Optional[str] = None
    top_k: Optional[int] = Field(default=None, ge=0, le=UINT32_MAX, strict=True)

    @classmethod
    def create(
        cls,
        endpoint: str,
        model: Union[ModelId, str],
        messages: Sequence[Union[Message, Mapping[str, Any]]],
        max_tokens: int,
    ) -> "APIInput":
        """Build an envelope from the mandatory tier with defaults applied.

        ``model`` may be a :class:`ModelId` or its wire string; an unknown
        string fails validation. No other consistency check is made.
        """
        return cls(endpoint=endpoint, model=model, messages=list(messages), max_tokens=max_tokens)

    # ------------------------------------------------------------------
    # Setters (last write wins; each returns self for chaining)
    # ------------------------------------------------------------------

    def set_temperature(self, temperature: float) -> "APIInput":
        self.temperature = temperature
        return self

    def set_top_p(self, top_p: float) -> "APIInput":
        self.top_p = top_p
        return self

    def set_stream(self, stream: bool) -> "APIInput":
        self.stream = stream
        return self

    def set_stop_sequences(self, sequences: Sequence[str]) -> "APIInput":
        self.stop_sequences = list(sequences)
        return self

    def set_tools(self, tools: Sequence[Union[Tool, Mapping[str, Any]]]) -> "APIInput":
        self.tools = list(tools)
        return self

    def set_contents(self, contents: Sequence[Union[Content, Mapping[str, Any]]]) -> "APIInput":
        """Set the Gemini-style conversation (kept alongside ``messages``)."""
        self.contents = list(contents)
        return self

    def set_safety_settings(self, settings: Sequence[Union[SafetySetting, Mapping[str, Any]]]) -> "APIInput":
        self.safety_settings = list(settings)
        return self

    def set_generation_config(self, config: Union[GenerationConfig, Mapping[str, Any]]) -> "APIInput":
        self.generation_config = config
        return self

    def set_frequency_penalty(self, penalty: float) -> "APIInput":
        self.frequency_penalty = penalty
        return self

    def set_presence_penalty(self, penalty: float) -> "APIInput":
        self.presence_penalty = penalty
        return self

    def set_n(self, n: int) -> "APIInput":
        self.n = n
        return self

    def set_response_format(self, response_format: Union[ResponseFormat, str]) -> "APIInput":
        """Accepts a :class:`ResponseFormat` or its bare type string."""
        if isinstance(response_format, str):
            response_format = ResponseFormat(type=response_format)
        self.response_format = response_format
        return self

    def set_seed(self, seed: int) -> "APIInput":
        self.seed = seed
        return self

    def set_tool_choice(self, tool_choice: str) -> "APIInput":
        self.tool_choice = tool_choice
        return self

    def set_user(self, user: str) -> "APIInput":
        self.user = user
        return self

    def set_logprobs(self, logprobs: bool) -> "APIInput":
        self.logprobs = logprobs
        return self

    def set_top_logprobs(self, top_logprobs: int) -> "APIInput":
        self.top_logprobs = top_logprobs
        return self

    def set_system(self, system: str) -> "APIInput":
        self.system = system
        return self

    def set_top_k(self, top_k: int) -> "APIInput":
        self.top_k = top_k
        return self

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def present_optional_fields(self) -> List[str]:
        """Names of optional fields currently set, in wire order."""
        return [name for name in OPTIONAL_FIELDS if getattr(self, name) is not None]

    def active_shape(self) -> ConversationShape:
        """Conversation shape the gateway will read for this envelope."""
        if self.model.family is ProviderFamily.GEMINI and self.contents is not None:
            return "contents"
        return "messages"

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def _absent_fields(self) -> set[str]:
        return {name for name in OPTIONAL_FIELDS if getattr(self, name) is None}

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-ready wire document.

        Always-present and defaulted keys are emitted unconditionally; optional
        keys only when set. Nested values (tool parameter schemas included)
        are emitted verbatim.

        Raises:
            SerializationError: A value cannot be represented as JSON.
        """
        try:
            return self.model_dump(mode="json", exclude=self._absent_fields())
        except (TypeError, ValueError) as e:
            raise SerializationError(message=f"failed to serialize envelope: {e}", model=self.model.value, raw=e) from e

    def to_json(self) -> bytes:
        """Return the compact UTF-8 JSON body for transmission.

        Raises:
            SerializationError: A value cannot be represented as JSON.
        """
        try:
            return self.model_dump_json(exclude=self._absent_fields()).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(message=f"failed to serialize envelope: {e}", model=self.model.value, raw=e) from e

    # ------------------------------------------------------------------
    # Transmission
    # ------------------------------------------------------------------

    def send(
        self,
        api_key: Optional[str] = None,
        *,
        transport: Optional["Transport"] = None,
        config: Optional["GatewayConfig"] = None,
    ) -> "APIResponse":
        """Transmit this envelope; see :func:`onellm.gateway.client.send_request`."""
        # Local import: the gateway layer depends on this module.
        from ...gateway.client import send_request

        return send_request(self, api_key, transport=transport, config=config)


__all__ = [
    "APIInput",
    "ALWAYS_PRESENT_FIELDS",
    "OPTIONAL_FIELDS",
    "GEMINI_FIELDS",
    "ConversationShape",
    "UINT32_MAX",
]
