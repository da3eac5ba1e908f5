"""Main client interface for llm-chorus."""

import logging
import uuid
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import httpx

from ..config.settings import ChorusSettings, load_credentials, load_settings
from ..core.invocation import Invoker
from ..core.normalization import ResponseNormalizer, normalize_request
from ..core.synthesis import Synthesizer
from ..models.chat import ChatMessage, ChatOptions, ChatRequest
from ..models.responses import ErrorResponse, UnifiedResponse
from ..providers.errors import InvalidRequestError
from ..providers.registry import ProviderRegistry, create_default_registry

logger = logging.getLogger(__name__)

PING_MESSAGE = "ping"
PONG_MESSAGE = "pong"
PROBE_PROMPT = "Hello"
PROBE_MAX_TOKENS = 10


class ChorusClient:
    """High-level client: one call in, one normalized response out."""

    def __init__(
        self,
        settings: Optional[ChorusSettings] = None,
        credentials: Optional[Mapping[str, str]] = None,
        registry: Optional[ProviderRegistry] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the client.

        Args:
            settings: Runtime settings (loaded from the environment if omitted)
            credentials: Provider id to API key (loaded from the environment
                if omitted)
            registry: Provider registry (built-in adapters if omitted)
            http_client: Optional shared httpx client for upstream calls
        """
        self.settings = settings or load_settings()
        self.credentials: Dict[str, str] = dict(
            credentials if credentials is not None else load_credentials()
        )
        self.registry = registry or create_default_registry(self.settings)
        self.synthesizer = Synthesizer(self.settings.synthesis_policy)
        self.invoker = Invoker(self.registry, self.settings.timeout_s, http_client)
        self.response_normalizer = ResponseNormalizer(self.synthesizer)

    def prepare(self, body: Any) -> ChatRequest:
        """Validate a raw body into a ChatRequest.

        Raises:
            InvalidRequestError: If the body is unusable
        """
        request = normalize_request(body, self.settings.defaults, self.registry)
        policy = request.options.synthesis_policy
        if policy and not self.synthesizer.has_policy(policy):
            raise InvalidRequestError(
                f"Unknown synthesis policy '{policy}'. "
                f"Available: {', '.join(self.synthesizer.list_policies())}"
            )
        return request

    async def chat(self, body: Any) -> Union[UnifiedResponse, ErrorResponse]:
        """
        Run a chat request end to end.

        Args:
            body: Decoded JSON request body

        Returns:
            UnifiedResponse, or ErrorResponse when a single provider failed

        Raises:
            InvalidRequestError: If the body fails validation
        """
        request = self.prepare(body)
        if self._is_ping(body, request):
            return UnifiedResponse.from_text(PONG_MESSAGE)
        return await self.complete(request)

    def _is_ping(self, body: Any, request: ChatRequest) -> bool:
        """Connectivity check: a lone, verbatim "ping" message with keys present.

        Padded text is an ordinary prompt. Without a key for every requested
        provider the request goes on to report ProviderNotConfigured.
        """
        raw = body.get("messages")
        if len(raw) != 1 or not isinstance(raw[0], dict):
            return False
        if raw[0].get("content") != PING_MESSAGE:
            return False
        return all(self.credentials.get(p) for p in request.providers)

    async def complete(self, request: ChatRequest) -> Union[UnifiedResponse, ErrorResponse]:
        """Invoke providers for an already validated request."""
        request_id = str(uuid.uuid4())[:8]
        logger.info(
            f"[request_id={request_id}] chat providers={','.join(request.providers)} "
            f"messages={len(request.messages)}"
        )
        outcomes = await self.invoker.invoke(request, self.credentials, request_id=request_id)
        return self.response_normalizer.normalize(
            outcomes,
            self.registry.display_names(),
            request.options.synthesis_policy
        )

    def provider_status(self) -> Dict[str, Dict[str, Any]]:
        """Registered providers with their model and whether a key is present."""
        status = {}
        for provider_id in self.registry.list_providers():
            adapter = self.registry.get(provider_id)
            status[provider_id] = {
                "display_name": adapter.get_provider_name(),
                "model": adapter.model,
                "configured": bool(self.credentials.get(provider_id)),
            }
        return status

    async def probe(self, provider_ids: Optional[Iterable[str]] = None) -> Dict[str, Dict[str, Any]]:
        """
        Send a minimal request to each configured provider.

        Args:
            provider_ids: Providers to probe (all configured ones if omitted)

        Returns:
            Per-provider dict with `status` ("ok" / "error") and `detail`;
            failures add `kind` and, when a response arrived, `status_code`
        """
        if provider_ids is None:
            targets: List[str] = [p for p in self.registry.list_providers() if self.credentials.get(p)]
        else:
            targets = [self.registry.resolve(p) for p in provider_ids]

        if not targets:
            return {}

        request = ChatRequest(
            messages=[ChatMessage(content=PROBE_PROMPT)],
            options=ChatOptions(
                max_tokens=PROBE_MAX_TOKENS,
                temperature=self.settings.defaults.temperature,
            ),
            providers=targets,
        )
        outcomes = await self.invoker.invoke(request, self.credentials)

        report: Dict[str, Dict[str, Any]] = {}
        for outcome in outcomes:
            if outcome.ok:
                report[outcome.provider_id] = {"status": "ok", "detail": "Connection successful"}
            else:
                report[outcome.provider_id] = {
                    "status": "error",
                    "kind": outcome.error.kind.value,
                    "detail": outcome.error.raw_detail or outcome.error.message,
                }
                if outcome.error.status_code is not None:
                    report[outcome.provider_id]["status_code"] = outcome.error.status_code
        return report
