"""Provider invocation.

The invoker owns transport: it encodes through the adapter, sends with
httpx, and decodes through the adapter again. Every failure is folded into
a ProviderOutcome here, so nothing raised by one provider can reach another
provider's call or the caller.
"""

import asyncio
import uuid
from typing import List, Mapping, Optional

import httpx

from ...models.chat import ChatRequest
from ...models.responses import ProviderOutcome
from ...observability.logging import ProviderLogger, redact_headers
from ...providers.base import ProviderAdapter
from ...providers.errors import ErrorTranslator
from ...providers.registry import ProviderRegistry


class Invoker:
    """Runs one call per requested provider and collects every outcome."""

    def __init__(
        self,
        registry: ProviderRegistry,
        timeout_s: float = 60.0,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Args:
            registry: Source of adapters for the requested provider ids
            timeout_s: Upper bound for each provider call, in seconds
            http_client: Shared client owned by the caller; when omitted a
                client is opened and closed per invocation
        """
        self.registry = registry
        self.timeout_s = timeout_s
        self.http_client = http_client

    async def invoke(
        self,
        request: ChatRequest,
        credentials: Mapping[str, str],
        request_id: Optional[str] = None
    ) -> List[ProviderOutcome]:
        """
        Invoke every provider named in the request.

        Returns:
            One outcome per requested provider, in the request's provider order
        """
        request_id = request_id or str(uuid.uuid4())[:8]
        adapters = [self.registry.get(pid) for pid in request.providers]

        if self.http_client is not None:
            return await self._invoke_all(self.http_client, adapters, request, credentials, request_id)

        async with httpx.AsyncClient(timeout=self.timeout_s) as client:
            return await self._invoke_all(client, adapters, request, credentials, request_id)

    async def _invoke_all(
        self,
        client: httpx.AsyncClient,
        adapters: List[ProviderAdapter],
        request: ChatRequest,
        credentials: Mapping[str, str],
        request_id: str
    ) -> List[ProviderOutcome]:
        if len(adapters) == 1:
            return [await self._invoke_one(client, adapters[0], request, credentials, request_id)]

        # Settle-all: return_exceptions keeps one failure from cancelling the rest
        results = await asyncio.gather(
            *(self._invoke_one(client, a, request, credentials, request_id) for a in adapters),
            return_exceptions=True
        )

        outcomes: List[ProviderOutcome] = []
        for adapter, result in zip(adapters, results):
            if isinstance(result, BaseException):
                error = ErrorTranslator.translate_exception(adapter.display_name, result)
                outcomes.append(ProviderOutcome.failed(adapter.provider_id, error))
            else:
                outcomes.append(result)
        return outcomes

    async def _invoke_one(
        self,
        client: httpx.AsyncClient,
        adapter: ProviderAdapter,
        request: ChatRequest,
        credentials: Mapping[str, str],
        request_id: str
    ) -> ProviderOutcome:
        logger = ProviderLogger(adapter.provider_id)

        api_key = credentials.get(adapter.provider_id)
        if not api_key:
            logger.warning("API key not configured", model=adapter.model, request_id=request_id)
            return ProviderOutcome.failed(
                adapter.provider_id, ErrorTranslator.not_configured(adapter.display_name)
            )

        with logger.track_request("chat", adapter.model, request_id=request_id) as request_info:
            try:
                encoded = adapter.encode(request, api_key)
                logger.debug(
                    "Sending request",
                    model=adapter.model,
                    request_id=request_id,
                    url=encoded.url,
                    headers=redact_headers(encoded.headers),
                    messages=len(request.messages),
                    max_tokens=adapter.token_limit(request),
                )
                response = await asyncio.wait_for(
                    client.post(encoded.url, headers=encoded.headers, json=encoded.body),
                    timeout=self.timeout_s
                )
            except Exception as e:
                error = ErrorTranslator.translate_exception(adapter.display_name, e)
                logger.warning(
                    "Upstream call did not complete",
                    model=adapter.model,
                    request_id=request_id,
                    **ErrorTranslator.get_error_classification(error)
                )
                request_info['status'] = "failed"
                return ProviderOutcome.failed(adapter.provider_id, error)

            outcome = adapter.decode(response)
            request_info['status'] = outcome.status.value
            if not outcome.ok:
                logger.warning(
                    "Upstream returned an error",
                    model=adapter.model,
                    request_id=request_id,
                    status_code=response.status_code,
                    category=outcome.error.kind.value,
                )
            return outcome
