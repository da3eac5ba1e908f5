"""
Response normalization module.

Folds the invoker's outcome set into the single response shape callers see,
whether one provider or several were involved.
"""

from typing import Mapping, Optional, Sequence, Union

from ...models.responses import ErrorResponse, ProviderOutcome, UnifiedResponse
from ...providers.errors import ErrorTranslator
from ..synthesis.synthesizer import Synthesizer


class ResponseNormalizer:
    """Builds a UnifiedResponse (or ErrorResponse) from provider outcomes."""

    def __init__(self, synthesizer: Optional[Synthesizer] = None):
        self.synthesizer = synthesizer or Synthesizer()

    def normalize(
        self,
        outcomes: Sequence[ProviderOutcome],
        display_names: Mapping[str, str],
        policy: Optional[str] = None
    ) -> Union[UnifiedResponse, ErrorResponse]:
        """
        Args:
            outcomes: One outcome per requested provider, in caller order
            display_names: Provider id to human-readable name
            policy: Synthesis policy override for multi-provider requests

        Returns:
            UnifiedResponse for any multi-provider request and for a
            successful single-provider request; ErrorResponse carrying the
            translated error when the only provider failed.
        """
        if not outcomes:
            raise ValueError("normalize() needs at least one outcome")

        if len(outcomes) == 1:
            outcome = outcomes[0]
            if outcome.ok:
                return UnifiedResponse.from_text(outcome.text)
            name = display_names.get(outcome.provider_id, outcome.provider_id)
            return ErrorResponse(
                error=ErrorTranslator.user_message_for(outcome.error, name),
                details=outcome.error.message,
                status_code=ErrorTranslator.http_status_for(outcome.error),
            )

        text = self.synthesizer.synthesize(outcomes, display_names, policy)
        return UnifiedResponse.from_text(text)
