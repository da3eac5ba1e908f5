"""
Answer synthesis for multi-provider requests.

Policies combine provider texts structurally (ordering, labeling, line
extraction) and never look at what the text says. Every requested provider
appears in the output; failed ones as an unavailability marker.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from ...config.constants import UNAVAILABLE_PLACEHOLDER
from ...models.responses import ProviderOutcome

logger = logging.getLogger(__name__)

EXTRACTIVE_PREAMBLE = "Here are the key points gathered from each provider:"
EXTRACTIVE_LINES_PER_PROVIDER = 3


@dataclass
class SynthesisEntry:
    """One provider's contribution, in caller order."""
    provider_id: str
    name: str
    text: Optional[str]

    @property
    def available(self) -> bool:
        return self.text is not None and bool(self.text.strip())

    @property
    def placeholder(self) -> str:
        return UNAVAILABLE_PLACEHOLDER.format(name=self.name)

    def body(self) -> str:
        return self.text if self.available else self.placeholder


SynthesisPolicy = Callable[[Sequence[SynthesisEntry]], str]


def labeled_concatenation(entries: Sequence[SynthesisEntry]) -> str:
    """Each provider's text under a heading naming it, in caller order."""
    return "\n\n".join(f"**{e.name}:**\n{e.body()}" for e in entries)


def longest_first(entries: Sequence[SynthesisEntry]) -> str:
    """Longest answer first, the rest as additional insights.

    Ties keep caller order. Unavailability markers go last.
    """
    available = sorted(
        (e for e in entries if e.available),
        key=lambda e: len(e.text),
        reverse=True,
    )
    parts: List[str] = []
    if available:
        parts.append(available[0].text)
        for entry in available[1:]:
            parts.append(f"**Additional insights from {entry.name}:**\n{entry.text}")
    parts.extend(e.placeholder for e in entries if not e.available)
    return "\n\n".join(parts)


def _leading_lines(entry: SynthesisEntry, limit: int) -> List[str]:
    if not entry.available:
        return [entry.placeholder]
    lines = [line.strip() for line in entry.text.splitlines() if line.strip()]
    return lines[:limit] or [entry.placeholder]


def extractive_points(entries: Sequence[SynthesisEntry]) -> str:
    """First lines of each provider, interleaved as bullet points."""
    per_provider = [_leading_lines(e, EXTRACTIVE_LINES_PER_PROVIDER) for e in entries]

    bullets: List[str] = []
    for index in range(EXTRACTIVE_LINES_PER_PROVIDER):
        for lines in per_provider:
            if index < len(lines):
                bullets.append(f"- {lines[index]}")

    return EXTRACTIVE_PREAMBLE + "\n\n" + "\n".join(bullets)


BUILTIN_POLICIES: Dict[str, SynthesisPolicy] = {
    "labeled": labeled_concatenation,
    "longest_first": longest_first,
    "extractive_points": extractive_points,
}


class Synthesizer:
    """Combines several provider outcomes into one answer."""

    def __init__(self, default_policy: str = "labeled"):
        self._policies: Dict[str, SynthesisPolicy] = dict(BUILTIN_POLICIES)
        if default_policy not in self._policies:
            raise ValueError(
                f"Unknown synthesis policy '{default_policy}'. "
                f"Available: {', '.join(self._policies)}"
            )
        self.default_policy = default_policy

    def register_policy(self, name: str, policy: SynthesisPolicy) -> None:
        if name in self._policies:
            raise ValueError(f"Synthesis policy '{name}' already registered")
        self._policies[name] = policy

    def has_policy(self, name: str) -> bool:
        return name in self._policies

    def list_policies(self) -> List[str]:
        return list(self._policies.keys())

    def synthesize(
        self,
        outcomes: Sequence[ProviderOutcome],
        display_names: Mapping[str, str],
        policy: Optional[str] = None,
    ) -> str:
        """
        Combine outcomes using the named policy.

        Args:
            outcomes: One outcome per requested provider, in caller order
            display_names: Provider id to human-readable name
            policy: Policy name; the default policy when omitted

        Returns:
            The synthesized answer text
        """
        name = policy or self.default_policy
        if name not in self._policies:
            raise ValueError(f"Unknown synthesis policy '{name}'")

        entries = [
            SynthesisEntry(
                provider_id=o.provider_id,
                name=display_names.get(o.provider_id, o.provider_id),
                text=o.text if o.ok else None,
            )
            for o in outcomes
        ]
        logger.debug(
            f"Synthesizing {len(entries)} outcomes with policy '{name}' "
            f"({sum(1 for e in entries if e.available)} available)"
        )
        return self._policies[name](entries)
