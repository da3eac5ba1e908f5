"""
Example: Asking several providers at once

Sends the same question to Anthropic, Google and Groq and prints the
combined answer under each synthesis policy. Providers without an API key
in the environment show up as unavailable.
"""

import asyncio

from llm_chorus import ChorusClient


async def example_fan_out():
    """One request, three providers, three ways to combine the answers."""
    client = ChorusClient()

    for policy in client.synthesizer.list_policies():
        print(f"=== {policy} ===\n")
        result = await client.chat({
            "messages": [{"role": "user", "content": "Name one benefit of type hints."}],
            "options": {"maxTokens": 200, "creativity": 30, "synthesis": policy},
            "providers": ["anthropic", "google", "groq"],
        })
        print(result.text)
        print()


async def example_single_provider_error():
    """A single-provider failure comes back as an ErrorResponse."""
    client = ChorusClient(credentials={})

    result = await client.chat({
        "messages": [{"role": "user", "content": "Hello"}],
        "options": {},
        "ai": "gemini",
    })
    print(f"{result.status_code}: {result.error}")


if __name__ == "__main__":
    asyncio.run(example_fan_out())
    asyncio.run(example_single_provider_error())
