"""CLI entry point for llm-chorus."""

import argparse
import asyncio
from typing import List, Optional

from .api.client import ChorusClient
from .models.responses import ErrorResponse
from .providers.errors import InvalidRequestError


async def chat(prompt: str, providers: Optional[List[str]] = None, policy: Optional[str] = None,
               creativity: Optional[float] = None, max_tokens: Optional[int] = None,
               system: Optional[str] = None) -> int:
    """Send one prompt and print the unified answer."""
    client = ChorusClient()

    options = {}
    if max_tokens is not None:
        options['maxTokens'] = max_tokens
    if creativity is not None:
        options['creativity'] = creativity
    if system:
        options['systemPrompt'] = system
    if policy:
        options['synthesis'] = policy

    body = {"messages": [{"role": "user", "content": prompt}], "options": options}
    if providers:
        body["providers"] = providers

    try:
        result = await client.chat(body)
    except InvalidRequestError as e:
        print(f"Error: {e.message}")
        return 2

    if isinstance(result, ErrorResponse):
        print(f"Error: {result.error}")
        if result.details:
            print(f"Details: {result.details}")
        return 1

    print(result.text)
    return 0


def list_providers() -> int:
    """List registered providers and whether each has a key."""
    client = ChorusClient()

    print("Providers:")
    print("-" * 50)
    for provider_id, info in client.provider_status().items():
        status = "✓" if info["configured"] else "✗"
        print(f"{status} {info['display_name']} ({provider_id})")
        print(f"   model: {info['model']}")
    print()
    print(f"Synthesis policies: {', '.join(client.synthesizer.list_policies())}")
    return 0


def main() -> int:
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="llm-chorus CLI")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    chat_parser = subparsers.add_parser('chat', help='Ask one or several providers')
    chat_parser.add_argument('prompt', help='Text prompt')
    chat_parser.add_argument('--provider', '-p', action='append', dest='providers',
                             help='Provider id or alias; repeat to fan out')
    chat_parser.add_argument('--policy', help='Synthesis policy for multiple providers')
    chat_parser.add_argument('--creativity', type=float, help='Creativity (0-100)')
    chat_parser.add_argument('--max-tokens', type=int, help='Maximum tokens to generate')
    chat_parser.add_argument('--system', help='System prompt')

    subparsers.add_parser('providers', help='List providers and key status')

    args = parser.parse_args()

    if args.command == 'chat':
        return asyncio.run(chat(
            args.prompt,
            args.providers,
            args.policy,
            args.creativity,
            args.max_tokens,
            args.system,
        ))
    elif args.command == 'providers':
        return list_providers()

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
