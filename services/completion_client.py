"""
Completion client - issues single text-completion requests to OpenAI
"""

import functools
from typing import Callable, Optional
from openai import AsyncOpenAI, OpenAIError

# Local imports
from services.exceptions import CompletionFailed


def create_openai_client(api_key: str, timeout_s: float, base_url: Optional[str] = None) -> AsyncOpenAI:
    """
    Builds an SDK client. Retries are disabled so that every workflow call
    makes exactly one request.
    """
    return AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout_s, max_retries=0)


def openai_client_factory(api_key: str, timeout_s: float, base_url: Optional[str] = None) -> Callable[[], AsyncOpenAI]:
    return functools.partial(create_openai_client, api_key, timeout_s, base_url)


class CompletionClient:
    """
    Thin wrapper around the chat completions endpoint.

    A fresh SDK client is opened and closed for every call, so its connection
    pool never outlives the event loop that awaited it. Flask routes run each
    workflow in its own asyncio.run loop.
    """

    def __init__(self, client_factory: Callable[[], AsyncOpenAI], model_name: str, api_parameters: Optional[dict] = None):
        self.client_factory = client_factory
        self.model_name = model_name
        self.api_parameters = api_parameters or {}

    async def complete(self, prompt: str, json_mode: bool = False) -> str:
        """
        Sends one prompt and returns the raw content of the first choice.

        Args:
            prompt: The fully rendered prompt
            json_mode: Ask the provider for a JSON object response

        Returns:
            The completion text, or an empty string when the provider sent no content

        Raises:
            CompletionFailed: The provider call failed for any reason
        """
        request = {
            "model": self.model_name,
            "messages": [{"role": "user", "content": prompt}],
            **self.api_parameters,
        }
        if json_mode:
            request["response_format"] = {"type": "json_object"}

        try:
            async with self.client_factory() as client:
                response = await client.chat.completions.create(**request)
        except OpenAIError as e:
            print(f"❌ Completion request failed: {str(e)}")
            raise CompletionFailed(str(e)) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
