"""OpenAI Responses API client for nutrition, exercise and advice prompts."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from fit_tracker.services.estimation import EstimationClient


@dataclass
class OpenAIEstimationClient(EstimationClient):
    """Estimation client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIEstimationClient":
        """Create a client with its own HTTP connection pool."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete_json(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
    ) -> dict[str, object]:
        """Return the structured output for a prompt as a dict."""
        request = _request(model, reasoning_effort, store, prompt)
        request["text"] = {
            "format": {
                "type": "json_schema",
                "name": schema_name,
                "strict": True,
                "schema": schema,
            }
        }
        response = await self.client.responses.create(**request)
        if not response.output_text:
            raise RuntimeError(f"OpenAI returned no output for {schema_name}")
        return json.loads(response.output_text)

    async def complete_text(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        """Return a free-text answer, or an empty string."""
        request = _request(model, reasoning_effort, store, prompt)
        response = await self.client.responses.create(**request)
        return response.output_text or ""

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()


def _request(
    model: str, reasoning_effort: str | None, store: bool, prompt: str
) -> dict[str, object]:
    request: dict[str, object] = {"model": model, "input": prompt, "store": store}
    if reasoning_effort:
        request["reasoning"] = {"effort": reasoning_effort}
    return request
