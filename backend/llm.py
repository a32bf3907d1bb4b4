"""
llm.py
------
Thin LLM clients exposing a single `complete(prompt) -> str` method.

  GeminiClient   : google-genai; needs GEMINI_API_KEY
  StubLLMClient  : canned local-tips text, no network (USE_STUB_LLM=true)

get_llm_client() picks one from config.
"""

from __future__ import annotations

from google import genai
from google.genai import types as genai_types

import config

_SYSTEM_INSTRUCTION = (
    "You are an experienced local travel guide who provides insider knowledge "
    "and authentic recommendations. Focus on complementing existing tourist "
    "itineraries with local secrets and genuine experiences."
)


class GeminiClient:

    def __init__(self, api_key: str | None = None, model: str = config.LLM_MODEL_NAME) -> None:
        key = api_key or config.LLM_API_KEY
        if not key:
            raise RuntimeError("GEMINI_API_KEY missing")
        self.client = genai.Client(api_key=key)
        self.model = model

    def complete(self, prompt: str) -> str:
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=genai_types.GenerateContentConfig(
                system_instruction=_SYSTEM_INSTRUCTION,
                max_output_tokens=400,
                temperature=0.7,
            ),
        )

        if not response or not response.text:
            raise RuntimeError("Empty Gemini response")

        return response.text.strip()


class StubLLMClient:
    """Returns a fixed, well-structured answer regardless of the prompt."""

    def complete(self, prompt: str) -> str:
        return (
            "Locals love this city for its neighbourhood cafés and slow evenings.\n"
            "1. Walk the old market streets early, before the tour groups arrive\n"
            "2. Try the family-run bakery near the central square for breakfast\n"
            "3. Take the local tram line end to end for a cheap city tour\n"
            "- Book museum tickets online to skip the longest queues\n"
            "- Evenings: look for small live-music bars away from the main avenue\n"
        )


def get_llm_client():
    if config.USE_STUB_LLM:
        return StubLLMClient()
    return GeminiClient()
