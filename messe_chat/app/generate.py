#!/usr/bin/env python3
"""
Generation module for the event chat assistant.

This module handles answer generation using the Gemini LLM API.
"""

import requests
from typing import Optional
from .config import Config
from ..utils.logger import get_logger

logger = get_logger()


class GenerationError(Exception):
    """Raised when the LLM call fails or returns an unusable payload."""


class GenerationClient:
    """Client for generating answers using Gemini LLM API."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """Initialize the generation client."""
        self.api_key = api_key or Config.GEMINI_API_KEY
        self.llm_model = model or Config.GEMINI_MODEL
        self.api_base_url = f"https://generativelanguage.googleapis.com/v1beta/models/{self.llm_model}:generateContent"

        if not self.api_key:
            raise ValueError("Gemini API key is required")

    def generate_answer(self, prompt: str, temperature: float = 0.7, max_output_tokens: int = 600) -> str:
        """
        Generate an answer using the Gemini LLM.

        Args:
            prompt: Formatted prompt for the LLM
            temperature: Sampling temperature
            max_output_tokens: Upper bound on the reply length

        Returns:
            Generated answer text
        """
        logger.debug(f"Generating answer with {self.llm_model}, prompt length: {len(prompt)}")

        payload = {
            "contents": [
                {
                    "parts": [
                        {
                            "text": prompt
                        }
                    ]
                }
            ],
            "generationConfig": {
                "temperature": temperature,
                "topK": 40,
                "topP": 0.95,
                "maxOutputTokens": max_output_tokens,
            }
        }

        try:
            response = requests.post(
                f"{self.api_base_url}?key={self.api_key}",
                json=payload,
                timeout=60
            )
            response.raise_for_status()
            data = response.json()

            # Extract answer from Gemini response
            if "candidates" in data and len(data["candidates"]) > 0:
                answer = data["candidates"][0]["content"]["parts"][0]["text"].strip()
            else:
                raise KeyError("No candidates found in response")
            logger.debug(f"Extracted answer, length: {len(answer)}")
            return answer

        except requests.exceptions.RequestException as e:
            raise GenerationError(f"Error generating answer: {str(e)}") from e
        except (KeyError, IndexError, ValueError) as e:
            raise GenerationError(f"Error parsing generation response: {str(e)}") from e
