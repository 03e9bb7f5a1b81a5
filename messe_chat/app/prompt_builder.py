#!/usr/bin/env python3
"""
Prompt builder module for the event chat assistant.

This module constructs prompts for the LLM from an assistant personality,
the topic context and the recent conversation.
"""

from typing import Dict, List, NamedTuple, Tuple

from ..utils.logger import get_logger

logger = get_logger()


class AssistantPersonality(NamedTuple):
    name: str
    system_prompt: str
    specialization: Tuple[str, ...]


PERSONALITIES: Dict[str, AssistantPersonality] = {
    "ucup": AssistantPersonality(
        name="Ucup",
        system_prompt="""You are Ucup, a warm and knowledgeable Indonesian business consultant for Paguyuban Messe 2026.
You're enthusiastic about connecting Indonesian and German businesses through this premier event.
You may use Indonesian phrases naturally but primarily communicate in the user's language.
Be specific with facts, numbers, and dates from the knowledge base.

CRITICAL GUIDELINES:
- Focus ONLY on Paguyuban Messe 2026 and Indonesian-German business relations
- Emphasize the AI-powered matchmaking and hybrid format benefits
- For sponsorship inquiries, guide them through the tiers from Bronze to Title
- Keep responses concise (max 2-3 paragraphs). Avoid repeating basic event facts unless directly asked
- For ROI questions: provide realistic percentages and specific matchmaking metrics
- If you need an exact figure, write [get:path.to.value] and it will be looked up for you""",
        specialization=("sponsorship", "business", "networking", "roi"),
    ),
    "rima": AssistantPersonality(
        name="Rima",
        system_prompt="""You are Rima, a professional cultural ambassador and strategic partnership specialist for Paguyuban Messe 2026.
You excel at explaining the unique value proposition of this Indonesia-Germany business and cultural expo.
You're detail-oriented and focus on strategic benefits and long-term partnerships.

CRITICAL GUIDELINES:
- Emphasize the dual nature: business by day, culture by night
- Discuss the six strategic sectors for collaboration
- Mention specific artists and cultural programs when relevant
- Always include specific dates, numbers, and concrete benefits
- If you need an exact figure, write [get:path.to.value] and it will be looked up for you""",
        specialization=("culture", "partnerships", "strategy", "program"),
    ),
}

DEFAULT_ASSISTANT = "ucup"


class PromptBuilder:
    """Builds prompts for the LLM with context and conversation history."""

    def personality(self, assistant_type: str) -> AssistantPersonality:
        personality = PERSONALITIES.get(assistant_type)
        if personality is None:
            logger.warning(f"Unknown assistant type: {assistant_type}. Falling back to '{DEFAULT_ASSISTANT}'.")
            personality = PERSONALITIES[DEFAULT_ASSISTANT]
        return personality

    def build_prompt(
        self,
        message: str,
        topic_context: str,
        history: List[Dict[str, str]],
        topic: str,
        language: str,
        assistant_type: str = DEFAULT_ASSISTANT,
    ) -> str:
        """
        Build the chat prompt.

        Args:
            message: Current user message
            topic_context: Resolved context block for the detected topic
            history: Recent turns as ``{"role", "content"}`` dicts
            topic: Detected topic
            language: Detected language code
            assistant_type: Personality key

        Returns:
            Prompt text
        """
        personality = self.personality(assistant_type)
        conversation = "\n".join(f"{turn['role']}: {turn['content']}" for turn in history)

        return f"""{personality.system_prompt}

SPECIFIC CONTEXT FOR THIS QUERY:
{topic_context}

CONVERSATION HISTORY:
{conversation}

USER MESSAGE: {message}
USER LANGUAGE PREFERENCE: {language}
DETECTED TOPIC: {topic}

Respond as {personality.name} with accurate, specific information. Include relevant numbers, dates, and concrete benefits. Keep response focused and actionable."""

    def build_follow_up_prompt(self, resolved_text: str) -> str:
        return (
            f"Here is the data you requested: {resolved_text}. "
            "Now, please provide the final, user-facing answer. Be precise and concise."
        )
