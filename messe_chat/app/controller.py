"""Controller / Orchestrator for chat turns.

Detects intent and language, renders the topic context from the composed
knowledge, asks the LLM when one is configured and falls back to templated
replies otherwise. A turn never fails: the last resort is a contact apology.
"""
import asyncio
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from .config import Config
from .generate import GenerationClient, GenerationError
from .prompt_builder import DEFAULT_ASSISTANT, PromptBuilder
from .session import SessionManager
from ..knowledge.builder import KnowledgeBuilder, get_knowledge_builder
from ..knowledge.resolver import resolve_template
from ..knowledge.templates import (
    CONTACT_APOLOGY,
    FOLLOW_UP,
    SMART_RESPONSES,
    SUGGESTED_QUESTIONS,
    TOPIC_CONTEXTS,
)
from ..nlu.rules import GENERAL_TOPIC, detect_intent, detect_language, detect_topic
from ..schemas.io_models import ConversationSummary, IntentResult
from ..utils.logger import get_logger

logger = get_logger()


class ChatController:
    def __init__(
        self,
        builder: Optional[KnowledgeBuilder] = None,
        session_manager: Optional[SessionManager] = None,
        generation_client: Optional[GenerationClient] = None,
    ):
        self.builder = builder or get_knowledge_builder()
        self.session_manager = session_manager or SessionManager()
        self.prompt_builder = PromptBuilder()
        self.generation_client = generation_client
        if self.generation_client is None and Config.llm_enabled():
            try:
                self.generation_client = GenerationClient()
            except ValueError as e:
                logger.warning(f"LLM disabled: {e}")

    def topic_context(self, topic: str, knowledge: Dict[str, Any]) -> str:
        template = TOPIC_CONTEXTS.get(topic, TOPIC_CONTEXTS[GENERAL_TOPIC])
        return resolve_template(template, knowledge)

    def smart_response(self, topic: str, language: str, knowledge: Dict[str, Any]) -> Optional[str]:
        responses = SMART_RESPONSES.get(topic)
        if not responses:
            return None
        template = responses.get(language) or responses["en"]
        return resolve_template(template, knowledge)

    def fallback_reply(self, message: str, topic: str, language: str, assistant_type: str,
                       knowledge: Dict[str, Any]) -> str:
        reply = self.smart_response(topic, language, knowledge)
        if reply:
            return reply
        reply = self.smart_response(detect_topic(message), language, knowledge)
        if reply:
            return reply
        apology = CONTACT_APOLOGY.get(assistant_type, CONTACT_APOLOGY[DEFAULT_ASSISTANT])
        return resolve_template(apology, knowledge)

    async def _generate(self, message: str, result: IntentResult, language: str, assistant_type: str,
                        history: List[Dict[str, Any]], knowledge: Dict[str, Any]) -> str:
        prompt = self.prompt_builder.build_prompt(
            message=message,
            topic_context=self.topic_context(result.topic, knowledge),
            history=history,
            topic=result.topic,
            language=language,
            assistant_type=assistant_type,
        )
        text = await asyncio.to_thread(self.generation_client.generate_answer, prompt)

        # The model may ask for concrete data via [get:...]; resolve it and re-ask once.
        if text and "[get:" in text:
            resolved = resolve_template(text, knowledge)
            follow_up = self.prompt_builder.build_follow_up_prompt(resolved)
            text = await asyncio.to_thread(
                self.generation_client.generate_answer, follow_up, 0.3, 400
            )
        return text

    async def chat(self, session_id: str, message: str,
                   assistant_type: str = DEFAULT_ASSISTANT) -> Tuple[str, IntentResult]:
        result = detect_intent(message)
        language = detect_language(message)
        logger.info(f"Chat turn session={session_id} intent={result.intent} topic={result.topic} lang={language}")

        self.session_manager.record_profile(session_id, result.topic, language)
        self.session_manager.add_message(
            session_id, "user", message, {"topic": result.topic, "intent": result.intent}
        )

        knowledge = await self.builder.build_knowledge()

        reply = None
        confidence = 1.0
        if self.generation_client is not None:
            history = self.session_manager.get_recent_messages(session_id, Config.PROMPT_HISTORY_TURNS)
            try:
                reply = await self._generate(message, result, language, assistant_type, history, knowledge)
            except GenerationError as e:
                logger.warning(f"LLM generation failed, using templated reply: {e}")

        if not reply:
            reply = self.fallback_reply(message, result.topic, language, assistant_type, knowledge)
            confidence = 0.8

        self.session_manager.add_message(
            session_id, "assistant", reply, {"topic": result.topic, "confidence": confidence}
        )
        return reply, result

    def suggested_questions(self, session_id: str) -> List[str]:
        session = self.session_manager.get_session(session_id) or {}
        interests = session.get("interests") or []
        topic = interests[-1] if interests else GENERAL_TOPIC
        return list(SUGGESTED_QUESTIONS.get(topic, SUGGESTED_QUESTIONS[GENERAL_TOPIC]))

    async def conversation_summary(self, session_id: str) -> ConversationSummary:
        session = self.session_manager.get_session(session_id) or {}
        messages = session.get("messages", [])

        duration = 0
        if session.get("created_at"):
            started = datetime.fromisoformat(session["created_at"])
            duration = max(0, int((datetime.now() - started).total_seconds()))

        topics: List[str] = []
        for msg in messages:
            topic = (msg.get("metadata") or {}).get("topic")
            if topic and topic not in topics:
                topics.append(topic)

        knowledge = await self.builder.build_knowledge()
        return ConversationSummary(
            duration=duration,
            topics=topics,
            message_count=len(messages),
            language=session.get("language", "en"),
            suggested_follow_up=resolve_template(FOLLOW_UP, knowledge),
        )

    def clear(self, session_id: str) -> None:
        self.session_manager.clear_session(session_id)
