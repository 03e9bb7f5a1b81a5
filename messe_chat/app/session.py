#!/usr/bin/env python3
"""
Session management module for the event chat assistant.

This module keeps per-session conversation history and the visitor profile
(topics of interest, language) in Redis, or in memory when Redis is not
configured or not reachable.
"""

import json
import redis
from typing import Dict, List, Any, Optional
from datetime import datetime
from .config import Config
from ..utils.logger import get_logger

logger = get_logger()


class SessionManager:
    """Manages chat sessions and conversation context."""

    def __init__(self, use_redis: Optional[bool] = None, max_messages: Optional[int] = None):
        """Initialize the session manager with Redis connection or fallback to in-memory."""
        if use_redis is None:
            use_redis = Config.SESSION_BACKEND == "redis"
        self.use_redis = use_redis
        self.max_messages = max_messages or Config.MAX_HISTORY_MESSAGES
        self.memory_sessions: Dict[str, Dict[str, Any]] = {}  # Fallback in-memory storage
        self.redis_client = None

        if self.use_redis:
            try:
                self.redis_client = redis.Redis(
                    host=Config.REDIS_HOST,
                    port=Config.REDIS_PORT,
                    db=Config.REDIS_DB,
                    decode_responses=True
                )
                # Test Redis connection
                self.redis_client.ping()
                logger.info("Using Redis for session storage")
            except redis.RedisError as e:
                logger.warning(f"Redis not available ({e}), using in-memory session storage")
                self.use_redis = False
                self.redis_client = None

    def _get_session_key(self, session_id: str) -> str:
        return f"session:{session_id}"

    def _new_session(self) -> Dict[str, Any]:
        now = datetime.now().isoformat()
        return {
            "messages": [],
            "interests": [],
            "language": "en",
            "created_at": now,
            "last_updated": now,
        }

    def _save(self, session_id: str, session_data: Dict[str, Any]) -> None:
        session_data["last_updated"] = datetime.now().isoformat()
        if self.use_redis:
            self.redis_client.set(self._get_session_key(session_id), json.dumps(session_data))
        else:
            self.memory_sessions[session_id] = session_data

    def create_session(self, session_id: str) -> bool:
        """
        Create a new session.

        Args:
            session_id: Unique session identifier

        Returns:
            True if session was created, False if it already exists
        """
        if self.get_session(session_id) is not None:
            return False
        self._save(session_id, self._new_session())
        return True

    def get_session(self, session_id: str) -> Optional[Dict[str, Any]]:
        """
        Retrieve session data.

        Args:
            session_id: Unique session identifier

        Returns:
            Session data or None if not found
        """
        if self.use_redis:
            session_data = self.redis_client.get(self._get_session_key(session_id))
            if session_data:
                return json.loads(session_data)
            return None
        return self.memory_sessions.get(session_id)

    def _get_or_create(self, session_id: str) -> Dict[str, Any]:
        session_data = self.get_session(session_id)
        if session_data is None:
            session_data = self._new_session()
        return session_data

    def add_message(self, session_id: str, role: str, content: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """
        Add a message to the session conversation history.

        Args:
            session_id: Unique session identifier
            role: Role of the message sender (user or assistant)
            content: Message text
            metadata: Optional topic/intent annotations
        """
        session_data = self._get_or_create(session_id)
        session_data["messages"].append({
            "role": role,
            "content": content,
            "timestamp": datetime.now().isoformat(),
            "metadata": metadata or {},
        })
        # Maintain history size
        session_data["messages"] = session_data["messages"][-self.max_messages:]
        self._save(session_id, session_data)

    def record_profile(self, session_id: str, topic: str, language: str) -> None:
        session_data = self._get_or_create(session_id)
        if topic not in session_data["interests"]:
            session_data["interests"].append(topic)
        session_data["language"] = language
        self._save(session_id, session_data)

    def get_recent_messages(self, session_id: str, max_messages: int = 4) -> List[Dict[str, Any]]:
        session_data = self.get_session(session_id)
        if not session_data:
            return []
        messages = session_data.get("messages", [])
        return messages[-max_messages:] if messages else []

    def clear_session(self, session_id: str) -> None:
        """Reset history and interests, keeping the session id usable."""
        self._save(session_id, self._new_session())
