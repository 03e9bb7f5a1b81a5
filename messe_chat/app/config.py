#!/usr/bin/env python3
"""
Configuration management for the event chat backend.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")


class Config:
    """Configuration class for the application."""

    # Database holding the knowledge overlay records
    DATABASE_URL = os.getenv(
        "DATABASE_URL", f"sqlite:///{os.path.abspath(os.path.join(_DATA_DIR, 'messe.db'))}"
    )

    # File overlays
    KNOWLEDGE_DOCS_DIR = os.getenv("KNOWLEDGE_DOCS_DIR", os.path.join(os.getcwd(), "public", "docs"))
    KNOWLEDGE_JSON_FILE = os.getenv("KNOWLEDGE_JSON_FILE", "knowledge.json")
    KNOWLEDGE_CSV_FILE = os.getenv("KNOWLEDGE_CSV_FILE", "knowledge.csv")

    # Cache windows (seconds)
    OVERLAY_CACHE_TTL_SEC = float(os.getenv("OVERLAY_CACHE_TTL_SEC", 300))
    OVERLAY_MISS_TTL_SEC = float(os.getenv("OVERLAY_MISS_TTL_SEC", 60))
    KNOWLEDGE_CACHE_TTL_SEC = float(os.getenv("KNOWLEDGE_CACHE_TTL_SEC", 300))

    # Gemini (Google) API Configuration
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    USE_LLM = os.getenv("USE_LLM", "false").lower() in ("1", "true", "yes")

    # Session storage (memory|redis)
    SESSION_BACKEND = os.getenv("SESSION_BACKEND", "memory").lower()
    REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT = int(os.getenv("REDIS_PORT", 6379))
    REDIS_DB = int(os.getenv("REDIS_DB", 0))

    # Application Configuration
    MAX_HISTORY_MESSAGES = int(os.getenv("MAX_HISTORY_MESSAGES", 12))
    PROMPT_HISTORY_TURNS = 4

    @classmethod
    def llm_enabled(cls) -> bool:
        has_real_key = bool(cls.GEMINI_API_KEY) and cls.GEMINI_API_KEY not in ("test", "dev")
        return cls.USE_LLM or has_real_key

    @classmethod
    def validate(cls):
        """Validate that the configuration is usable."""
        problems = []

        for name in ("OVERLAY_CACHE_TTL_SEC", "OVERLAY_MISS_TTL_SEC", "KNOWLEDGE_CACHE_TTL_SEC"):
            if getattr(cls, name) < 0:
                problems.append(f"{name} must be >= 0")

        if cls.SESSION_BACKEND not in ("memory", "redis"):
            problems.append(f"SESSION_BACKEND must be 'memory' or 'redis', got '{cls.SESSION_BACKEND}'")

        if cls.MAX_HISTORY_MESSAGES < 1:
            problems.append("MAX_HISTORY_MESSAGES must be >= 1")

        if problems:
            raise ValueError(f"Invalid configuration: {', '.join(problems)}")

        return True
