"""
MESSE-CHAT — System Documentation
=================================

This module-style README documents the architecture and operation of the
Paguyuban Messe chat backend: layered event knowledge, the ``[get:path]``
template language, rule-based intent detection and the chat/admin API.

How to use this file
--------------------
- View in an editor for structured reading.
- Run `python README.py` to print the outline.
- Import `README` in tools or scripts to surface sections.

Table of Contents
-----------------
1. System Overview
2. Knowledge Layers
3. Templates & Path Resolution
4. Intent Detection
5. Chat Flow
6. HTTP API
7. Configuration & Environment
8. Testing Strategy
9. Troubleshooting

"""

from __future__ import annotations

import textwrap


def section(title: str, body: str) -> str:
    return f"\n{title}\n{'-' * len(title)}\n{body.strip()}\n"


SYSTEM_OVERVIEW = section(
    "1. System Overview",
    """
    MESSE-CHAT answers visitor questions about Paguyuban Messe 2026. Event
    facts live in a static baseline tree that admins can override at runtime
    with a database overlay, a JSON file or a CSV file, without a redeploy.
    Replies are either generated by Gemini or rendered from templates whose
    `[get:path]` markers are filled from the composed knowledge.
    """,
)


KNOWLEDGE_LAYERS = section(
    "2. Knowledge Layers",
    """
    - Baseline: `messe_chat/knowledge/static_knowledge.py` (lowest precedence).
    - Database: the active row of the `knowledge` table, cached 300s (60s on a miss).
    - JSON file: `$KNOWLEDGE_DOCS_DIR/knowledge.json`, must hold an object.
    - CSV file: `$KNOWLEDGE_DOCS_DIR/knowledge.csv`, `path,value` rows (highest precedence).
    - Layers are deep-merged in that order: objects merge key by key,
      everything else (lists included) is replaced by the later layer.
    - A missing, unreadable or malformed source is skipped with one WARNING.
    - The composed tree is cached; every admin write invalidates it.
    """,
)


TEMPLATES = section(
    "3. Templates & Path Resolution",
    """
    - `[get:event.dates]` resolves a dotted path against the composed tree.
    - Numeric segments index into lists: `[get:event.days.0]`.
    - Strings render as-is, numbers and booleans as literals, anything else as JSON.
    - Missing paths render `[Data for <path> not found]`.
    - Substitution is a single pass; resolved text is never re-expanded.
    """,
)


INTENT_DETECTION = section(
    "4. Intent Detection",
    """
    - `messe_chat/nlu/rules.py` holds ordered keyword rules; the first match wins.
    - Specific intents: sponsorship_cost, sponsorship_interest, roi_query,
      tech_details, venue_details.
    - Otherwise the intent is `general_query` and the topic comes from the
      topic keyword table (dates, location, pricing, program, ...).
    - Language is guessed as `id`, `de` or `en` from marker words.
    """,
)


CHAT_FLOW = section(
    "5. Chat Flow",
    """
    1) Detect intent, topic and language; record them on the session.
    2) Build (or reuse) the composed knowledge.
    3) With an LLM configured: render the topic context, prompt Gemini as
       Ucup or Rima, and re-ask once if the answer requests `[get:...]` data.
    4) Without an LLM, or when it fails: render a smart reply for the topic,
       else a contact apology. A turn always produces a reply.
    """,
)


HTTP_API = section(
    "6. HTTP API",
    """
    - `POST /chat`, `POST /session`, `GET /chat/{id}/suggestions`,
      `GET /chat/{id}/summary`, `DELETE /chat/{id}`.
    - `POST /intent`, `POST /knowledge/resolve`.
    - `GET /knowledge`, `GET /knowledge/layers`, `GET /knowledge/history`.
    - `POST /knowledge` (new overlay), `PUT /knowledge` (replace active),
      `POST /knowledge/upload` (merge a CSV body into the active overlay).
    - Run locally via `uvicorn messe_chat.app.main:app --reload`.
    """,
)


CONFIG_ENV = section(
    "7. Configuration & Environment",
    """
    - `.env` is read by python-dotenv; see `messe_chat/app/config.py`.
    - DATABASE_URL, KNOWLEDGE_DOCS_DIR, KNOWLEDGE_JSON_FILE, KNOWLEDGE_CSV_FILE.
    - OVERLAY_CACHE_TTL_SEC, OVERLAY_MISS_TTL_SEC, KNOWLEDGE_CACHE_TTL_SEC.
    - GEMINI_API_KEY, GEMINI_MODEL, USE_LLM.
    - SESSION_BACKEND (memory|redis), REDIS_HOST, REDIS_PORT, REDIS_DB.
    - MAX_HISTORY_MESSAGES, LOG_LEVEL.
    """,
)


TESTING = section(
    "8. Testing Strategy",
    """
    - `pytest` from the project root runs everything under `tests/`.
    - Database tests use in-memory SQLite; the API tests override `get_db`,
      `get_knowledge_builder` and `get_controller`.
    - `messe-knowledge show event.dates` inspects the live composed tree.
    """,
)


TROUBLESHOOTING = section(
    "9. Troubleshooting",
    """
    - Overlay edit not visible: file overlays are re-read only after the
      knowledge cache expires; admin API writes invalidate immediately.
    - `[Data for x.y not found]` in replies: check the path with
      `messe-knowledge show x.y`.
    - Layer skipped warnings: check the file is valid JSON / `path,value` CSV.
    """,
)


def as_text() -> str:
    return "\n".join(
        [
            SYSTEM_OVERVIEW,
            KNOWLEDGE_LAYERS,
            TEMPLATES,
            INTENT_DETECTION,
            CHAT_FLOW,
            HTTP_API,
            CONFIG_ENV,
            TESTING,
            TROUBLESHOOTING,
        ]
    )


def main() -> None:
    print(textwrap.dedent(as_text()))


if __name__ == "__main__":
    main()
