#!/usr/bin/env python3
"""
Test Suite for the HTTP API

PURPOSE:
    Drives the FastAPI app through TestClient with the database, knowledge
    builder and chat controller swapped for in-memory versions.

TEST COVERAGE:
    - Health, session and chat endpoints
    - Intent classification and template resolution endpoints
    - Overlay create/update/upload flows and cache invalidation
    - Layer listing and history

USAGE:
    Run from project root: python -m pytest tests/test_api.py -v
"""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from messe_chat.app.config import Config
from messe_chat.app.controller import ChatController
from messe_chat.app.main import app, get_controller
from messe_chat.app.session import SessionManager
from messe_chat.data.database import create_tables, get_db
from messe_chat.data.overlay_store import fetch_active_overlay
from messe_chat.knowledge.builder import KnowledgeBuilder, get_knowledge_builder
from messe_chat.knowledge.loaders import DatabaseOverlayLoader, OverlayLoader


class StaticLoader(OverlayLoader):
    def __init__(self, source, tree=None):
        self.source = source
        self.tree = tree

    async def load(self):
        return self.tree


class TestApi(unittest.TestCase):

    def setUp(self):
        patcher_llm = patch.object(Config, "USE_LLM", False)
        patcher_key = patch.object(Config, "GEMINI_API_KEY", None)
        patcher_llm.start()
        patcher_key.start()
        self.addCleanup(patcher_llm.stop)
        self.addCleanup(patcher_key.stop)

        engine = create_engine(
            "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
        )
        create_tables(bind=engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

        self.json_loader = StaticLoader("json-file")
        self.builder = KnowledgeBuilder(
            database_loader=DatabaseOverlayLoader(fetch=self.fetch_overlay),
            json_loader=self.json_loader,
            csv_loader=StaticLoader("csv-file"),
        )
        self.controller = ChatController(builder=self.builder, session_manager=SessionManager(use_redis=False))

        app.dependency_overrides[get_db] = self.override_get_db
        app.dependency_overrides[get_knowledge_builder] = lambda: self.builder
        app.dependency_overrides[get_controller] = lambda: self.controller
        self.addCleanup(app.dependency_overrides.clear)

        self.client = TestClient(app)

    def fetch_overlay(self):
        db = self.SessionLocal()
        try:
            return fetch_active_overlay(db)
        finally:
            db.close()

    def override_get_db(self):
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_create_session(self):
        created = self.client.post("/session", json={"session_id": "abc"}).json()
        self.assertEqual(created, {"session_id": "abc", "created": True})
        again = self.client.post("/session", json={"session_id": "abc"}).json()
        self.assertFalse(again["created"])
        generated = self.client.post("/session", json={}).json()
        self.assertTrue(generated["session_id"])

    def test_chat(self):
        response = self.client.post("/chat", json={"session_id": "abc", "message": "When is the event date?"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["intent"], "general_query")
        self.assertEqual(body["topic"], "dates")
        self.assertIn("August 7-8, 2026", body["reply"])

    def test_chat_rejects_empty_message_and_unknown_assistant(self):
        self.assertEqual(self.client.post("/chat", json={"session_id": "a", "message": ""}).status_code, 422)
        response = self.client.post("/chat", json={"session_id": "a", "message": "hi", "assistant_type": "bob"})
        self.assertEqual(response.status_code, 422)

    def test_summary_and_clear(self):
        self.client.post("/chat", json={"session_id": "abc", "message": "How much does sponsorship cost?"})
        summary = self.client.get("/chat/abc/summary").json()
        self.assertEqual(summary["message_count"], 2)
        self.assertEqual(summary["topics"], ["sponsorship"])
        suggestions = self.client.get("/chat/abc/suggestions").json()
        self.assertIn("What benefits does the Title Sponsor receive?", suggestions)
        self.assertTrue(self.client.delete("/chat/abc").json()["cleared"])
        self.assertEqual(self.client.get("/chat/abc/summary").json()["message_count"], 0)

    def test_intent(self):
        response = self.client.post("/intent", json={"message": "How much is the sponsor package price?"})
        self.assertEqual(response.json(), {"intent": "sponsorship_cost", "topic": "sponsorship"})

    def test_resolve(self):
        response = self.client.post("/knowledge/resolve", json={"text": "Dates: [get:event.dates] [get:nope]"})
        self.assertEqual(response.json()["text"], "Dates: August 7-8, 2026 [Data for nope not found]")

    def test_create_overlay_is_visible_immediately(self):
        self.assertEqual(self.client.get("/knowledge").json()["event"]["dates"], "August 7-8, 2026")
        response = self.client.post("/knowledge", json={"overlay": {"event": {"dates": "Dec 1-2"}}})
        self.assertEqual(response.status_code, 201)
        self.assertTrue(response.json()["is_active"])
        knowledge = self.client.get("/knowledge").json()
        self.assertEqual(knowledge["event"]["dates"], "Dec 1-2")
        self.assertEqual(knowledge["event"]["location"], "Arena Berlin (Halle CE, Beach Club, and Club)")

    def test_update_overlay(self):
        self.client.post("/knowledge", json={"overlay": {"event": {"dates": "Dec 1-2"}}})
        response = self.client.put("/knowledge", json={"overlay": {"contact": {"phone": "+49 000"}}})
        self.assertEqual(response.status_code, 200)
        knowledge = self.client.get("/knowledge").json()
        self.assertEqual(knowledge["event"]["dates"], "August 7-8, 2026")
        self.assertEqual(knowledge["contact"]["phone"], "+49 000")

    def test_upload_csv_merges_into_active_overlay(self):
        self.client.post("/knowledge", json={"overlay": {"contact": {"phone": "+49 000"}}})
        csv_text = 'path,value\nevent.dates,"Jan 5-6, 2027"\nevent.venue.capacity,2500\nbad row\n'
        response = self.client.post("/knowledge/upload", content=csv_text.encode("utf-8"))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["records_processed"], 1)
        self.assertEqual(body["overlay"]["overlay"]["contact"], {"phone": "+49 000"})

        knowledge = self.client.get("/knowledge").json()
        self.assertEqual(knowledge["event"]["dates"], "Jan 5-6, 2027")
        self.assertEqual(knowledge["event"]["venue"]["capacity"], 2500)

    def test_uploaded_nan_resolves_verbatim(self):
        self.client.post("/knowledge/upload", content=b"path,value\nspeaker.name,NaN\n")
        response = self.client.post("/knowledge/resolve", json={"text": "[get:speaker.name]"})
        self.assertEqual(response.json()["text"], "NaN")

    def test_upload_without_rows_is_rejected(self):
        response = self.client.post("/knowledge/upload", content=b"path,value\n")
        self.assertEqual(response.status_code, 400)
        response = self.client.post("/knowledge/upload", content=b"\xff\xfe")
        self.assertEqual(response.status_code, 400)

    def test_layers_and_history(self):
        self.json_loader.tree = {"event": {"dates": "Nov 3-4"}}
        self.client.post("/knowledge", json={"overlay": {"event": {"dates": "Dec 1-2"}}})
        layers = self.client.get("/knowledge/layers").json()
        self.assertEqual([(l["source"], l["rank"]) for l in layers], [("database", 1), ("json-file", 2)])
        self.assertEqual(self.client.get("/knowledge").json()["event"]["dates"], "Nov 3-4")

        self.client.post("/knowledge", json={"overlay": {"v": 2}})
        history = self.client.get("/knowledge/history", params={"limit": 5}).json()
        self.assertEqual(len(history), 2)
        self.assertEqual(history[0]["overlay"], {"v": 2})
        self.assertEqual([h["is_active"] for h in history], [True, False])


if __name__ == "__main__":
    unittest.main()
