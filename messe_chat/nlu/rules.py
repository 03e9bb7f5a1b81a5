"""Rule-based intent, topic and language detection.

Rules are plain substring checks against the lower-cased message and are
evaluated in declaration order; the first rule with a matching keyword wins.
"""
from typing import List, NamedTuple, Tuple

from ..schemas.io_models import IntentResult

GENERAL_INTENT = "general_query"
GENERAL_TOPIC = "general"


class IntentRule(NamedTuple):
    intent: str
    topic: str
    keywords: Tuple[str, ...]


# More specific/decisive intents first. The topic is the intent's prefix.
INTENT_RULES: List[IntentRule] = [
    IntentRule("sponsorship_cost", "sponsorship",
               ("price", "cost", "how much", "investment", "tier price")),
    IntentRule("sponsorship_interest", "sponsorship",
               ("benefits", "package", "offer", "provide for sponsor", "what do sponsors get")),
    IntentRule("roi_query", "roi",
               ("roi", "return", "pipeline", "value", "lead generation")),
    IntentRule("tech_details", "tech",
               ("how does ai work", "algorithm", "platform details", "matchmaking details")),
    IntentRule("venue_details", "venue",
               ("capacity", "layout", "address", "getting there")),
]

TOPIC_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    ("dates", ("when", "date", "kapan", "tanggal", "august", "2026")),
    ("location", ("where", "location", "venue", "dimana", "tempat", "berlin", "arena")),
    ("pricing", ("price", "cost", "sponsor", "harga", "biaya", "berapa", "ticket", "roi", "return",
                 "investment", "untung", "keuntungan", "profit")),
    ("program", ("program", "schedule", "agenda", "acara", "jadwal", "concert", "workshop")),
    ("sponsorship", ("sponsor", "partnership", "benefits", "roi", "package")),
    ("technology", ("ai", "technology", "app", "matchmaking", "digital", "platform", "connect",
                    "algorithm", "match", "networking", "sistem", "koneksi")),
    ("artists", ("concert", "performance", "music", "konser", "tulus", "dewa")),
    ("business", ("b2b", "networking", "meeting", "bisnis", "trade", "export", "import")),
    ("registration", ("register", "sign up", "ticket", "daftar", "how to join")),
    ("contact", ("contact", "email", "phone", "kontak", "hubungi")),
]

INDONESIAN_WORDS = ("kapan", "dimana", "berapa", "acara", "harga", "bisnis", "konser")
GERMAN_WORDS = ("wann", "wo", "wie", "veranstaltung", "preis", "geschäft")


def _contains_any(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


def detect_topic(message: str) -> str:
    lowered = message.lower()
    for topic, keywords in TOPIC_KEYWORDS:
        if _contains_any(lowered, keywords):
            return topic
    return GENERAL_TOPIC


def detect_intent(message: str) -> IntentResult:
    lowered = message.lower()
    for rule in INTENT_RULES:
        if _contains_any(lowered, rule.keywords):
            return IntentResult(intent=rule.intent, topic=rule.topic)
    return IntentResult(intent=GENERAL_INTENT, topic=detect_topic(message))


def detect_language(message: str) -> str:
    lowered = message.lower()
    if _contains_any(lowered, INDONESIAN_WORDS):
        return "id"
    if _contains_any(lowered, GERMAN_WORDS):
        return "de"
    return "en"
