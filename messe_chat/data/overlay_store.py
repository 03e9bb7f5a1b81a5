"""Reads and writes of knowledge overlay records.

Writers keep the single-active-row invariant: activating an overlay
deactivates every other row first. Callers are expected to invalidate the
knowledge cache after a write.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from ..knowledge.merge import deep_merge
from ..utils.logger import get_logger
from .models import KnowledgeOverlay, utcnow

logger = get_logger()


def get_active_record(db: Session) -> Optional[KnowledgeOverlay]:
    return (
        db.query(KnowledgeOverlay)
        .filter(KnowledgeOverlay.is_active.is_(True))
        .order_by(KnowledgeOverlay.updated_at.desc())
        .first()
    )


def fetch_active_overlay(db: Session) -> Optional[Dict[str, Any]]:
    """Overlay tree of the most recently updated active record, if any."""
    record = get_active_record(db)
    if record is None:
        return None
    return record.overlay


def activate_overlay(db: Session, overlay: Dict[str, Any], is_active: bool = True) -> KnowledgeOverlay:
    if is_active:
        db.query(KnowledgeOverlay).filter(KnowledgeOverlay.is_active.is_(True)).update(
            {KnowledgeOverlay.is_active: False}, synchronize_session=False
        )
    record = KnowledgeOverlay(overlay=overlay, is_active=is_active)
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info(f"Stored knowledge overlay {record.id} (active={record.is_active})")
    return record


def update_active_overlay(db: Session, overlay: Dict[str, Any]) -> KnowledgeOverlay:
    """Replace the active overlay, creating one when none is active."""
    record = get_active_record(db)
    if record is None:
        return activate_overlay(db, overlay)
    record.overlay = overlay
    record.updated_at = utcnow()
    db.commit()
    db.refresh(record)
    logger.info(f"Updated knowledge overlay {record.id}")
    return record


def merge_into_active_overlay(db: Session, partial: Dict[str, Any]) -> KnowledgeOverlay:
    """Deep-merge ``partial`` into the active overlay, creating one if needed."""
    record = get_active_record(db)
    if record is None:
        return activate_overlay(db, deep_merge({}, partial))
    record.overlay = deep_merge(record.overlay or {}, partial)
    record.updated_at = utcnow()
    db.commit()
    db.refresh(record)
    logger.info(f"Merged {len(partial)} top-level keys into knowledge overlay {record.id}")
    return record


def list_overlays(db: Session, limit: int = 20) -> List[KnowledgeOverlay]:
    return (
        db.query(KnowledgeOverlay)
        .order_by(KnowledgeOverlay.updated_at.desc())
        .limit(limit)
        .all()
    )
