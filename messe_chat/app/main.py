#!/usr/bin/env python3
"""
Main FastAPI application for the event chat assistant and knowledge admin.
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from typing import Any, Dict, List
import uuid

from .config import Config
from .controller import ChatController
from ..data.database import create_tables, get_db
from ..data import overlay_store
from ..knowledge.builder import KnowledgeBuilder, get_knowledge_builder
from ..knowledge.csv_overlay import parse_csv_overlay
from ..knowledge.resolver import resolve_template
from ..nlu.rules import detect_intent
from ..schemas.io_models import (
    ChatRequest,
    ChatResponse,
    ConversationSummary,
    IntentRequest,
    IntentResult,
    LayerInfo,
    OverlayCreateRequest,
    OverlayRecord,
    OverlayUpdateRequest,
    OverlayUploadResponse,
    ResolveRequest,
    ResolveResponse,
    SessionCreateRequest,
    SessionCreateResponse,
)
from ..utils.logger import get_logger

logger = get_logger()

_controller: ChatController = None


def get_controller() -> ChatController:
    global _controller
    if _controller is None:
        _controller = ChatController(builder=get_knowledge_builder())
    return _controller


@asynccontextmanager
async def lifespan(app: FastAPI):
    Config.validate()
    create_tables()
    logger.info("Knowledge tables ready")
    yield


# Initialize FastAPI app
app = FastAPI(
    title="Paguyuban Messe Chat API",
    description="Event chat assistant backed by layered knowledge overlays",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify your frontend domain
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/session", response_model=SessionCreateResponse)
async def create_session(request: SessionCreateRequest, controller: ChatController = Depends(get_controller)):
    """Create a new chat session, generating an id when none is given."""
    session_id = request.session_id or str(uuid.uuid4())
    created = controller.session_manager.create_session(session_id)
    return SessionCreateResponse(session_id=session_id, created=created)


@app.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, controller: ChatController = Depends(get_controller)):
    """
    Answer one chat message.
    """
    try:
        reply, result = await controller.chat(request.session_id, request.message, request.assistant_type)
    except Exception as e:
        logger.exception("Chat turn failed")
        raise HTTPException(status_code=500, detail=f"Error processing message: {str(e)}")
    return ChatResponse(session_id=request.session_id, reply=reply, intent=result.intent, topic=result.topic)


@app.get("/chat/{session_id}/suggestions", response_model=List[str])
async def suggestions(session_id: str, controller: ChatController = Depends(get_controller)):
    return controller.suggested_questions(session_id)


@app.get("/chat/{session_id}/summary", response_model=ConversationSummary)
async def summary(session_id: str, controller: ChatController = Depends(get_controller)):
    return await controller.conversation_summary(session_id)


@app.delete("/chat/{session_id}")
async def clear_chat(session_id: str, controller: ChatController = Depends(get_controller)):
    controller.clear(session_id)
    return {"session_id": session_id, "cleared": True}


@app.post("/intent", response_model=IntentResult)
async def intent(request: IntentRequest):
    return detect_intent(request.message)


@app.get("/knowledge")
async def get_knowledge(builder: KnowledgeBuilder = Depends(get_knowledge_builder)) -> Dict[str, Any]:
    """Return the composed knowledge tree."""
    return await builder.build_knowledge()


@app.get("/knowledge/layers", response_model=List[LayerInfo])
async def get_layers(builder: KnowledgeBuilder = Depends(get_knowledge_builder)):
    """List the overlay layers that contributed to the current knowledge."""
    await builder.build_knowledge()
    return [
        LayerInfo(source=layer.source, rank=layer.rank, keys=sorted(layer.tree.keys()))
        for layer in builder.last_layers
    ]


@app.post("/knowledge/resolve", response_model=ResolveResponse)
async def resolve(request: ResolveRequest, builder: KnowledgeBuilder = Depends(get_knowledge_builder)):
    knowledge = await builder.build_knowledge()
    return ResolveResponse(text=resolve_template(request.text, knowledge))


@app.get("/knowledge/history", response_model=List[OverlayRecord])
async def history(limit: int = Query(20, ge=1, le=100), db: Session = Depends(get_db)):
    return overlay_store.list_overlays(db, limit=limit)


@app.post("/knowledge", response_model=OverlayRecord, status_code=201)
async def create_overlay(
    request: OverlayCreateRequest,
    db: Session = Depends(get_db),
    builder: KnowledgeBuilder = Depends(get_knowledge_builder),
):
    """Store a new overlay; an active one replaces the previously active record."""
    try:
        record = overlay_store.activate_overlay(db, request.overlay, request.is_active)
    except Exception as e:
        logger.exception("Creating knowledge overlay failed")
        raise HTTPException(status_code=500, detail=f"Failed to create knowledge: {str(e)}")
    builder.invalidate()
    return record


@app.put("/knowledge", response_model=OverlayRecord)
async def update_overlay(
    request: OverlayUpdateRequest,
    db: Session = Depends(get_db),
    builder: KnowledgeBuilder = Depends(get_knowledge_builder),
):
    try:
        record = overlay_store.update_active_overlay(db, request.overlay)
    except Exception as e:
        logger.exception("Updating knowledge overlay failed")
        raise HTTPException(status_code=500, detail=f"Failed to update knowledge: {str(e)}")
    builder.invalidate()
    return record


@app.post("/knowledge/upload", response_model=OverlayUploadResponse)
async def upload_csv(
    request: Request,
    db: Session = Depends(get_db),
    builder: KnowledgeBuilder = Depends(get_knowledge_builder),
):
    """
    Merge a ``path,value`` CSV body into the active overlay.
    """
    body = await request.body()
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV body must be UTF-8 text")

    parsed = parse_csv_overlay(text)
    if not parsed:
        raise HTTPException(status_code=400, detail="No valid data found in CSV")

    try:
        record = overlay_store.merge_into_active_overlay(db, parsed)
    except Exception as e:
        logger.exception("Merging CSV into knowledge overlay failed")
        raise HTTPException(status_code=500, detail=f"Failed to process CSV file: {str(e)}")
    builder.invalidate()
    return OverlayUploadResponse(
        message="CSV data merged successfully",
        records_processed=len(parsed),
        overlay=OverlayRecord.model_validate(record),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
