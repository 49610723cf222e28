"""
Live conversation API (localhost). Welcome first, then each user message returns the
assistant reply after its typing delay (or a superseded marker if a newer message won).
"""

from fastapi import APIRouter, HTTPException

from assistant.live.session import get_session, start_session, summarize_session, turn_with_delay

router = APIRouter(prefix="/live", tags=["live"])


@router.post("/start")
def live_start():
    """Start a live session. Returns session_id, the welcome text and its suggestion chips."""
    session_id, welcome = start_session()
    return {"session_id": session_id, "bot_reply": welcome.text, "suggestions": welcome.suggestions}


@router.post("/message")
async def live_message(body: dict):
    """
    Send user message, get assistant reply. Body: { "session_id": "...", "user_message": "..." }.
    Waits out the typing delay; if another message for the same session arrives meanwhile,
    this request returns { "session_id": ..., "superseded": true }.
    """
    session_id = body.get("session_id")
    user_message = (body.get("user_message") or "").strip()
    if not session_id:
        raise HTTPException(status_code=400, detail="session_id required")
    if not user_message:
        raise HTTPException(status_code=400, detail="user_message required")
    try:
        pending, message = await turn_with_delay(session_id, user_message)
    except KeyError:
        raise HTTPException(status_code=404, detail="Session not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if message is None:
        return {"session_id": session_id, "superseded": True}
    analysis = pending.analysis
    return {
        "session_id": session_id,
        "bot_reply": message.text,
        "suggestions": message.suggestions,
        "intent": analysis.intent.intent.value,
        "confidence": analysis.intent.confidence,
        "sub_intent": analysis.intent.sub_intent,
        "sentiment": analysis.emotion.sentiment.value,
        "mood": analysis.emotion.mood.value,
        "entities": [e.model_dump(mode="json") for e in analysis.entities],
        "delay_ms": pending.delay_ms,
    }


@router.get("/session/{session_id}")
def live_get_session(session_id: str):
    """Get current context and message log (for debugging)."""
    data = get_session(session_id)
    if not data:
        raise HTTPException(status_code=404, detail="Session not found")
    return {
        "session_id": session_id,
        "context": data["context"].model_dump(mode="json"),
        "messages": [m.model_dump(mode="json") for m in data["messages"]],
    }


@router.get("/session/{session_id}/summary")
def live_session_summary(session_id: str):
    """Post-hoc summary of the conversation so far: topics, intents, entities, sentiment."""
    try:
        summary = summarize_session(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Session not found")
    return summary.model_dump(mode="json")
