from __future__ import annotations

from fastapi import APIRouter, Depends

from farmbot.api.deps import get_completion_client
from farmbot.llm.engine import CompletionClient
from farmbot.llm.prompts import DIAGNOSTIC_QUESTION
from farmbot.schemas import DiagnosticReplyResponse

router = APIRouter()


@router.get("/test", response_model=DiagnosticReplyResponse)
async def diagnostic_completion(
    completion: CompletionClient = Depends(get_completion_client),
) -> DiagnosticReplyResponse:
    """Run the text completion path end to end with a fixed farming question."""
    result = await completion.complete_text(DIAGNOSTIC_QUESTION)
    return DiagnosticReplyResponse(reply=result.text)
