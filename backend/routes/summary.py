"""AI summary route — Wikipedia snippets in, a short Nigeria-focused summary out."""

from typing import Any

from fastapi import APIRouter, Depends
from openai import AsyncOpenAI
from pydantic import BaseModel, ConfigDict, Field

from config import Settings
from dependencies import get_openai_client, get_settings
from services.openai_client import summarize

router = APIRouter()


class SummaryRequest(BaseModel):
    """Any ``wikiResults`` other than a non-empty list means no context."""

    model_config = ConfigDict(populate_by_name=True)

    query: Any = None
    wiki_results: Any = Field(default=None, alias="wikiResults")


class SummaryResponse(BaseModel):
    summary: str


@router.post("/api/ai-summary")
async def ai_summary(
    body: SummaryRequest | None = None,
    settings: Settings = Depends(get_settings),
    client: AsyncOpenAI | None = Depends(get_openai_client),
) -> SummaryResponse:
    body = body or SummaryRequest()
    summary = await summarize(body.query, body.wiki_results, settings, client)
    return SummaryResponse(summary=summary)
