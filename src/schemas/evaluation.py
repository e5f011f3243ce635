from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class EncodedImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    base64: str


class EvaluationImage(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    base64: str
    mime_type: str = Field(alias="mimeType")


class EvaluationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    image: EvaluationImage


class EvaluationSummary(BaseModel):
    verdict: Literal["accept", "needs_more", "reject"]
    accepted_count: int
    rejected_count: int
    confidence_percent: int
    summary: str


class BatchItem(BaseModel):
    name: str
    size: int
    size_label: str
    status: Literal["evaluated", "evaluation_failed"]
    evaluation: Any = None
    error: str | None = None


class BatchEvaluationResponse(BaseModel):
    items: list[BatchItem]
    summary: EvaluationSummary | None = None


class HealthResponse(BaseModel):
    status: str
