from typing import Any

import httpx
import structlog
from fastapi import APIRouter, File, UploadFile

from src.core.exceptions import AppError
from src.schemas.evaluation import BatchEvaluationResponse
from src.services import evaluation_client, evaluation_summary
from src.services.file_sources import UploadFileSource

logger = structlog.get_logger()

router = APIRouter(prefix="/evaluations")


def _upstream_detail(error: httpx.HTTPStatusError) -> str:
    try:
        body = error.response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return f"Evaluation service returned {error.response.status_code}"


@router.post("")
async def evaluate_image(file: UploadFile = File(...)) -> Any:
    try:
        return await evaluation_client.evaluate_image_file(UploadFileSource(file))
    except httpx.HTTPStatusError as e:
        raise AppError(status_code=502, detail=_upstream_detail(e)) from e
    except httpx.RequestError as e:
        raise AppError(status_code=502, detail="Evaluation service unavailable") from e
    except (ValueError, KeyError) as e:
        raise AppError(status_code=502, detail="Malformed evaluation response") from e


@router.post("/batch", response_model=BatchEvaluationResponse)
async def evaluate_batch(files: list[UploadFile] = File(...)) -> BatchEvaluationResponse:
    items = await evaluation_summary.evaluate_many([UploadFileSource(f) for f in files])
    summary = evaluation_summary.summarise_evaluations(items)
    logger.info("batch_evaluated", count=len(items), verdict=summary.verdict if summary else None)
    return BatchEvaluationResponse(items=items, summary=summary)
