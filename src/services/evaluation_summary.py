import asyncio
import math
from collections.abc import Sequence
from typing import Any

import structlog

from src.config import settings
from src.schemas.evaluation import BatchItem, EvaluationSummary
from src.services import evaluation_client
from src.services.file_encoder import decoded_size, strip_data_url
from src.services.file_sources import FileSource
from src.utils.file_size import format_file_size

logger = structlog.get_logger()

ACCEPT_SUMMARY = "All evaluated photos meet the training guidelines."
REJECT_SUMMARY = "None of the evaluated photos met the quality guidelines. Capture new reference images."
NEEDS_MORE_SUMMARY = "Some photos need review. Approve or override the ones you want to keep before continuing."
NO_IMAGE_ANALYSIS = "Evaluator returned no image analysis"


class _MeasuredSource:
    """Passes reads through to ``source`` and records how many bytes came back."""

    def __init__(self, source: FileSource) -> None:
        self._source = source
        self.name = source.name
        self.size = 0

    @property
    def mime_type(self) -> str | None:
        return self._source.mime_type

    async def read(self) -> bytes | str | None:
        result = await self._source.read()
        if isinstance(result, str):
            self.size = decoded_size(strip_data_url(result))
        elif result:
            self.size = len(result)
        return result


def _first_image(evaluation: Any) -> dict[str, Any] | None:
    if not isinstance(evaluation, dict):
        return None
    images = evaluation.get("images")
    if isinstance(images, list) and images and isinstance(images[0], dict):
        return images[0]
    return None


async def evaluate_many(
    sources: Sequence[FileSource],
    max_concurrent: int | None = None,
) -> list[BatchItem]:
    semaphore = asyncio.Semaphore(max_concurrent or settings.max_concurrent_evaluations)

    async def _evaluate(source: FileSource) -> BatchItem:
        measured = _MeasuredSource(source)
        async with semaphore:
            try:
                data = await evaluation_client.evaluate_image_file(measured)
                image = _first_image(data)
                if image is None:
                    raise ValueError(NO_IMAGE_ANALYSIS)
            except Exception as e:
                logger.warning("batch_item_failed", name=source.name, error=str(e))
                return BatchItem(
                    name=source.name,
                    size=measured.size,
                    size_label=format_file_size(measured.size),
                    status="evaluation_failed",
                    error=str(e) or "Evaluation failed",
                )
        return BatchItem(
            name=source.name,
            size=measured.size,
            size_label=format_file_size(measured.size),
            status="evaluated",
            evaluation=image,
        )

    tasks = [_evaluate(source) for source in sources]
    return await asyncio.gather(*tasks)


def _confidence(image: dict[str, Any]) -> float:
    value = image.get("confidencePercent")
    if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value):
        return 0
    return value


def summarise_evaluations(items: Sequence[BatchItem]) -> EvaluationSummary | None:
    evaluated = [item for item in items if item.status == "evaluated"]
    if not evaluated:
        return None

    images = [item.evaluation if isinstance(item.evaluation, dict) else {} for item in evaluated]
    accepted = sum(1 for image in images if image.get("acceptable"))
    total_confidence = sum(_confidence(image) for image in images)
    # round half up, towards positive infinity
    average_confidence = math.floor(total_confidence / len(evaluated) + 0.5)

    if accepted == len(evaluated):
        verdict, summary = "accept", ACCEPT_SUMMARY
    elif accepted == 0:
        verdict, summary = "reject", REJECT_SUMMARY
    else:
        verdict, summary = "needs_more", NEEDS_MORE_SUMMARY

    return EvaluationSummary(
        verdict=verdict,
        accepted_count=accepted,
        rejected_count=len(evaluated) - accepted,
        confidence_percent=average_confidence,
        summary=summary,
    )
