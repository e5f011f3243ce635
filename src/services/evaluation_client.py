from typing import Any

import httpx
import structlog

from src.config import settings
from src.schemas.evaluation import EncodedImage, EvaluationImage, EvaluationRequest
from src.services.file_encoder import decoded_size, encode_file
from src.services.file_sources import FileSource
from src.utils.file_size import format_file_size

logger = structlog.get_logger()

_client: httpx.AsyncClient | None = None


def build_request(
    name: str,
    encoded: EncodedImage,
    mime_type: str | None,
    default_mime_type: str | None = None,
) -> EvaluationRequest:
    return EvaluationRequest(
        image=EvaluationImage(
            name=name,
            base64=encoded.base64,
            mime_type=mime_type or default_mime_type or settings.default_mime_type,
        )
    )


class EvaluationClient:
    """Submits one encoded image per call to the remote evaluation endpoint.

    Errors from reading the file or from the transport are not caught here;
    the caller receives the first failure as raised.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        evaluate_path: str | None = None,
        default_mime_type: str | None = None,
    ) -> None:
        self.http_client = http_client
        self.evaluate_path = evaluate_path or settings.evaluate_path
        self.default_mime_type = default_mime_type or settings.default_mime_type

    async def evaluate(self, source: FileSource) -> Any:
        encoded = EncodedImage(base64=await encode_file(source))
        request = build_request(source.name, encoded, source.mime_type, self.default_mime_type)
        logger.debug(
            "evaluation_submitted",
            name=request.image.name,
            mime_type=request.image.mime_type,
            size=format_file_size(decoded_size(encoded.base64)),
        )
        try:
            response = await self.http_client.post(self.evaluate_path, json=request.model_dump(by_alias=True))
            response.raise_for_status()
            return response.json()["data"]
        except Exception as e:
            logger.error("evaluation_failed", name=request.image.name, error=str(e))
            raise


def get_http_client() -> httpx.AsyncClient:
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
        )
    return _client


async def evaluate_image_file(source: FileSource) -> Any:
    return await EvaluationClient(get_http_client()).evaluate(source)


async def close_client() -> None:
    global _client
    if _client:
        await _client.aclose()
        _client = None
