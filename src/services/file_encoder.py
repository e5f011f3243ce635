import base64

from src.core.exceptions import FileReadError
from src.services.file_sources import FileSource


def strip_data_url(result: str) -> str:
    _, sep, payload = result.partition(",")
    return payload if sep else ""


async def encode_file(source: FileSource) -> str:
    """Read ``source`` once and return its content as a base64 string.

    Sources that hand back a data URL (``data:<mime>;base64,<payload>``) get
    only the payload returned. An empty read, or a string with no comma,
    yields ``""`` rather than an error.
    """
    try:
        result = await source.read()
    except Exception as e:
        if e.args:
            raise
        raise FileReadError() from e

    if not result:
        return ""
    if isinstance(result, str):
        return strip_data_url(result)
    return base64.b64encode(result).decode("ascii")


def decoded_size(base64_data: str) -> int:
    if not base64_data:
        return 0
    padding = base64_data[-2:].count("=")
    return len(base64_data) * 3 // 4 - padding
