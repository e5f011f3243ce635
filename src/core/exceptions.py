class AppError(Exception):
    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class FileReadError(AppError):
    def __init__(self, detail: str = "Failed to read file") -> None:
        super().__init__(status_code=400, detail=detail)
