from __future__ import annotations


class EngineError(RuntimeError):
    def __init__(self, message: str, *, status_code: int = 422):
        super().__init__(message)
        self.status_code = status_code


class ProfileNotAvailableError(EngineError):
    def __init__(self, message: str = "User profile not available"):
        super().__init__(message, status_code=404)


class TemplateNotFoundError(EngineError):
    def __init__(self, message: str = "Template not found"):
        super().__init__(message, status_code=404)
