from typing import Optional


class TaskServiceError(Exception):
    """Base exception for task service errors"""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(TaskServiceError):
    """Input could not be parsed into the expected shape"""
    status_code = 400


class NotFoundError(TaskServiceError):
    """No task row matches the request"""
    status_code = 404


class PersistenceError(TaskServiceError):
    """Store failure, tagged with the operation that hit it"""
    status_code = 500

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        super().__init__(message or f"Failed to {operation}")
