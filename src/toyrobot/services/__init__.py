"""Service layer — the session controller and its result contract."""

from toyrobot.services.context import SessionContext
from toyrobot.services.result import ServiceError, ServiceResult
from toyrobot.services.session import SessionController

__all__ = ["ServiceError", "ServiceResult", "SessionContext", "SessionController"]
