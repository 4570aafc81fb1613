from app.core.config import settings
from app.core.logger import log
from app.core.exceptions import (
    RelayException,
    AgentInvocationError,
    ToolRegistrationError
)

__all__ = [
    "settings",
    "log",
    "RelayException",
    "AgentInvocationError",
    "ToolRegistrationError"
]
