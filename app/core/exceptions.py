class RelayException(Exception):
    """Base exception for the relay application."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class AgentInvocationError(RelayException):
    """Raised when the agent client fails to produce a result."""
    pass

class ToolRegistrationError(RelayException):
    """Raised when a tool name is already taken in the registry."""
    pass
