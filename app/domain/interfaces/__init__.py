from .agent import AgentClient
from .tools import ToolRegistryProtocol

__all__ = ["AgentClient", "ToolRegistryProtocol"]
