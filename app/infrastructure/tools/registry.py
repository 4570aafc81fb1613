from typing import Any, Dict, List
from app.domain.interfaces.tools import ToolRegistryProtocol
from app.infrastructure.tools.base import BaseTool
from app.infrastructure.tools.clock import TimestampTool
from app.core.exceptions import ToolRegistrationError

class ToolRegistry(ToolRegistryProtocol):
    """
    Registry of the tools exposed to the agent.
    Built once at startup and only read afterwards.
    """
    def __init__(self, defaults: bool = True):
        self._tools: Dict[str, BaseTool] = {}
        if defaults:
            self._initialize_defaults()

    def _initialize_defaults(self):
        """Register default tools."""
        self.register(TimestampTool())

    def register(self, tool: BaseTool) -> None:
        if tool.name in self._tools:
            raise ToolRegistrationError(f"Tool '{tool.name}' is already registered.")
        self._tools[tool.name] = tool

    def list_tools(self) -> List[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def get_agent_tools(self) -> List[Any]:
        """Returns every tool wrapped for the Strands agent."""
        return [tool.to_agent_tool() for tool in self._tools.values()]

# Global instance
registry = ToolRegistry()
