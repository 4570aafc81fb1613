from abc import ABC, abstractmethod
from typing import Any, List, TYPE_CHECKING

if TYPE_CHECKING:
    from app.infrastructure.tools.base import BaseTool

class ToolRegistryProtocol(ABC):
    """
    Abstract interface for Tool Registry.
    Defines the contract for collecting the tools handed to the agent.
    """

    @abstractmethod
    def register(self, tool: 'BaseTool') -> None:
        """
        Add a tool to the registry.

        Raises:
            ToolRegistrationError: If a tool with the same name is registered
        """
        pass

    @abstractmethod
    def list_tools(self) -> List[str]:
        """List all registered tool names."""
        pass

    @abstractmethod
    def get_agent_tools(self) -> List[Any]:
        """
        Get every registered tool in the form the agent SDK accepts.

        Returns:
            List of SDK tool objects, one per registered tool
        """
        pass
