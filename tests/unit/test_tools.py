from datetime import datetime
import pytest
from app.core.exceptions import ToolRegistrationError
from app.infrastructure.tools.clock import TimestampTool
from app.infrastructure.tools.registry import ToolRegistry, registry

def test_timestamp_tool_returns_iso_time():
    result = TimestampTool().execute()

    assert result.startswith("Current timestamp: ")
    parsed = datetime.fromisoformat(result.split(": ", 1)[1])
    assert parsed.tzinfo is not None

def test_default_registry_has_only_timestamp():
    assert registry.list_tools() == ["get_timestamp"]

def test_registry_rejects_duplicate_names():
    tools = ToolRegistry()

    with pytest.raises(ToolRegistrationError):
        tools.register(TimestampTool())

def test_empty_registry():
    tools = ToolRegistry(defaults=False)

    assert tools.list_tools() == []
    assert tools.get_agent_tools() == []

def test_agent_tools_keep_name_and_description():
    agent_tools = registry.get_agent_tools()

    assert len(agent_tools) == 1
    assert agent_tools[0].tool_name == "get_timestamp"
    assert agent_tools[0].tool_spec["description"] == "Get the current timestamp"

def test_tool_schema_without_parameters():
    schema = TimestampTool().to_schema()

    assert schema["name"] == "get_timestamp"
    assert schema["description"] == "Get the current timestamp"
    assert schema["inputSchema"]["json"] == {"type": "object", "properties": {}}
