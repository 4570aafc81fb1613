from datetime import datetime, timezone
from app.infrastructure.tools.base import BaseTool
from app.core.logger import log

class TimestampTool(BaseTool):
    """
    Tool returning the current wall-clock time.
    """

    @property
    def name(self) -> str:
        return "get_timestamp"

    @property
    def description(self) -> str:
        return "Get the current timestamp"

    def execute(self) -> str:
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        log.log("TOOL", f"get_timestamp called: {timestamp}")
        return f"Current timestamp: {timestamp}"
