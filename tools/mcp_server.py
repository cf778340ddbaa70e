# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the three call-server tools over MCP.  Each catalog entry in
#   core/catalog.py becomes one CatalogTool: its name, description and input
#   schema are served exactly as the catalog declares them, and its run()
#   hands the raw arguments to core/dispatcher.py.
#
# HOW IT WORKS (the flow):
#   1. The agent host lists tools ("tools/list") and reads the catalog
#   2. It calls one by name ("tools/call"), e.g. "call_patient_by_id"
#   3. FastMCP routes the call to the matching CatalogTool
#   4. The tool delegates to ToolDispatcher, which returns a ToolResponse
#   5. The host receives a single text block
#
# ARGUMENTS ARE NOT VALIDATED HERE:
#   FastMCP's function tools check arguments against the Python signature
#   before the body runs.  CatalogTool skips that, so a missing or blank
#   `number` / `patient_id` reaches core/validation.py and comes back as
#   formatted text instead of a schema error.
#
# TOOLS:
#   - make_outbound_call   → places a real phone call
#   - get_patient_details  → read-only directory lookup
#   - call_patient_by_id   → lookup, then a personalised phone call
#
# RUNNING THIS SERVER:
#     a) Via the entry point:  uv run python main.py
#     b) Standalone:           python -m tools.mcp_server
#   Either way it speaks MCP over stdio.
# =============================================================================

import logging
import sys
from typing import Annotated, Any, Optional

import httpx
from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult
from pydantic import Field
from pydantic.json_schema import SkipJsonSchema

from core.config import Settings, load_settings
from core.dispatcher import ToolDispatcher
from core.invoker import OutboundCallInvoker
from core.patients import load_directory

SERVER_NAME = "outbound-call-server"
SERVER_VERSION = "0.1.0"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout carries the MCP JSON-RPC stream.  A stray
# print() on stdout would corrupt the protocol and drop the connection.
#
# ANSI colours:
#   CYAN   → incoming requests (tool name + arguments)
#   YELLOW → status/progress
#   GREEN  → the text sent back
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("mcp")


def configure_logging(level: str = "INFO") -> None:
    """Send all diagnostics to stderr in the server's log format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the first line of the tool's answer in GREEN, then return it."""
    headline = text.splitlines()[0] if text else ""
    logger.info(f"{_GREEN}  ← {tool_name} response: {headline}{_RESET}")
    return text


# =============================================================================
# CatalogTool: one MCP tool backed by the dispatcher
# =============================================================================
class CatalogTool(Tool):
    """A FastMCP tool whose schema comes from the catalog and whose body is
    ToolDispatcher.call_tool."""

    dispatcher: Annotated[SkipJsonSchema[Any], Field(exclude=True)] = None

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments)
        response = await self.dispatcher.call_tool(self.name, arguments)
        return ToolResult(content=_log_response(self.name, response.text))


# =============================================================================
# Server factory
# =============================================================================
# create_server() wires settings → directory → invoker → dispatcher and
# registers one CatalogTool per catalog entry.  Tests call it with a mock
# HTTP transport; production goes through main() below.
# =============================================================================
def create_server(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    """Build a FastMCP server backed by a fresh ToolDispatcher.

    Args:
        settings: Runtime settings.  Read from the environment when omitted.
        transport: Optional httpx transport for the outbound-call API.

    Raises:
        DirectoryConfigError: PATIENT_DIRECTORY_PATH points at a bad file.
    """
    settings = settings or load_settings()
    directory = load_directory(settings.patient_directory_path)
    invoker = OutboundCallInvoker(settings.api_url, transport=transport)
    dispatcher = ToolDispatcher(invoker, directory)

    _log_status(f"Outbound call API: {invoker.endpoint}")
    _log_status(f"Patient directory: {len(directory)} patients ({', '.join(directory.ids())})")

    server = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    for entry in dispatcher.list_tools():
        server.add_tool(
            CatalogTool(
                name=entry["name"],
                description=entry["description"],
                parameters=entry["inputSchema"],
                dispatcher=dispatcher,
            )
        )
    return server


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    server = create_server(settings)
    logger.info("Outbound Call MCP server running on stdio")
    server.run()


# =============================================================================
# Server entry point
# =============================================================================
# python -m tools.mcp_server starts the server on stdio.  The agent host
# (any MCP client) launches this as a subprocess.
# =============================================================================
if __name__ == "__main__":
    main()
