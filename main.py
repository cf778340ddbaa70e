# =============================================================================
# main.py  —  Entry Point for the Outbound Call MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#   (or, once installed:  outbound-call-server)
#
# WHAT HAPPENS:
#   1. Loads a .env file if there is one (OUTBOUND_CALL_API_URL, ...)
#   2. Reads settings and configures stderr logging
#   3. Builds the patient directory, API invoker and tool dispatcher
#   4. Serves the tools over MCP on stdin/stdout until the host disconnects
#
# HOOKING IT UP TO AN AGENT HOST:
#   Point the host's MCP config at this script, e.g.
#
#     {"command": "uv", "args": ["run", "python", "/path/to/main.py"],
#      "env": {"OUTBOUND_CALL_API_URL": "http://localhost:8000"}}
# =============================================================================

from dotenv import load_dotenv

# Must run before settings are read so .env values are visible to os.getenv.
load_dotenv()

from tools.mcp_server import main as run_server


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
