# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP wrapper around core/.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP protocol and the call
#   server's logic.  mcp_server.py:
#     1. Builds a ToolDispatcher from the runtime settings
#     2. Registers one FastMCP tool per catalog entry
#     3. Logs each request and response to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate arguments or format answers (core/ does that)
#   - They do NOT talk to the outbound-call API directly
# =============================================================================
