# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the outbound call server:
# the patient directory, argument validation, payload building, the HTTP
# invoker, response formatting and the tool dispatcher.
#
# Nothing here imports FastMCP.  The MCP wiring lives in tools/, and every
# module in core/ can be exercised directly from a test or a REPL.
# =============================================================================
