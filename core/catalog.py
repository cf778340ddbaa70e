# =============================================================================
# core/catalog.py  —  Tool Catalog (declarative table)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares the three tools this server offers, with their descriptions and
#   parameter schemas.  The table is built once at import time and is
#   immutable: listing tools always returns the same catalog, no matter what
#   has been called before.
#
# TOOL NAMING CONVENTIONS:
#   - get_*  → read-only retrieval (safe to retry)
#   - make_* / call_* → has an external effect (places a real phone call!)
#
# The descriptions are what the agent host's LLM reads to decide WHEN to
# call a tool, so they stay short and literal.
# =============================================================================

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from core.prompts import DEFAULT_CALL_PURPOSE, DEFAULT_FIRST_MESSAGE, DEFAULT_PROMPT

MAKE_OUTBOUND_CALL = "make_outbound_call"
GET_PATIENT_DETAILS = "get_patient_details"
CALL_PATIENT_BY_ID = "call_patient_by_id"


@dataclass(frozen=True)
class ParamSpec:
    """One accepted argument of a tool."""

    name: str
    type: str                          # JSON Schema type, e.g. "string"
    description: str
    required: bool = False
    default: Optional[Any] = None      # Only meaningful when not required

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True)
class ToolSpec:
    """A tool's name, description and parameters."""

    name: str
    description: str
    parameters: tuple[ParamSpec, ...]

    def input_schema(self) -> dict[str, Any]:
        """Render the MCP ``inputSchema`` (a JSON Schema object)."""
        return {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


# -----------------------------------------------------------------------------
# The catalog
# -----------------------------------------------------------------------------
TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name=MAKE_OUTBOUND_CALL,
        description="Initiate an outbound phone call using ElevenLabs AI agent",
        parameters=(
            ParamSpec(
                name="number",
                type="string",
                description="Phone number to call (include country code, e.g., +1234567890)",
                required=True,
            ),
            ParamSpec(
                name="prompt",
                type="string",
                description="Custom prompt/instructions for the AI agent during the call",
                default=DEFAULT_PROMPT,
            ),
            ParamSpec(
                name="first_message",
                type="string",
                description="The first message the AI agent will say when the call connects",
                default=DEFAULT_FIRST_MESSAGE,
            ),
        ),
    ),
    ToolSpec(
        name=GET_PATIENT_DETAILS,
        description="Retrieve patient details by patient ID",
        parameters=(
            ParamSpec(
                name="patient_id",
                type="string",
                description="The unique patient ID to look up",
                required=True,
            ),
        ),
    ),
    ToolSpec(
        name=CALL_PATIENT_BY_ID,
        description=(
            "Look up patient details and initiate an outbound call to schedule "
            "their appointment"
        ),
        parameters=(
            ParamSpec(
                name="patient_id",
                type="string",
                description="The unique patient ID to call",
                required=True,
            ),
            ParamSpec(
                name="call_purpose",
                type="string",
                description=(
                    "Purpose of the call (e.g., 'follow-up appointment', "
                    "'test results', 'medication reminder')"
                ),
                default=DEFAULT_CALL_PURPOSE,
            ),
        ),
    ),
)

TOOLS_BY_NAME: Mapping[str, ToolSpec] = MappingProxyType({t.name: t for t in TOOL_SPECS})


def get_tool_spec(name: str) -> ToolSpec | None:
    return TOOLS_BY_NAME.get(name)


def list_tools() -> list[dict[str, Any]]:
    """Return the catalog as MCP tool descriptors.

    A fresh list of fresh dicts each time, so callers can't edit the catalog.
    """
    return [spec.to_dict() for spec in TOOL_SPECS]
