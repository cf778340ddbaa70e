# =============================================================================
# core/dispatcher.py  —  Tool Dispatcher
# =============================================================================
#
# WHAT THIS FILE DOES:
#   The single entry point for tool calls.  Given a tool name and an
#   arguments dict it runs exactly one of three flows and returns a
#   ToolResponse:
#
#     make_outbound_call   validate → build → invoke → format
#     get_patient_details  validate → lookup → format
#     call_patient_by_id   validate → lookup → {found: build → invoke ;
#                                               missing: no call} → format
#
# ERROR HANDLING:
#   - An unknown tool name raises UnknownTool.  That is the only exception
#     that leaves call_tool(); the MCP layer reports it as a protocol error.
#   - Every other failure is caught at the edge of its flow and rendered by
#     core/formatting.py, so a correctly named tool always gets text back.
#   - Nothing is retried.  One failed call doesn't affect the next.
#
# STATE:
#   The dispatcher keeps none of its own.  The patient directory is read-only
#   and the invoker opens a fresh HTTP client per call, so any number of
#   invocations can run concurrently on the event loop.
# =============================================================================

import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from core import formatting
from core.catalog import (
    CALL_PATIENT_BY_ID,
    GET_PATIENT_DETAILS,
    MAKE_OUTBOUND_CALL,
    list_tools,
)
from core.errors import OutboundCallError, UnknownTool
from core.invoker import OutboundCallInvoker
from core.models import CallRequest, ToolResponse
from core.patients import PatientDirectory
from core.payload import call_request_from_arguments
from core.prompts import DEFAULT_CALL_PURPOSE, build_patient_greeting, build_patient_prompt
from core.validation import require_patient_id

logger = logging.getLogger(__name__)

Handler = Callable[[Mapping[str, Any]], Awaitable[ToolResponse]]


class ToolDispatcher:
    """Routes tool calls to their flows."""

    def __init__(self, invoker: OutboundCallInvoker, directory: PatientDirectory):
        self.invoker = invoker
        self.directory = directory
        self._handlers: Mapping[str, Handler] = {
            MAKE_OUTBOUND_CALL: self.make_outbound_call,
            GET_PATIENT_DETAILS: self.get_patient_details,
            CALL_PATIENT_BY_ID: self.call_patient_by_id,
        }

    def list_tools(self) -> list[dict[str, Any]]:
        return list_tools()

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResponse:
        """Run the named tool.

        Args:
            name: Tool name from the catalog.
            arguments: The caller's arguments; None is treated as {}.

        Raises:
            UnknownTool: ``name`` isn't in the catalog.
        """
        handler = self._handlers.get(name)
        if handler is None:
            logger.error(f"Unknown tool requested: {name!r}")
            raise UnknownTool(name)
        return await handler(arguments or {})

    # -------------------------------------------------------------------------
    # Flow 1: make_outbound_call
    # -------------------------------------------------------------------------
    async def make_outbound_call(self, arguments: Mapping[str, Any]) -> ToolResponse:
        try:
            request = call_request_from_arguments(arguments)
            text = await self._place_call(request)
        except Exception as exc:
            _log_failure("make_outbound_call", exc)
            return ToolResponse(
                formatting.format_call_failure(
                    arguments.get("number"), exc, self.invoker.api_url
                )
            )
        return ToolResponse(text)

    async def _place_call(self, request: CallRequest) -> str:
        """Invoke the API for a built request and render the success text.

        Raises whatever the invoker raises; callers decide how to render it.
        """
        logger.info(f"Initiating call to {request.number}")
        logger.info(f"Prompt: {request.prompt}")
        logger.info(f"First message: {request.first_message}")

        result = await self.invoker.place_call(request)
        logger.info(f"Call placed to {request.number}: success={result.success} sid={result.call_sid}")
        return formatting.format_call_success(request, result)

    # -------------------------------------------------------------------------
    # Flow 2: get_patient_details
    # -------------------------------------------------------------------------
    async def get_patient_details(self, arguments: Mapping[str, Any]) -> ToolResponse:
        try:
            patient_id = require_patient_id(arguments)
        except OutboundCallError as exc:
            _log_failure("get_patient_details", exc)
            return ToolResponse(formatting.format_lookup_failure(arguments.get("patient_id"), exc))

        patient = self.directory.get(patient_id)
        if patient is None:
            logger.info(f"Patient {patient_id} not found")
            return ToolResponse(formatting.format_patient_not_found(patient_id, self.directory.ids()))
        return ToolResponse(formatting.format_patient_details(patient))

    # -------------------------------------------------------------------------
    # Flow 3: call_patient_by_id
    # -------------------------------------------------------------------------
    # Start → Lookup → Found    → Build → Invoke → {Succeeded, Failed} → Format
    #                → NotFound → Format
    # -------------------------------------------------------------------------
    async def call_patient_by_id(self, arguments: Mapping[str, Any]) -> ToolResponse:
        raw_id = arguments.get("patient_id")
        try:
            patient_id = require_patient_id(arguments)
            call_purpose = _call_purpose(arguments)

            patient = self.directory.get(patient_id)
            if patient is None:
                logger.info(f"Patient {patient_id} not found; no call placed")
                return ToolResponse(
                    formatting.format_patient_not_found(patient_id, self.directory.ids())
                )

            logger.info(f"Calling patient {patient.name} (ID: {patient_id}) for {call_purpose}")
            request = call_request_from_arguments({
                "number": patient.phone_number,
                "prompt": build_patient_prompt(patient, call_purpose),
                "first_message": build_patient_greeting(patient, call_purpose),
            })
            call_text = await self._place_call(request)
        except Exception as exc:
            _log_failure("call_patient_by_id", exc)
            return ToolResponse(formatting.format_patient_call_failure(raw_id, exc))

        return ToolResponse(formatting.format_patient_call(patient, call_purpose, call_text))


def _call_purpose(arguments: Mapping[str, Any]) -> str:
    """The caller's purpose text as given, or the default when blank."""
    value = arguments.get("call_purpose")
    if value is None or not str(value).strip():
        return DEFAULT_CALL_PURPOSE
    return str(value)


def _log_failure(tool_name: str, exc: Exception) -> None:
    if isinstance(exc, OutboundCallError):
        logger.error(f"{tool_name} failed: {exc}")
    else:
        logger.exception(f"{tool_name} failed with an unexpected error")
