import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from core.catalog import TOOL_SPECS, list_tools
from core.config import Settings
from core.prompts import DEFAULT_FIRST_MESSAGE, DEFAULT_PROMPT
from tests.fakes import API_URL, RecordingTransport
from tools.mcp_server import SERVER_NAME, create_server


@pytest.fixture
def transport():
    return RecordingTransport(body={"success": True, "callSid": "CA-MCP"})


@pytest.fixture
def server(transport):
    return create_server(Settings(api_url=API_URL), transport=transport)


def test_server_identity(server):
    assert server.name == SERVER_NAME == "outbound-call-server"


@pytest.mark.asyncio
async def test_tools_are_listed_from_catalog(server):
    async with Client(server) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}

    assert set(tools) == {spec.name for spec in TOOL_SPECS}
    for spec in TOOL_SPECS:
        listed = tools[spec.name]
        assert listed.description == spec.description
        assert listed.input_schema["required"] == [p.name for p in spec.parameters if p.required]
        for param in spec.parameters:
            prop = listed.input_schema["properties"][param.name]
            assert prop["description"] == param.description
            if param.default is not None:
                assert prop["default"] == param.default


@pytest.mark.asyncio
async def test_make_outbound_call_over_mcp(server, transport):
    async with Client(server) as client:
        result = await client.call_tool("make_outbound_call", {"number": "+15551234567"})

    text = result.content[0].text
    assert "CA-MCP" in text
    assert transport.sent_payloads()[0]["number"] == "+15551234567"


@pytest.mark.asyncio
async def test_call_patient_over_mcp(server, transport):
    async with Client(server) as client:
        result = await client.call_tool(
            "call_patient_by_id", {"patient_id": "67890", "call_purpose": "medication reminder"}
        )

    text = result.content[0].text
    assert "Sarah Williams" in text
    assert "medication reminder" in transport.sent_payloads()[0]["prompt"]


@pytest.mark.asyncio
async def test_unknown_tool_is_a_protocol_error(server, transport):
    async with Client(server) as client:
        with pytest.raises(ToolError):
            await client.call_tool("cancel_call", {})

    assert transport.requests == []


@pytest.mark.asyncio
async def test_patient_directory_file_is_used(tmp_path, transport):
    path = tmp_path / "patients.json"
    path.write_text(
        '[{"id": "P1", "name": "Test Person", "phoneNumber": "+10000000000",'
        ' "lastAppointment": "2025-01-01", "nextAppointmentDue": "2025-06-01",'
        ' "doctor": "Dr. Who", "department": "Time"}]'
    )
    server = create_server(
        Settings(api_url=API_URL, patient_directory_path=str(path)), transport=transport
    )

    async with Client(server) as client:
        result = await client.call_tool("get_patient_details", {"patient_id": "12345"})

    text = result.content[0].text
    assert "Available test patient IDs: P1" in text


@pytest.mark.asyncio
async def test_listing_serves_catalog_schemas_verbatim(server):
    async with Client(server) as client:
        tools = await client.list_tools()

    served = [
        {"name": t.name, "description": t.description, "inputSchema": t.input_schema}
        for t in tools
    ]
    assert served == list_tools()


@pytest.mark.asyncio
@pytest.mark.parametrize("arguments", [{}, {"number": None}, {"number": "  "}])
async def test_missing_number_reaches_the_tool_over_mcp(server, transport, arguments):
    async with Client(server) as client:
        result = await client.call_tool("make_outbound_call", arguments)

    text = result.content[0].text
    assert "❌ Failed to initiate call to" in text
    assert "Phone number is required" in text
    assert transport.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("tool_name", ["get_patient_details", "call_patient_by_id"])
async def test_missing_patient_id_reaches_the_tool_over_mcp(server, transport, tool_name):
    async with Client(server) as client:
        result = await client.call_tool(tool_name, {})

    assert "Patient ID is required" in result.content[0].text
    assert transport.requests == []


@pytest.mark.asyncio
async def test_extra_arguments_are_ignored(server, transport):
    async with Client(server) as client:
        result = await client.call_tool(
            "make_outbound_call", {"number": "+15551234567", "voice": "alloy"}
        )

    assert "CA-MCP" in result.content[0].text
    assert transport.sent_payloads()[0] == {
        "number": "+15551234567",
        "prompt": DEFAULT_PROMPT,
        "first_message": DEFAULT_FIRST_MESSAGE,
    }
