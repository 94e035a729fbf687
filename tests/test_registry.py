import pytest

from pdlmcp.exceptions import ToolRegistrationError
from pdlmcp.tools import ToolRegistry, build_registry
from pdlmcp.tools.builders import build_autocomplete
from pdlmcp.tools.schemas import ToolDefinition
from pdlmcp.tools.validators import validate_autocomplete

EXPECTED_TOOLS = [
    "enrich_person",
    "search_people",
    "bulk_person_enrich",
    "enrich_company",
    "search_companies",
    "search_schools",
    "search_locations",
    "search_job_titles",
    "search_skills",
    "autocomplete",
]


@pytest.fixture
def registry():
    return build_registry()


def test_all_tools_registered_in_order(registry):
    assert registry.names == EXPECTED_TOOLS
    assert len(registry) == len(EXPECTED_TOOLS)


def test_get_tool(registry):
    tool = registry.get_tool("search_skills")
    assert tool is not None
    assert tool.name == "search_skills"
    assert "search_skills" in registry


def test_get_missing(registry):
    assert registry.get_tool("nonexistent") is None
    assert "nonexistent" not in registry


def test_duplicate_register():
    tool = ToolDefinition(
        name="autocomplete",
        description="d",
        inputSchema={"type": "object"},
        validator=validate_autocomplete,
        builder=build_autocomplete,
    )
    with pytest.raises(ToolRegistrationError, match="already registered"):
        ToolRegistry([tool, tool])


def test_schemas_are_json_schema_objects(registry):
    for schema in registry.list_schemas():
        dumped = schema.model_dump()
        assert set(dumped) == {"name", "description", "inputSchema"}
        assert dumped["inputSchema"]["type"] == "object"
        assert dumped["description"]


def test_search_schema_bounds(registry):
    schema = registry.get_tool("search_people").inputSchema
    assert schema["required"] == ["query"]
    assert schema["properties"]["size"]["minimum"] == 1
    assert schema["properties"]["size"]["maximum"] == 100


def test_identifier_any_of(registry):
    person = registry.get_tool("enrich_person").inputSchema
    assert person["anyOf"] == [
        {"required": ["email"]},
        {"required": ["phone"]},
        {"required": ["name"]},
        {"required": ["profile"]},
    ]
    assert person["properties"]["min_likelihood"]["maximum"] == 1

    company = registry.get_tool("enrich_company").inputSchema
    assert len(company["anyOf"]) == 4


def test_autocomplete_field_enum(registry):
    schema = registry.get_tool("autocomplete").inputSchema
    assert schema["properties"]["field"]["enum"] == ["company", "school", "title", "skill", "location"]
    assert schema["required"] == ["field", "text"]


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry._tools["new_tool"] = registry.get_tool("autocomplete")
