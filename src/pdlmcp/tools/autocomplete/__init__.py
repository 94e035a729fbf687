"""
Autocomplete tool: suggestions for a partial value of one PDL field.
"""
from ..base import size_property
from ..builders import build_autocomplete
from ..schemas import ToolDefinition
from ..validators import validate_autocomplete

AUTOCOMPLETE_FIELDS = ["company", "school", "title", "skill", "location"]

AUTOCOMPLETE_SCHEMA = {
    "type": "object",
    "properties": {
        "field": {
            "type": "string",
            "description": "Field to autocomplete (company, school, title, skill, location)",
            "enum": AUTOCOMPLETE_FIELDS,
        },
        "text": {
            "type": "string",
            "description": "Partial text to autocomplete",
        },
        "size": size_property(),
    },
    "required": ["field", "text"],
}


def definitions() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name="autocomplete",
            description="Get autocomplete suggestions for a partial query",
            inputSchema=AUTOCOMPLETE_SCHEMA,
            validator=validate_autocomplete,
            builder=build_autocomplete,
            invalid_message="Invalid autocomplete parameters. Must provide field and text.",
        ),
    ]
