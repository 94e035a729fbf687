"""
Person tools: single enrichment, bulk enrichment and people search.
"""
from ..base import SEARCH_INVALID_MESSAGE, search_input_schema
from ..builders import build_bulk_person_enrich, build_person_enrich, build_search
from ..schemas import ToolDefinition
from ..validators import validate_bulk_person_enrich, validate_person_enrich, validate_search

ENRICH_PERSON_SCHEMA = {
    "type": "object",
    "properties": {
        "email": {
            "type": "string",
            "description": "Email address of the person",
        },
        "phone": {
            "type": "string",
            "description": "Phone number of the person",
        },
        "name": {
            "type": "string",
            "description": "Full name of the person",
        },
        "profile": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Social media profile URLs of the person",
        },
        "location": {
            "type": "string",
            "description": "Location of the person (city, state, country)",
        },
        "company": {
            "type": "string",
            "description": "Company name where the person works",
        },
        "title": {
            "type": "string",
            "description": "Job title of the person",
        },
        "min_likelihood": {
            "type": "number",
            "description": "Minimum likelihood score (0-1) for the match",
            "minimum": 0,
            "maximum": 1,
        },
    },
    "anyOf": [
        {"required": ["email"]},
        {"required": ["phone"]},
        {"required": ["name"]},
        {"required": ["profile"]},
    ],
}

BULK_PERSON_ENRICH_SCHEMA = {
    "type": "object",
    "properties": {
        "requests": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "params": {
                        "type": "object",
                        "description": "Parameters for person enrichment",
                    },
                },
                "required": ["params"],
            },
            "description": "Array of person enrichment requests",
        },
    },
    "required": ["requests"],
}


def definitions() -> list[ToolDefinition]:
    """Person tool definitions, in advertised order."""
    return [
        ToolDefinition(
            name="enrich_person",
            description="Enrich a person profile with additional data from People Data Labs",
            inputSchema=ENRICH_PERSON_SCHEMA,
            validator=validate_person_enrich,
            builder=build_person_enrich,
            invalid_message=(
                "Invalid person enrichment parameters. Must provide at least one "
                "identifier (email, phone, name, or profile)."
            ),
        ),
        ToolDefinition(
            name="search_people",
            description="Search for people matching specific criteria",
            inputSchema=search_input_schema("people"),
            validator=validate_search,
            builder=build_search("person"),
            invalid_message=SEARCH_INVALID_MESSAGE,
        ),
        ToolDefinition(
            name="bulk_person_enrich",
            description="Enrich multiple person profiles in a single request",
            inputSchema=BULK_PERSON_ENRICH_SCHEMA,
            validator=validate_bulk_person_enrich,
            builder=build_bulk_person_enrich,
            invalid_message=(
                "Invalid bulk person enrichment parameters. Must provide an array of requests."
            ),
        ),
    ]
