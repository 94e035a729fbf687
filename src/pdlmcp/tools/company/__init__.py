"""
Company tools: enrichment and company search.
"""
from ..base import SEARCH_INVALID_MESSAGE, search_input_schema
from ..builders import build_company_enrich, build_search
from ..schemas import ToolDefinition
from ..validators import validate_company_enrich, validate_search

ENRICH_COMPANY_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "Name of the company",
        },
        "website": {
            "type": "string",
            "description": "Website of the company",
        },
        "profile": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Social media profile URLs of the company",
        },
        "ticker": {
            "type": "string",
            "description": "Stock ticker symbol of the company",
        },
    },
    "anyOf": [
        {"required": ["name"]},
        {"required": ["website"]},
        {"required": ["profile"]},
        {"required": ["ticker"]},
    ],
}


def definitions() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name="enrich_company",
            description="Enrich a company profile with additional data",
            inputSchema=ENRICH_COMPANY_SCHEMA,
            validator=validate_company_enrich,
            builder=build_company_enrich,
            invalid_message=(
                "Invalid company enrichment parameters. Must provide at least one "
                "identifier (name, website, profile, or ticker)."
            ),
        ),
        ToolDefinition(
            name="search_companies",
            description="Search for companies matching specific criteria",
            inputSchema=search_input_schema("companies"),
            validator=validate_search,
            builder=build_search("company"),
            invalid_message=SEARCH_INVALID_MESSAGE,
        ),
    ]
