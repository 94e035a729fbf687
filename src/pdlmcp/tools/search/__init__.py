"""
Search tools for the remaining PDL datasets (schools, locations, job titles, skills).
"""
from ..base import SEARCH_INVALID_MESSAGE, search_input_schema
from ..builders import build_search
from ..schemas import ToolDefinition
from ..validators import validate_search

# tool name -> (PDL dataset, subject used in the description)
SEARCH_TOOLS = {
    "search_schools": ("school", "schools"),
    "search_locations": ("location", "locations"),
    "search_job_titles": ("job_title", "job titles"),
    "search_skills": ("skill", "skills"),
}


def definitions() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name=name,
            description=f"Search for {subject} matching specific criteria",
            inputSchema=search_input_schema(subject),
            validator=validate_search,
            builder=build_search(data_type),
            invalid_message=SEARCH_INVALID_MESSAGE,
        )
        for name, (data_type, subject) in SEARCH_TOOLS.items()
    ]
