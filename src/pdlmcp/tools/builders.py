"""
Request builders: validated arguments in, OutboundRequest out.

Only recognized fields are forwarded; anything else in the arguments is
dropped without complaint.
"""
from typing import Any, Mapping

from .schemas import (
    AutocompleteArgs,
    Builder,
    BulkPersonEnrichArgs,
    CompanyEnrichArgs,
    OutboundRequest,
    PersonEnrichArgs,
    SearchArgs,
)

DEFAULT_SIZE = 10

PERSON_ENRICH_FIELDS = ("email", "phone", "name", "profile", "location", "company", "title")
COMPANY_ENRICH_FIELDS = ("name", "website", "profile", "ticker")


def _pick(args: Mapping[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    """Copy the truthy values of `fields` out of `args`."""
    return {field: args[field] for field in fields if args.get(field)}


def build_person_enrich(args: PersonEnrichArgs) -> OutboundRequest:
    params = _pick(args, PERSON_ENRICH_FIELDS)
    # Forwarded whenever given, including 0.
    if "min_likelihood" in args:
        params["min_likelihood"] = args["min_likelihood"]
    return OutboundRequest(method="GET", path="/person/enrich", params=params)


def build_company_enrich(args: CompanyEnrichArgs) -> OutboundRequest:
    return OutboundRequest(
        method="GET",
        path="/company/enrich",
        params=_pick(args, COMPANY_ENRICH_FIELDS),
    )


def build_search(data_type: str) -> Builder:
    """Return a builder for GET /{data_type}/search.

    The caller-facing `query` is sent as PDL's `sql` parameter.

    Args:
        data_type: PDL dataset name, e.g. "person", "company", "job_title"
    """
    path = f"/{data_type}/search"

    def builder(args: SearchArgs) -> OutboundRequest:
        return OutboundRequest(
            method="GET",
            path=path,
            params={
                "sql": args["query"],
                "size": args.get("size") or DEFAULT_SIZE,
            },
        )

    builder.__name__ = f"build_{data_type}_search"
    return builder


def build_bulk_person_enrich(args: BulkPersonEnrichArgs) -> OutboundRequest:
    return OutboundRequest(
        method="POST",
        path="/person/bulk",
        json_body={"requests": args["requests"]},
    )


def build_autocomplete(args: AutocompleteArgs) -> OutboundRequest:
    return OutboundRequest(
        method="GET",
        path="/autocomplete",
        params={
            "field": args["field"],
            "text": args["text"],
            "size": args.get("size") or DEFAULT_SIZE,
        },
    )
