"""
Argument validators, one per tool family.

Each validator inspects the raw arguments of a tools/call and returns a
ValidationResult. Validators never raise; turning a reject into an error
is the dispatcher's job.
"""
from typing import Any

from .schemas import ValidationResult

MIN_SIZE = 1
MAX_SIZE = 100

PERSON_IDENTIFIERS = ("email", "phone", "name", "profile")
COMPANY_IDENTIFIERS = ("name", "website", "profile", "ticker")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def _check_size(args: dict[str, Any]) -> ValidationResult:
    """Optional `size` must be a number in [MIN_SIZE, MAX_SIZE]."""
    if "size" not in args:
        return ValidationResult.ok()
    size = args["size"]
    if not _is_number(size) or not MIN_SIZE <= size <= MAX_SIZE:
        return ValidationResult.reject(f"size must be a number between {MIN_SIZE} and {MAX_SIZE}")
    return ValidationResult.ok()


def _check_identifiers(args: dict[str, Any], identifiers: tuple[str, ...]) -> ValidationResult:
    """At least one identifier: `profile` as a non-empty list, the rest as strings."""
    for field in identifiers:
        value = args.get(field)
        present = _is_non_empty_list(value) if field == "profile" else isinstance(value, str)
        if present:
            return ValidationResult.ok()
    names = ", ".join(identifiers[:-1]) + " or " + identifiers[-1]
    return ValidationResult.reject(f"missing identifier: one of {names} is required")


def validate_person_enrich(args: Any) -> ValidationResult:
    if not isinstance(args, dict):
        return ValidationResult.reject("arguments must be an object")

    verdict = _check_identifiers(args, PERSON_IDENTIFIERS)
    if not verdict:
        return verdict

    if "min_likelihood" in args:
        likelihood = args["min_likelihood"]
        if not _is_number(likelihood) or not 0 <= likelihood <= 1:
            return ValidationResult.reject("min_likelihood must be a number between 0 and 1")

    return ValidationResult.ok()


def validate_company_enrich(args: Any) -> ValidationResult:
    if not isinstance(args, dict):
        return ValidationResult.reject("arguments must be an object")

    return _check_identifiers(args, COMPANY_IDENTIFIERS)


def validate_search(args: Any) -> ValidationResult:
    """Shared by every search_* tool."""
    if not isinstance(args, dict):
        return ValidationResult.reject("arguments must be an object")
    if not isinstance(args.get("query"), str):
        return ValidationResult.reject("query must be a string")
    return _check_size(args)


def validate_bulk_person_enrich(args: Any) -> ValidationResult:
    # Elements are validated by the remote API, not here.
    if not isinstance(args, dict) or not _is_non_empty_list(args.get("requests")):
        return ValidationResult.reject("requests must be a non-empty array")
    return ValidationResult.ok()


def validate_autocomplete(args: Any) -> ValidationResult:
    if not isinstance(args, dict):
        return ValidationResult.reject("arguments must be an object")
    if not args.get("field"):
        return ValidationResult.reject("field is required")
    if not args.get("text"):
        return ValidationResult.reject("text is required")
    return _check_size(args)
