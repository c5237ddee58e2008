# src/ymlreader/infrastructure/utility/pydantic_validation.py
"""
Shared Pydantic validation utilities.

Turns a ValidationError raised while building ReaderSettings (or an Entry)
into a readable message that names the offending field and, when the
field is fed from the environment, the variable to fix.
"""

from pydantic import ValidationError


def _resolve_field_name(loc: tuple) -> str:
    """Resolve a human-readable field name from a Pydantic error location."""
    if not loc:
        return "unknown"
    last = loc[-1]
    if isinstance(last, int) and len(loc) >= 2:
        return str(loc[-2])
    return str(last)


def _format_location(loc: tuple) -> str:
    parts = []
    for item in loc:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        elif parts:
            parts.append(f".{item}")
        else:
            parts.append(str(item))
    return "".join(parts) or "root"


def get_validation_action(err: dict, field_name: str, env_names: dict[str, str] | None = None) -> str:
    """
    Get actionable message for a Pydantic validation error.

    Args:
        err: Single error dict from ValidationError.errors()
        field_name: Name of the field that failed validation
        env_names: Optional mapping field -> environment variable

    Returns:
        Human-readable action to fix the error
    """
    err_type = err["type"]
    target = f"'{field_name}'"
    if env_names and field_name in env_names:
        target = f"'{field_name}' (env {env_names[field_name]})"

    if err_type == "missing":
        return f"Add {target} - it is required."
    elif err_type == "extra_forbidden":
        return f"Remove {target} - it is not a valid setting."
    elif err_type in ("int_parsing", "float_parsing"):
        expected = err_type.replace("_parsing", "")
        return f"Provide a numeric ({expected}) value for {target}."
    elif err_type.endswith("_type"):
        expected = err_type.replace("_type", "")
        return f"Provide a {expected} value for {target}."
    elif err_type in (
        "greater_than",
        "less_than",
        "greater_than_equal",
        "less_than_equal",
    ):
        return f"Adjust value of {target}."
    elif err_type in ("string_pattern_mismatch", "string_too_short", "string_too_long"):
        return f"Use only letters, digits and '_' for {target}."
    else:
        return f"Fix {target}."


def format_validation_error(
    e: ValidationError,
    context: str,
    env_names: dict[str, str] | None = None,
) -> str:
    """
    Format a Pydantic ValidationError into a readable, actionable message.

    Args:
        e: The ValidationError exception
        context: Description of what was being validated (e.g., "reader settings")
        env_names: Optional mapping field -> environment variable, used to
                   point the reader of the message at the variable to fix

    Returns:
        Formatted error message with details and suggested actions
    """
    error_details = []

    for err in e.errors():
        loc = _format_location(err["loc"])
        field_name = _resolve_field_name(err["loc"])
        action = get_validation_action(err, field_name, env_names)
        error_details.append(f"  - '{loc}': {err['msg']}\n    Action: {action}")

    return f"VALIDATION ERROR for {context}:\n\n" + "\n\n".join(error_details)
