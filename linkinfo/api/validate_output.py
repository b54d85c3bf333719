"""Check a linkinfo command's output against its registered schema."""

from collections.abc import Callable
from typing import Any

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate the output of a cmd_* function.

    The schema key comes from where the command lives:
    linkinfo.api.link.cmd_with_ext resolves to ("link", "with_ext"). Functions
    outside linkinfo.api, functions not named cmd_*, and commands with no
    registered schema pass through unchanged.

    Returns:
        The output as dumped by the schema, with defaults such as empty
        errors and warnings lists filled in

    Raises:
        ValueError: If the output does not match the schema
    """
    module_parts = func.__module__.split(".")
    if len(module_parts) < 3 or module_parts[:2] != ["linkinfo", "api"]:
        return output

    domain = module_parts[2]
    if not func.__name__.startswith("cmd_"):
        return output
    command_name = func.__name__.removeprefix("cmd_")

    schema_class = get_output_schema(domain, command_name)
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(f"Output validation failed for {domain}.{command_name}: {e}\nGot output: {output}") from e
