from typing import Any

from pydantic import BaseModel


def to_json(schema: BaseModel) -> dict:
    """Dump a response schema with the camelCase keys the dashboard expects."""
    return schema.model_dump(mode="json", by_alias=True)


def error_response(message: str, details: Any = None) -> dict:
    body: dict = {"error": message}
    if details is not None:
        body["details"] = details
    return body
