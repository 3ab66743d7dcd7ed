"""Format instructions and validation for structured model output."""

import json
import re
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from menu_planner.domain.errors import SchemaValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

ROOT_PATH = "<root>"

_FENCE_RE = re.compile(r"```[\w+-]*[^\S\n]*\n?(.*?)```", re.DOTALL)

_DECODER = json.JSONDecoder()

_NOT_FOUND = object()

_INSTRUCTIONS = (
    "Answer with a single JSON value that conforms to the JSON Schema below. "
    "Every field listed under \"required\" must be present, every value must "
    "have the declared type, and no trailing commas are allowed. "
    "The schema describes the shape of your answer; do not repeat the schema "
    "itself. Wrap your answer in a markdown code block that starts with "
    "```json and ends with ```.\n\n"
    "Here is the JSON Schema your answer must conform to:\n"
    "```json\n{schema}\n```"
)


def format_instructions(schema: type[BaseModel]) -> str:
    """Describe the expected output shape for embedding into a prompt."""
    document = json.dumps(schema.model_json_schema(), ensure_ascii=False)
    return _INSTRUCTIONS.format(schema=document)


def parse(schema: type[ModelT], raw_text: str) -> ModelT:
    """Parse raw model output into ``schema`` or raise SchemaValidationError.

    A fenced code block or a bare JSON document is validated as-is. Otherwise
    the text is scanned for a JSON value starting at each occurrence of the
    schema's opening bracket, and the first one that validates is returned.
    """
    text = raw_text.strip()
    if not text:
        raise SchemaValidationError(ROOT_PATH, "empty output")

    payload = _decode_document(text)
    if payload is not _NOT_FOUND:
        return _validate(schema, payload)
    return _scan(schema, text)


def _decode_document(text: str) -> object:
    """Decode the first parseable fenced block, else the whole text."""
    for match in _FENCE_RE.finditer(text):
        try:
            return json.loads(match.group(1))
        except json.JSONDecodeError:
            continue
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _NOT_FOUND


def _scan(schema: type[ModelT], text: str) -> ModelT:
    """Return the first embedded JSON value in ``text`` that validates."""
    opener = _opener(schema)
    first_error: SchemaValidationError | None = None
    start = text.find(opener)
    while start != -1:
        try:
            value, _ = _DECODER.raw_decode(text, start)
        except json.JSONDecodeError:
            pass
        else:
            try:
                return _validate(schema, value)
            except SchemaValidationError as exc:
                first_error = first_error or exc
        start = text.find(opener, start + 1)
    if first_error is not None:
        raise first_error
    raise SchemaValidationError(ROOT_PATH, "no valid JSON value found in output")


def _validate(schema: type[ModelT], payload: object) -> ModelT:
    """Validate a decoded payload against ``schema``."""
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        error = exc.errors()[0]
        raise SchemaValidationError(_format_path(error["loc"]), error["msg"]) from exc


def _opener(schema: type[BaseModel]) -> str:
    """Return the first character of a JSON value matching ``schema``."""
    if schema.model_json_schema().get("type") == "array":
        return "["
    return "{"


def _format_path(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a dotted path."""
    if not loc:
        return ROOT_PATH
    return ".".join(str(part) for part in loc)
