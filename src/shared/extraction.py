"""Tolerant JSON extraction and schema validation for model responses.

## Why Outermost-Brace Scanning

Gemini is told to return "only the JSON object", but it often wraps the
object in prose ("Sure! {...} Hope that helps."). The payload is taken to
be everything from the first `{` to the last `}`. This tolerates leading
and trailing commentary, and it is knowingly fooled when the prose after
the object contains another `}` (or the prose before it a `{`): the slice
then is not valid JSON and extraction fails with MalformedJson. No repair
is attempted.

## Data Flow

1. Raw text from the generation client (may be None)
2. find_json_span() -> JsonSpan or None
3. json.loads() on the span
4. schema.model_validate() on the parsed value
5. Validated pydantic model, or one ExtractionError subclass describing
   exactly which step failed and why
"""

import json
from dataclasses import dataclass
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from src.config import GEMINI_MODEL
from src.shared.files import setup_logging
from src.shared.gemini_client import GeminiError, generate_content

T = TypeVar("T", bound=BaseModel)

logger = setup_logging(__name__)


# ============================================================================
# Errors
# ============================================================================

class ExtractionError(Exception):
    """Base class for every way a structured response can fail."""

    kind = "ExtractionError"

    def describe(self) -> str:
        """Human-readable diagnostic, including offending data where known."""
        return f"{self.kind}: {self}"


class EmptyResponse(ExtractionError):
    """The endpoint returned no text."""

    kind = "EmptyResponse"

    def __init__(self, message: str = "Model returned no text."):
        super().__init__(message)


class NoJsonFound(ExtractionError):
    """No `{ ... }` span exists in the response text."""

    kind = "NoJsonFound"

    def __init__(self, text: str):
        self.text = text
        super().__init__("Could not find a valid JSON object in the response")

    def describe(self) -> str:
        return f"{self.kind}: {self} (text: {self.text!r})"


class MalformedJson(ExtractionError):
    """The brace span is not valid JSON syntax.

    ``cause`` is the parser error: a ValueError for bad syntax (including
    the non-JSON constants NaN and Infinity) or a RecursionError for
    nesting too deep to decode.
    """

    kind = "MalformedJson"

    def __init__(self, payload: str, cause: Exception):
        self.payload = payload
        self.cause = cause
        super().__init__(f"Failed to parse JSON string: {cause}")

    def describe(self) -> str:
        return f"{self.kind}: {self} (payload: {self.payload!r})"


@dataclass(frozen=True)
class FieldViolation:
    """One field-level schema mismatch.

    Attributes:
        path: Dotted location, e.g. "elements.2.type". "<root>" for the
            object itself.
        reason: Validator message for that location.
    """

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class SchemaViolation(ExtractionError):
    """Valid JSON whose shape does not match the expected schema."""

    kind = "SchemaViolation"

    def __init__(self, schema_name: str, violations: list[FieldViolation], payload: Any = None):
        self.schema_name = schema_name
        self.violations = violations
        self.payload = payload
        summary = "; ".join(str(v) for v in violations)
        super().__init__(f"{schema_name} validation failed: {summary}")

    @property
    def paths(self) -> list[str]:
        return [v.path for v in self.violations]

    def describe(self) -> str:
        return f"{self.kind}: {self} (payload: {json.dumps(self.payload, ensure_ascii=False)})"


class TransportFailure(ExtractionError):
    """The endpoint call itself raised (network, auth, quota)."""

    kind = "TransportFailure"

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Generation request failed: {cause}")


# ============================================================================
# Extraction
# ============================================================================

@dataclass(frozen=True)
class JsonSpan:
    """Inclusive character span of the outermost braces in a text."""

    start: int
    end: int
    text: str


def find_json_span(text: str) -> Optional[JsonSpan]:
    """Locate the first `{` and the last `}`.

    Returns:
        JsonSpan covering both braces, or None when either brace is missing
        or the last `}` does not come after the first `{`.

    Example:
        >>> find_json_span('Sure! {"a": 1} ok').text
        '{"a": 1}'
        >>> find_json_span('} nothing {') is None
        True
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or start >= end:
        return None
    return JsonSpan(start=start, end=end, text=text[start:end + 1])


def _reject_constant(token: str):
    # json.loads accepts NaN, Infinity and -Infinity; JSON does not
    raise ValueError(f"Invalid JSON constant: {token}")


def _format_loc(loc: tuple) -> str:
    if not loc:
        return "<root>"
    return ".".join(str(part) for part in loc)


def validate_payload(parsed: Any, schema: Type[T]) -> T:
    """Validate an already-parsed JSON value against ``schema``.

    Raises:
        SchemaViolation: With one FieldViolation per pydantic error.
    """
    try:
        return schema.model_validate(parsed)
    except PydanticValidationError as e:
        violations = [
            FieldViolation(path=_format_loc(err["loc"]), reason=err["msg"])
            for err in e.errors()
        ]
        raise SchemaViolation(schema.__name__, violations, payload=parsed) from e


def extract_and_validate(raw_text: Optional[str], schema: Type[T]) -> T:
    """Extract the embedded JSON object from model output and validate it.

    Args:
        raw_text: Raw model output. None means the endpoint produced no text.
        schema: Pydantic model describing the expected shape.

    Returns:
        Validated instance of ``schema``; values are not otherwise transformed.

    Raises:
        EmptyResponse: raw_text is None or empty.
        NoJsonFound: No ordered `{ ... }` span.
        MalformedJson: The span is not valid JSON, or is nested too deeply
            to decode.
        SchemaViolation: The JSON does not match ``schema``.
    """
    if not raw_text:
        raise EmptyResponse()

    span = find_json_span(raw_text)
    if span is None:
        raise NoJsonFound(raw_text)

    try:
        parsed = json.loads(span.text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise MalformedJson(span.text, e) from e

    return validate_payload(parsed, schema)


def request_structured(
    prompt: str,
    schema: Type[T],
    system_instruction: Optional[str] = None,
    model: str = GEMINI_MODEL,
    api_key: Optional[str] = None,
    log_raw: bool = False,
) -> T:
    """Run one generation call and return its validated structured result.

    There is no re-prompting: a malformed or non-conforming answer is
    reported, not retried.

    Args:
        prompt: User prompt.
        schema: Pydantic model the answer must match.
        system_instruction: Optional system instruction.
        model: Gemini model ID.
        api_key: Overrides GOOGLE_API_KEY from config.
        log_raw: Log the raw model output before extraction.

    Raises:
        TransportFailure: The generation call raised GeminiError.
        EmptyResponse, NoJsonFound, MalformedJson, SchemaViolation: See
            extract_and_validate().
    """
    try:
        raw_text = generate_content(
            prompt,
            system_instruction=system_instruction,
            model=model,
            api_key=api_key,
        )
    except GeminiError as e:
        raise TransportFailure(e) from e

    if log_raw and raw_text:
        logger.info(f"Raw model output before JSON extraction:\n{raw_text}")

    return extract_and_validate(raw_text, schema)
