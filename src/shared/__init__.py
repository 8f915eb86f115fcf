# Shared utilities for the structured-output demos

from .files import (
    setup_logging,
    setup_file_logging,
    write_text_output,
)

# Gemini API client
from .gemini_client import (
    generate_content,
    GeminiError,
    APIError,
)

# JSON extraction and validation
from .extraction import (
    extract_and_validate,
    request_structured,
    find_json_span,
    JsonSpan,
    FieldViolation,
    ExtractionError,
    EmptyResponse,
    NoJsonFound,
    MalformedJson,
    SchemaViolation,
    TransportFailure,
)
