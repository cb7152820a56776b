import re
from typing import Any

from diagram_gateway.providers.base import EmptyDiagramError, InvalidResponseFormatError

# ``` optionally followed by the diagram language tag; longest tag first
FENCE_PATTERN = re.compile(r"```(?:mermaid|mer)?")


def sanitize(value: Any) -> str:
    """Strip every code-fence marker from the model output and trim it.

    Raises InvalidResponseFormatError if `value` is not a string and
    EmptyDiagramError if nothing is left once the fences are gone.
    """
    if not isinstance(value, str):
        raise InvalidResponseFormatError()
    cleaned = FENCE_PATTERN.sub("", value).strip()
    if not cleaned:
        raise EmptyDiagramError()
    return cleaned
