"""Extension manifest parsing and rendering.

The manifest is plain JSON data. It is deserialized and checked to be a JSON
object; it is never evaluated as code and its contents are never altered.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import RootModel, ValidationError


class ManifestError(ValueError):
    """Raised when the extension manifest is not a parseable JSON object."""


class ExtensionManifest(RootModel[dict[str, Any]]):
    """Descriptor consumed by the extension's host runtime."""

    @property
    def data(self) -> dict[str, Any]:
        return self.root

    def render(self) -> str:
        """Return the manifest as pretty-printed JSON, preserving key order."""
        return json.dumps(self.root, indent=2, ensure_ascii=False)


def parse_manifest(text: str, *, source: str = "<manifest>") -> ExtensionManifest:
    """Deserialize ``text`` into an :class:`ExtensionManifest`.

    Raises:
        ManifestError: If ``text`` is not valid JSON or is not a JSON object.
    """
    # A leading byte order mark is not part of the JSON document.
    if text.startswith("\ufeff"):
        text = text[1:]

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Manifest {source} is not valid JSON: {exc}") from exc

    try:
        return ExtensionManifest.model_validate(payload)
    except ValidationError as exc:
        raise ManifestError(
            f"Manifest {source} must be a JSON object, got {type(payload).__name__}"
        ) from exc
