"""Dispatch of resolved build contexts to the trigger endpoint."""

from __future__ import annotations

from .client import DispatchClient
from .config import DEFAULT_DISPATCH_URL, DispatchConfig
from .errors import DispatchConfigError, DispatchError, MetadataValidationError
from .metadata import parse_metadata
from .payload import Build, Origin, TriggerPayload, build_trigger_payload

__all__ = [
    "DEFAULT_DISPATCH_URL",
    "Build",
    "DispatchClient",
    "DispatchConfig",
    "DispatchConfigError",
    "DispatchError",
    "MetadataValidationError",
    "Origin",
    "TriggerPayload",
    "build_trigger_payload",
    "parse_metadata",
]
