"""Data models for the SSH resource."""

from ssh_resource.models.command import ExecutionResult
from ssh_resource.models.envelope import (
    CheckRequest,
    InRequest,
    InResponse,
    OutRequest,
    OutResponse,
)
from ssh_resource.models.source import Params, Source
from ssh_resource.models.version import MetadataField, Version

__all__ = [
    "CheckRequest",
    "ExecutionResult",
    "InRequest",
    "InResponse",
    "MetadataField",
    "OutRequest",
    "OutResponse",
    "Params",
    "Source",
    "Version",
]
