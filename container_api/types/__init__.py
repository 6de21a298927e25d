"""Типизированные наборы параметров и ответов Engine API."""

from container_api.types.common import AuthConfig, ContainerConfig, FilterArgs, Ulimit
from container_api.types.containers import (
    ContainerAttachOptions,
    ContainerCommitOptions,
    ContainerExecInspect,
    ContainerListOptions,
    ContainerLogsOptions,
    ContainerRemoveOptions,
    CopyToContainerOptions,
    ResizeOptions,
)
from container_api.types.hijack import CloseWriter, HijackedResponse
from container_api.types.images import (
    ImageBuildOptions,
    ImageBuildResponse,
    ImageCreateOptions,
    ImageImportOptions,
    ImageListOptions,
    ImagePullOptions,
    ImagePushOptions,
    ImageRemoveOptions,
    ImageSearchOptions,
    ImageTagOptions,
)
from container_api.types.system import EventsOptions, Version, VersionResponse

__all__ = [
    "AuthConfig",
    "CloseWriter",
    "ContainerAttachOptions",
    "ContainerCommitOptions",
    "ContainerConfig",
    "ContainerExecInspect",
    "ContainerListOptions",
    "ContainerLogsOptions",
    "ContainerRemoveOptions",
    "CopyToContainerOptions",
    "EventsOptions",
    "FilterArgs",
    "HijackedResponse",
    "ImageBuildOptions",
    "ImageBuildResponse",
    "ImageCreateOptions",
    "ImageImportOptions",
    "ImageListOptions",
    "ImagePullOptions",
    "ImagePushOptions",
    "ImageRemoveOptions",
    "ImageSearchOptions",
    "ImageTagOptions",
    "ResizeOptions",
    "Ulimit",
    "Version",
    "VersionResponse",
]
