"""Artifact writing exports."""

from .artifact_paths import ArtifactPaths, resolve_artifact_paths
from .artifact_writer import write_artifact

__all__ = ["ArtifactPaths", "resolve_artifact_paths", "write_artifact"]
