"""Shared utilities for restic-restore-action."""

import logging


def setup_logging(level=logging.INFO):
    """Configure root logger with a consistent format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def namespace_and_name(pod):
    """Return "namespace/name" for a pod, or just the name if unnamespaced."""
    name = pod.metadata.name or ""
    if pod.metadata.namespace:
        return f"{pod.metadata.namespace}/{name}"
    return name
