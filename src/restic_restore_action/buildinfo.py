"""Build metadata used to pick the restic restore helper image."""

from importlib import metadata

DISTRIBUTION = "restic-restore-action"

DEFAULT_IMAGE_REPOSITORY = "gcr.io/heptio-images/velero-restic-restore-helper"

# Tag used when no version information is available.
DEFAULT_IMAGE_TAG = "latest"


def get_version():
    """Return the installed version of this project, or "" if unknown."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return ""


def init_container_image(version=None, repository=DEFAULT_IMAGE_REPOSITORY):
    """Return the helper image reference for *version*.

    When *version* is None it is read from the installed package metadata.
    An empty version falls back to DEFAULT_IMAGE_TAG.
    """
    if version is None:
        version = get_version()
    tag = version or DEFAULT_IMAGE_TAG
    return f"{repository}:{tag}"
