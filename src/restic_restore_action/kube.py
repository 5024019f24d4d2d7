"""Shared helpers for building and (de)serializing Kubernetes manifests."""

import os

import yaml

from .buildinfo import DEFAULT_IMAGE_REPOSITORY
from .restic import INIT_CONTAINER, restore_mount_path


def build_field_ref_env(field_refs):
    """Build the env list for downward API field references.

    field_refs: iterable of (NAME, FIELD_PATH) pairs, e.g.
    ("POD_NAME", "metadata.name"). Values are resolved by the kubelet when
    the container starts.
    """
    items = []
    for name, field_path in field_refs:
        items.append({
            "name": name,
            "valueFrom": {"fieldRef": {"fieldPath": field_path}},
        })
    return items


def build_restore_volume_mounts(volume_names):
    """Build the volumeMounts list, one entry per volume being restored."""
    return [
        {"name": name, "mountPath": restore_mount_path(name)}
        for name in volume_names
    ]


def build_init_container(image, restore_uid, volume_names):
    """Build the restic-wait init-container dict.

    The container receives the restore UID as its only argument and learns
    its own pod identity through the downward API.
    """
    return {
        "name": INIT_CONTAINER,
        "image": image,
        "args": [restore_uid],
        "env": build_field_ref_env([
            ("POD_NAMESPACE", "metadata.namespace"),
            ("POD_NAME", "metadata.name"),
        ]),
        "volumeMounts": build_restore_volume_mounts(volume_names),
    }


def add_common_args(parser):
    """Add helper image arguments to an argparse parser."""
    image_group = parser.add_argument_group("Helper image options")
    image_group.add_argument(
        "--image",
        default=os.environ.get("RESTIC_RESTORE_HELPER_IMAGE"),
        help="Full restic-wait image reference, overrides --image-repository"
        " and the version tag (env: RESTIC_RESTORE_HELPER_IMAGE)",
    )
    image_group.add_argument(
        "--image-repository",
        default=os.environ.get(
            "RESTIC_RESTORE_HELPER_REPOSITORY", DEFAULT_IMAGE_REPOSITORY
        ),
        help="Repository of the restic-wait image, tagged with this project's"
        " version (env: RESTIC_RESTORE_HELPER_REPOSITORY)",
    )
    return parser


def load_manifest(stream):
    """Parse a single YAML (or JSON) manifest document from *stream*."""
    return yaml.safe_load(stream)


def dump_manifest(manifest):
    """Serialize a manifest dict to YAML and print to stdout."""
    print(yaml.dump(manifest, default_flow_style=False, sort_keys=False), end="")
