"""Restic snapshot annotations recorded on pods at backup time."""

# Annotation keys are "<prefix><volume name>", values are restic snapshot IDs.
POD_ANNOTATION_PREFIX = "snapshot.velero.io/"

# Name of the init-container that waits for restic restores to complete.
# Its presence on a pod is what makes the restore action idempotent.
INIT_CONTAINER = "restic-wait"

# Directory inside the init-container where restored volumes are mounted.
RESTORE_MOUNT_ROOT = "/restores"


def get_pod_snapshot_annotations(pod):
    """Return a volume name -> snapshot ID mapping for a typed pod.

    Entries are ordered by volume name. An empty dict means the pod has no
    restic snapshots to restore.
    """
    annotations = pod.metadata.annotations or {}
    snapshots = {}
    for key in sorted(annotations):
        if key.startswith(POD_ANNOTATION_PREFIX):
            snapshots[key[len(POD_ANNOTATION_PREFIX):]] = annotations[key]
    return snapshots


def set_pod_snapshot_annotation(item, volume_name, snapshot_id):
    """Record a volume's snapshot ID on an unstructured pod manifest."""
    metadata = item.setdefault("metadata", {})
    annotations = metadata.get("annotations")
    if annotations is None:
        annotations = metadata["annotations"] = {}
    annotations[POD_ANNOTATION_PREFIX + volume_name] = snapshot_id
    return item


def restore_mount_path(volume_name):
    """Path at which a volume is mounted in the restic-wait init-container."""
    return f"{RESTORE_MOUNT_ROOT}/{volume_name}"
