"""Shared test fixtures."""

import pytest

from restic_restore_action.action import ResticRestoreAction
from restic_restore_action.restic import set_pod_snapshot_annotation

IMAGE = "gcr.io/heptio-images/velero-restic-restore-helper:v0.9.0"


@pytest.fixture()
def make_pod():
    """Return a factory that builds an unstructured pod manifest.

    snapshots: volume name -> restic snapshot ID annotations to add.
    init_containers: names of pre-existing init-containers.
    Any other keyword is merged into the pod spec.
    """

    def _make_pod(
        name="demo", namespace="ns", snapshots=None, init_containers=None,
        **spec_overrides,
    ):
        pod = {
            "apiVersion": "v1",
            "kind": "Pod",
            "metadata": {"name": name, "namespace": namespace},
            "spec": {
                "containers": [{"name": "app", "image": "nginx:1.25"}],
            },
        }
        if init_containers is not None:
            pod["spec"]["initContainers"] = [
                {"name": c, "image": "busybox"} for c in init_containers
            ]
        pod["spec"].update(spec_overrides)
        for volume, snapshot_id in (snapshots or {}).items():
            set_pod_snapshot_annotation(pod, volume, snapshot_id)
        return pod

    return _make_pod


@pytest.fixture()
def action():
    return ResticRestoreAction(IMAGE)
