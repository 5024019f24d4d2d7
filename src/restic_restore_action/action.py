"""Restore item action that gates pod startup on restic volume restores.

Pods backed up with restic carry one snapshot annotation per volume. On
restore, those volumes are empty until restic repopulates them, so the pod
gets a ``restic-wait`` init-container that blocks until the data is back.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .buildinfo import init_container_image
from .kube import build_init_container
from .models import Container, decode_pod, encode_pod
from .restic import get_pod_snapshot_annotations
from .utils import namespace_and_name

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceSelector:
    """Resources a restore item action wants to be invoked for."""

    included_resources: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RestoreItemActionExecuteOutput:
    """Result of a restore item action.

    updated_item is applied to the cluster as-is. This action never asks for
    additional items to be restored.
    """

    updated_item: Dict[str, Any]
    additional_items: Tuple[Any, ...] = field(default=())


class ResticRestoreAction:
    """Adds the restic-wait init-container to pods with restic snapshots."""

    def __init__(self, image: str, logger=None):
        self.image = image
        self.logger = logger or _logger

    @classmethod
    def from_build_info(cls, logger=None):
        """Create an action whose image is resolved from version metadata."""
        return cls(init_container_image(), logger=logger)

    def applies_to(self) -> ResourceSelector:
        return ResourceSelector(included_resources=("pods",))

    def execute(self, item, restore_uid) -> RestoreItemActionExecuteOutput:
        """Return *item* with a restic-wait init-container when required.

        Raises DecodeError if *item* is not a pod and EncodeError if the
        mutated pod cannot be converted back to an unstructured dict.
        """
        self.logger.info("Executing ResticRestoreAction")
        try:
            return self._execute(item, restore_uid)
        finally:
            self.logger.info("Done executing ResticRestoreAction")

    def _execute(self, item, restore_uid):
        pod = decode_pod(item)
        pod_id = namespace_and_name(pod)

        volume_snapshots = get_pod_snapshot_annotations(pod)
        if not volume_snapshots:
            self.logger.debug(f"[{pod_id}] No restic snapshot ID annotations found")
            return RestoreItemActionExecuteOutput(updated_item=item)

        self.logger.info(
            f"[{pod_id}] Restic snapshot ID annotations found"
            f" for volumes: {', '.join(volume_snapshots)}"
        )

        init_container = Container.model_validate(
            build_init_container(self.image, str(restore_uid), volume_snapshots)
        )
        pod.spec.initContainers = insert_init_container(
            pod.spec.initContainers or [], init_container
        )

        return RestoreItemActionExecuteOutput(updated_item=encode_pod(pod))


def insert_init_container(init_containers, init_container):
    """Return *init_containers* with *init_container* first.

    Any existing entry with the same name is dropped, so re-running a
    restore, or restoring a pod that still carries a stale helper, never
    produces a duplicate. The other entries keep their relative order.
    """
    by_name = {c.name: c for c in init_containers}
    if init_container.name not in by_name:
        return [init_container, *init_containers]
    _logger.debug(f"Replacing existing {init_container.name} init-container")
    rest = [c for c in init_containers if c.name != init_container.name]
    return [init_container, *rest]
