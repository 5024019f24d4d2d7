"""Typed pod model and the fallible conversion to and from unstructured dicts.

Only the fields the restore action reads or writes are modelled. Everything
else is carried through untouched as extra fields, so a decode/encode round
trip reproduces the original document.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import DecodeError, EncodeError


class KubeModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class ObjectFieldSelector(KubeModel):
    fieldPath: str


class EnvVarSource(KubeModel):
    fieldRef: Optional[ObjectFieldSelector] = None


class EnvVar(KubeModel):
    name: str
    value: Optional[str] = None
    valueFrom: Optional[EnvVarSource] = None


class VolumeMount(KubeModel):
    name: str
    mountPath: str


class Container(KubeModel):
    name: str
    image: Optional[str] = None
    args: Optional[List[str]] = None
    env: Optional[List[EnvVar]] = None
    volumeMounts: Optional[List[VolumeMount]] = None


class ObjectMeta(KubeModel):
    name: Optional[str] = None
    namespace: Optional[str] = None
    annotations: Optional[Dict[str, str]] = None


class PodSpec(KubeModel):
    containers: List[Container]
    initContainers: Optional[List[Container]] = None


class Pod(KubeModel):
    apiVersion: Optional[str] = None
    kind: Optional[str] = None
    metadata: ObjectMeta
    spec: PodSpec


def decode_pod(item) -> Pod:
    """Convert an unstructured manifest into a :class:`Pod`.

    Raises DecodeError when required fields are missing or have the wrong type.
    """
    try:
        return Pod.model_validate(item)
    except ValidationError as e:
        raise DecodeError(e) from e


def encode_pod(pod: Pod) -> dict:
    """Convert a :class:`Pod` back into a JSON-compatible unstructured dict.

    Only fields present in the decoded input, or assigned since, are emitted.
    Raises EncodeError when a value cannot be represented.
    """
    try:
        return pod.model_dump(mode="json", exclude_unset=True)
    except (ValueError, TypeError) as e:
        raise EncodeError(e) from e
