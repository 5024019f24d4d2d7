"""Tests for restic_restore_action.kube helpers."""

import argparse
import io

from restic_restore_action.buildinfo import DEFAULT_IMAGE_REPOSITORY
from restic_restore_action.kube import (
    add_common_args,
    build_field_ref_env,
    build_init_container,
    build_restore_volume_mounts,
    dump_manifest,
    load_manifest,
)


# -- build_field_ref_env -------------------------------------------------------

def test_build_field_ref_env_empty():
    assert build_field_ref_env([]) == []


def test_build_field_ref_env():
    result = build_field_ref_env([("POD_NAME", "metadata.name")])
    assert result == [
        {"name": "POD_NAME", "valueFrom": {"fieldRef": {"fieldPath": "metadata.name"}}},
    ]


# -- build_restore_volume_mounts ------------------------------------------------

def test_build_restore_volume_mounts_keeps_order():
    mounts = build_restore_volume_mounts(["data", "logs"])
    assert mounts == [
        {"name": "data", "mountPath": "/restores/data"},
        {"name": "logs", "mountPath": "/restores/logs"},
    ]


# -- build_init_container ------------------------------------------------------

def test_build_init_container():
    container = build_init_container("helper:1", "uid-1", {"data": "snap-1"})
    assert container["name"] == "restic-wait"
    assert container["image"] == "helper:1"
    assert container["args"] == ["uid-1"]
    assert [e["name"] for e in container["env"]] == ["POD_NAMESPACE", "POD_NAME"]
    assert container["volumeMounts"] == [{"name": "data", "mountPath": "/restores/data"}]


def test_build_init_container_without_volumes():
    container = build_init_container("helper:1", "uid-1", [])
    assert container["volumeMounts"] == []


# -- add_common_args -----------------------------------------------------------

def test_add_common_args_defaults(monkeypatch):
    monkeypatch.delenv("RESTIC_RESTORE_HELPER_IMAGE", raising=False)
    monkeypatch.delenv("RESTIC_RESTORE_HELPER_REPOSITORY", raising=False)
    args = add_common_args(argparse.ArgumentParser()).parse_args([])
    assert args.image is None
    assert args.image_repository == DEFAULT_IMAGE_REPOSITORY


def test_add_common_args_env_defaults(monkeypatch):
    monkeypatch.setenv("RESTIC_RESTORE_HELPER_IMAGE", "mirror/wait:1")
    monkeypatch.setenv("RESTIC_RESTORE_HELPER_REPOSITORY", "mirror/wait")
    args = add_common_args(argparse.ArgumentParser()).parse_args([])
    assert args.image == "mirror/wait:1"
    assert args.image_repository == "mirror/wait"


# -- load_manifest / dump_manifest ---------------------------------------------

def test_load_manifest_yaml():
    manifest = load_manifest(io.StringIO("kind: Pod\nmetadata:\n  name: demo\n"))
    assert manifest == {"kind": "Pod", "metadata": {"name": "demo"}}


def test_load_manifest_json():
    assert load_manifest(io.StringIO('{"kind": "Pod"}')) == {"kind": "Pod"}


def test_dump_manifest_keeps_key_order(capsys):
    dump_manifest({"kind": "Pod", "apiVersion": "v1"})
    assert capsys.readouterr().out == "kind: Pod\napiVersion: v1\n"
