#!/usr/bin/env python3
"""Run the restic restore action over a pod manifest and print the result."""

import argparse
import logging
import sys

import yaml

from .action import ResticRestoreAction
from .buildinfo import init_container_image
from .errors import ConversionError
from .kube import add_common_args, dump_manifest, load_manifest
from .utils import setup_logging

_logger = logging.getLogger(__name__)

# Kind of the resources listed by ResourceSelector.included_resources.
RESOURCE_KINDS = {"pods": "Pod"}


def build_parser():
    parser = argparse.ArgumentParser(
        description="Add the restic-wait init-container to a pod manifest"
        " being restored. The result is written to stdout as YAML.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "manifest",
        nargs="?",
        default="-",
        help="Pod manifest file (YAML or JSON), '-' reads from stdin",
    )
    parser.add_argument(
        "--restore-uid",
        required=True,
        help="UID of the restore, passed to the restic-wait init-container",
    )
    add_common_args(parser)
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["error", "warning", "info", "debug"],
        help="Log level (logs go to stderr)",
    )
    return parser


def read_manifest(path):
    if path == "-":
        return load_manifest(sys.stdin)
    with open(path) as f:
        return load_manifest(f)


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level.upper()))

    image = args.image or init_container_image(repository=args.image_repository)
    action = ResticRestoreAction(image)

    try:
        item = read_manifest(args.manifest)
    except (OSError, yaml.YAMLError) as e:
        _logger.critical(f"Unable to read manifest {args.manifest}: {e}")
        sys.exit(1)

    kinds = {RESOURCE_KINDS[r] for r in action.applies_to().included_resources}
    kind = item.get("kind") if isinstance(item, dict) else None
    if kind not in kinds:
        _logger.info(f"Skipping {kind or 'unknown'} manifest, only pods are handled")
        dump_manifest(item)
        sys.exit(0)

    try:
        output = action.execute(item, args.restore_uid)
    except ConversionError as e:
        _logger.critical(f"Restic restore action failed: {e}")
        sys.exit(1)

    dump_manifest(output.updated_item)
    sys.exit(0)


if __name__ == "__main__":
    main()
