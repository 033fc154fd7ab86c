#!/usr/bin/env python3
"""
cli.py — Command line interface for jsonhash

Commands:
  apply     Write hashes into a JSON file
  validate  Check the hashes of a JSON file
  digest    Hash a raw string
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .config import ApplyConfig, HashConfig, load_config
from .errors import JsonHashError
from .hasher import JsonHash


def _fail_with_error(err: JsonHashError) -> None:
    """Print a structured error message from a ``JsonHashError`` and exit.

    Args:
        err: Hashing or validation error.

    Returns:
        None: This function terminates the process.
    """
    context = f" Context: {err.context}." if err.context else ""
    print(f"ERROR: {err.code}. {err.message}{context}")
    sys.exit(1)


def _cli_error(what: str, why: str, fix: str, see: str) -> None:
    """Print a CLI usage error and exit.

    Args:
        what: What failed.
        why: Why it failed.
        fix: Recommended remediation.
        see: Command or document reference.

    Returns:
        None: This function terminates the process.
    """
    print(f"ERROR: {what}. {why}. Fix: {fix}. (See: {see})")
    sys.exit(1)


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        _cli_error(
            "Cannot read input", str(exc), "check the path and permissions", "jsonhash --help"
        )
    return ""


def _read_json(source: str) -> Dict[str, Any]:
    try:
        data = json.loads(_read_text(source))
    except json.JSONDecodeError as exc:
        _cli_error("Input is not valid JSON", str(exc), "pass a JSON object", "README.md")
    if not isinstance(data, dict):
        _cli_error(
            "Input is not a JSON object",
            f"the top-level value is a {type(data).__name__}",
            "wrap the data in an object",
            "README.md",
        )
    return data


def _load_configs(config_path: Optional[str]) -> Tuple[HashConfig, ApplyConfig]:
    if not config_path:
        return HashConfig(), ApplyConfig()
    try:
        return load_config(config_path)
    except (OSError, ValueError) as exc:
        _cli_error("Cannot load config", str(exc), "check the config file", "README.md#cli")
    return HashConfig(), ApplyConfig()


def cmd_apply(args: argparse.Namespace) -> None:
    """Handle ``jsonhash apply``.

    Args:
        args: Parsed CLI arguments with the input path and apply options.

    Returns:
        None: Prints or writes the hashed JSON.
    """
    hash_config, apply_config = _load_configs(args.config)

    changes: Dict[str, Any] = {"in_place": True}
    if args.no_update_existing:
        changes["update_existing_hashes"] = False
    if args.no_recursive:
        changes["recursive"] = False
    if args.precision is not None:
        changes["floating_point_precision"] = args.precision
    if args.throw_on_wrong_hash:
        changes["throw_on_wrong_hash"] = True
    apply_config = apply_config.copy_with(**changes)

    data = _read_json(args.input)
    hashed = JsonHash(hash_config).apply(data, apply_config)

    if args.indent:
        output = json.dumps(hashed, indent=args.indent, ensure_ascii=False)
    else:
        output = json.dumps(hashed, separators=(",", ":"), ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        print(f"Wrote hashed JSON to {args.output} (root hash {hashed['_hash']})")
    else:
        print(output)


def cmd_validate(args: argparse.Namespace) -> None:
    """Handle ``jsonhash validate``.

    Args:
        args: Parsed CLI arguments with the input path.
    """
    hash_config, _ = _load_configs(args.config)
    data = _read_json(args.input)
    JsonHash(hash_config).validate(data)
    print(f"OK: hashes are valid (root hash {data['_hash']}).")


def cmd_digest(args: argparse.Namespace) -> None:
    """Handle ``jsonhash digest``."""
    hash_config, _ = _load_configs(args.config)
    print(JsonHash(hash_config).calc_hash(args.text))


def main() -> None:
    """CLI entrypoint.

    Parses command-line arguments and routes to a subcommand handler. Hashing
    and validation errors exit with status 1.
    """
    parser = argparse.ArgumentParser(prog="jsonhash", description="JSON Hash CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    # apply
    p_apply = sub.add_parser("apply", help="Write hashes into a JSON file")
    p_apply.add_argument("input", help="Path to JSON file, or - for stdin")
    p_apply.add_argument("-o", "--output", help="Write result to this file instead of stdout")
    p_apply.add_argument("--no-update-existing", action="store_true",
                         help="Keep objects that already carry a _hash untouched")
    p_apply.add_argument("--no-recursive", action="store_true",
                         help="Only recompute the root hash")
    p_apply.add_argument("--precision", type=int,
                         help="Decimal digits kept when hashing floats (default: 10)")
    p_apply.add_argument("--throw-on-wrong-hash", action="store_true",
                         help="Fail if an existing hash differs from the recomputed one")
    p_apply.add_argument("--indent", type=int, default=0, help="Pretty-print with this indent")
    p_apply.add_argument("--config", help="Path to JSON config file")

    # validate
    p_val = sub.add_parser("validate", help="Check the hashes of a JSON file")
    p_val.add_argument("input", help="Path to JSON file, or - for stdin")
    p_val.add_argument("--config", help="Path to JSON config file")

    # digest
    p_dig = sub.add_parser("digest", help="Hash a raw string")
    p_dig.add_argument("text", help="Text to hash")
    p_dig.add_argument("--config", help="Path to JSON config file")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    try:
        if args.command == "apply": cmd_apply(args)
        elif args.command == "validate": cmd_validate(args)
        elif args.command == "digest": cmd_digest(args)
    except JsonHashError as err:
        _fail_with_error(err)


if __name__ == "__main__":
    main()
