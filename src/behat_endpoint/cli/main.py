"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path


def main() -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="behat-endpoint",
        description="Remote operations for Behat test suites",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("behat_endpoint.yaml"),
        help="Path to config YAML (default: behat_endpoint.yaml, optional)",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        metavar="DB_PATH",
        help="SQLite database path (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # behat
    behat_parser = subparsers.add_parser(
        "behat",
        aliases=["behat:create"],
        help="Run a Behat operation, e.g. behat create-node '{\"title\":\"Example page\",\"type\":\"page\"}'",
    )
    behat_parser.add_argument("operation", help="Behat operation, e.g. create-node")
    behat_parser.add_argument("data", help="Operation data in JSON format")

    # operations
    subparsers.add_parser("operations", help="List supported operations")

    # user
    user_parser = subparsers.add_parser("user", help="Manage the user directory")
    user_parser.add_argument("action", choices=["add"], help="Add a user")
    user_parser.add_argument("name", help="User name")

    # fields
    fields_parser = subparsers.add_parser("fields", help="Show configurable fields of an entity type")
    fields_parser.add_argument("entity_type", help="Entity type, e.g. node")

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command in ("behat", "behat:create"):
        _run_behat(args)
    elif args.command == "operations":
        _run_operations(args)
    elif args.command == "user":
        _run_user(args)
    elif args.command == "fields":
        _run_fields(args)
    else:
        parser.print_help()


def _build_endpoint(args: argparse.Namespace):
    """Build an endpoint from --config and --db."""
    from behat_endpoint.config import EndpointConfig
    from behat_endpoint.endpoint import BehatEndpoint

    config = EndpointConfig.from_yaml(args.config)
    return BehatEndpoint(config.build_storage(args.db), config.build_schema())


def _run_behat(args: argparse.Namespace) -> None:
    """Run behat command."""
    from behat_endpoint.exceptions import EndpointError

    endpoint = _build_endpoint(args)
    try:
        result = endpoint.execute(args.operation, args.data)
    except EndpointError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    print(json.dumps(result, indent=2, default=str))


def _run_operations(args: argparse.Namespace) -> None:
    """Run operations command."""
    endpoint = _build_endpoint(args)
    for name in endpoint.operations():
        print(name)


def _run_user(args: argparse.Namespace) -> None:
    """Run user command."""
    endpoint = _build_endpoint(args)
    if args.action == "add":
        user = endpoint.storage.add_user(args.name)
        print(f"User {user.name} (uid={user.uid})")


def _run_fields(args: argparse.Namespace) -> None:
    """Run fields command."""
    endpoint = _build_endpoint(args)
    print(json.dumps(endpoint.schema.field_types(args.entity_type), indent=2))


if __name__ == "__main__":
    main()
