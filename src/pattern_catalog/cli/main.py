"""
Main CLI module with argument parsing and command execution.

This module provides:
- Command line argument parsing
- Command routing and execution
- Configuration and logging setup
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

from pattern_catalog import __version__
from pattern_catalog.cli.formatters import FORMATS, format_output
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import CatalogConfig
from pattern_catalog.domain.core.exceptions import CatalogException
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.registry.example_registry import (
    ExampleRegistry,
    PatternFamily,
)
from pattern_catalog.registration import register_builtin_examples


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pattern-catalog",
        description="Design pattern catalog - list and run the pattern examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all examples
  %(prog)s list --family behavioral          # List behavioral examples
  %(prog)s --format table list               # Display as table
  %(prog)s run decorator composite           # Run two examples
  %(prog)s run --all                         # Run every example
        """,
    )

    parser.add_argument("--config", help="Configuration file path (YAML or JSON)")
    parser.add_argument("--log-level",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set logging level")
    parser.add_argument("--format", choices=FORMATS, default="text", help="Output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List registered examples")
    list_parser.add_argument("--family", choices=[family.value for family in PatternFamily],
                             help="Only list examples of this family")

    run_parser = subparsers.add_parser("run", help="Run one or more examples")
    run_parser.add_argument("names", nargs="*", help="Example names to run")
    run_parser.add_argument("--all", action="store_true", help="Run every registered example")

    args = parser.parse_args(argv)
    if args.command is None:
        parser.error("a command is required")
    if args.command == "run" and not args.names and not args.all:
        parser.error("run requires example names or --all")
    return args


def load_config(args: argparse.Namespace) -> CatalogConfig:
    """Load configuration, letting --log-level override the configured level."""
    manager = ConfigurationManager(args.config)
    config = manager.app_config
    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    return config


def handle_list(args: argparse.Namespace, registry: ExampleRegistry,
                config: CatalogConfig) -> Dict[str, Any]:
    family = PatternFamily(args.family) if args.family else None
    return {"examples": [r.to_dict() for r in registry.list_examples(family)]}


def handle_run(args: argparse.Namespace, registry: ExampleRegistry,
               config: CatalogConfig) -> Dict[str, Any]:
    names = registry.get_registered_names() if args.all else args.names
    # Resolve every name before running anything
    registrations = [registry.get_registration(name) for name in names]
    return {
        "runs": [
            {"name": r.name, "output": registry.run_example(r.name, config)}
            for r in registrations
        ]
    }


COMMAND_HANDLERS = {
    "list": handle_list,
    "run": handle_run,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args)
        setup_logging(config.logging)
        logger = get_logger(__name__)
        logger.debug("Executing command", command=args.command)

        registry = register_builtin_examples()
        result = COMMAND_HANDLERS[args.command](args, registry, config)
        print(format_output(result, args.format))
        return 0
    except CatalogException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
