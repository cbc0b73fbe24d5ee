"""
Command-line interface for the aggregate xliff file type.

Usage:
    xliff-aggregator handles <path> [--config <config.yaml>]
    xliff-aggregator write --file <path> --new <new.yaml> [options]
"""

import argparse
import sys
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from xliff_aggregator.core.config import ConfigurationError, PluginConfigBuilder, PluginConfigLoader, PluginSettings
from xliff_aggregator.core.models import ResourceRecord
from xliff_aggregator.core.resources import TranslationSet
from xliff_aggregator.observability.logger import configure_logging, get_logger
from xliff_aggregator.plugins import XliffFileType

logger = get_logger(__name__)


def load_settings(args) -> PluginSettings:
    """
    Load plugin settings from --config, or build defaults from --project.

    Raises:
        ConfigurationError: If the configuration cannot be loaded
    """
    if args.config:
        return PluginConfigLoader(args.config).load()
    return PluginConfigBuilder(args.project, source_locale=args.source_locale).build()


def load_resources(path: str | None, project_id: str, source_locale: str) -> TranslationSet:
    """
    Load a YAML list of resource mappings into a translation set.

    Records without project or source_locale inherit the project's.

    Args:
        path: YAML file, or None for an empty set
        project_id: Project id to fill in
        source_locale: Source locale to fill in

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML or is
            not a list of mappings
        pydantic.ValidationError: If a record is malformed or its text
            contains characters XML cannot carry
    """
    ts = TranslationSet(source_locale)
    if not path:
        return ts

    resource_path = Path(path)
    if not resource_path.exists():
        raise ConfigurationError(f"Resource file not found: {path}")

    try:
        with open(resource_path, encoding="utf-8") as f:
            entries: Any = yaml.safe_load(f) or []
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(entries, list):
        raise ConfigurationError(f"Resource file {path} must contain a list of resources")

    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Resource entry {i} in {path} must be a mapping")
        entry = {"project": project_id, "source_locale": source_locale, **entry}
        ts.add(ResourceRecord.model_validate(entry))

    logger.debug(f"Loaded {ts.size()} resources from {path}")
    return ts


def handles_command(args) -> int:
    """
    Report whether the plugin claims the given path.

    Args:
        args: Command-line arguments

    Returns:
        0 if the path is handled, 1 otherwise
    """
    settings = load_settings(args)
    file_type = XliffFileType(settings.to_project(), settings)
    ret = file_type.handles(args.path)
    print("yes" if ret else "no")
    return 0 if ret else 1


def write_command(args) -> int:
    """
    Merge resource lists into the aggregate xliff file and import it.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    settings = load_settings(args)
    if args.no_import:
        settings.importer.enabled = False

    configure_logging(level=args.log_level or settings.logging.level, format_type=settings.logging.format)

    project = settings.to_project()
    file_type = XliffFileType(project, settings)

    if not file_type.handles(args.file):
        logger.warning(f"{args.file} is not the aggregate xliff file ({settings.canonical_file})")

    file_type.new_file(args.file)
    file_type.get_new().add_set(load_resources(args.new, project.project_id, project.source_locale))
    file_type.get_pseudo().add_set(load_resources(args.pseudo, project.project_id, project.source_locale))
    file_type.add_set(load_resources(args.extracted, project.project_id, project.source_locale))

    report = file_type.write()

    print("=" * 60)
    print("WRITE COMPLETE")
    print("=" * 60)
    print(f"Resources added:     {report.resources_added}")
    print(f"Extracted (tracked): {file_type.get_extracted().size()}")
    print(f"File:                {report.persisted.path}")
    print(f"Changed:             {'yes' if report.persisted.changed else 'no'}")
    if report.import_result is not None:
        status = "ok" if report.import_result.succeeded else f"failed ({report.import_result.status})"
        print(f"Import:              {status}")
    else:
        print("Import:              skipped")
    print("=" * 60)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xliff-aggregator",
        description="Aggregate localizable resources into a single xliff file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check whether a path is the aggregate xliff file
  xliff-aggregator handles ./en-US.xliff

  # Merge new and pseudo resources and import into Xcode
  xliff-aggregator write --config config/xliff_plugin.yaml --file en-US.xliff \\
      --new build/new.yaml --pseudo build/pseudo.yaml

  # Write the file only
  xliff-aggregator write --project feelgood --file en-US.xliff --new build/new.yaml --no-import
        """
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="Plugin configuration YAML file")
    common.add_argument("--project", default="project", help="Project id when no config is given")
    common.add_argument("--source-locale", default="en-US", help="Source locale when no config is given")
    common.add_argument("--env-file", help="Load environment variables from this file")
    common.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    handles_parser = subparsers.add_parser("handles", parents=[common], help="Test a path for recognition")
    handles_parser.add_argument("path", help="Path to test")

    write_parser = subparsers.add_parser("write", parents=[common], help="Write the aggregate xliff file")
    write_parser.add_argument("--file", required=True, help="Path of the aggregate xliff file")
    write_parser.add_argument("--new", help="YAML list of new resources")
    write_parser.add_argument("--pseudo", help="YAML list of pseudo-localized resources")
    write_parser.add_argument("--extracted", help="YAML list of previously extracted resources")
    write_parser.add_argument("--no-import", action="store_true", help="Do not run the importer")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.env_file:
        load_dotenv(args.env_file, override=True)

    commands = {
        "handles": handles_command,
        "write": write_command,
    }

    try:
        return commands[args.command](args)
    except (ConfigurationError, ValidationError) as e:
        logger.error(f"Invalid input: {e}")
        return 1
    except OSError as e:
        logger.error(f"Error writing xliff file: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
