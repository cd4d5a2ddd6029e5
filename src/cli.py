"""Command-line interface for mailman."""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from config import LOG_LEVELS, AppConfig
from errors import TemplateStoreError
from model import MergeTemplate
from store import TemplateStore

MAILMAN_VERSION = "0.3.0"


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    config: AppConfig
    list_templates: bool


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


class MailmanHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "Mailman - build and manage mail-merge templates from the terminal.",
            f"Version: {MAILMAN_VERSION}",
            "",
            "Usage:",
            "  mailman                               Open the template manager",
            "  mailman --templates <path>            Use a different template store",
            "  mailman --list-templates              Print stored templates and exit",
            "  mailman --log-level <level>           DEBUG, INFO, WARNING or ERROR",
            "  mailman --version                     Print the version and exit",
            "",
            "Environment:",
            "  MAILMAN_TEMPLATES                     Default template store path",
            "  MAILMAN_LOG_LEVEL                     Default log level",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the mailman CLI."""
    parser = argparse.ArgumentParser(
        prog="mailman",
        formatter_class=MailmanHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--templates", metavar="PATH", help=argparse.SUPPRESS)
    parser.add_argument("--list-templates", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        type=str.upper,
        choices=LOG_LEVELS,
        help=argparse.SUPPRESS,
    )
    parser.add_argument("--version", action="store_true", help=argparse.SUPPRESS)
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments on top of the environment defaults."""
    args = create_parser().parse_args(sys.argv[1:] if argv is None else argv)

    if args.version:
        print(f"mailman {MAILMAN_VERSION}")
        sys.exit(0)

    config = AppConfig.from_env()
    if args.templates:
        config.templates_path = Path(args.templates).expanduser()
    if args.log_level:
        config.log_level = args.log_level

    return ParsedArgs(config=config, list_templates=args.list_templates)


def format_template_line(template: MergeTemplate) -> str:
    """One line per template for --list-templates."""
    merge_data = template.merge_data
    flags = " [repeating]" if template.is_repeating else ""
    return f"{template.title or 'Untitled'}  ({merge_data.get('type')}, sheet: {merge_data.get('sheet') or '-'}){flags}"


def main() -> None:
    """Main entry point."""
    parsed = parse_args()
    config = parsed.config
    store = TemplateStore(config.templates_path)

    try:
        templates, warnings = store.load()
    except TemplateStoreError as e:
        print_error_box(
            "Could not load templates",
            str(e),
            "",
            f"Fix or move {config.templates_path} and try again.",
        )
        sys.exit(1)

    if parsed.list_templates:
        for warning in warnings:
            print(f"Warning: {warning}", file=sys.stderr)
        if not templates:
            print("No templates found.")
        for template in templates:
            print(format_template_line(template))
        sys.exit(0)

    from app import MailmanTUI, setup_logging

    setup_logging(config.log_path, config.log_level)
    app = MailmanTUI(templates=templates, store=store, startup_messages=warnings)
    app.run()


if __name__ == "__main__":
    main()
