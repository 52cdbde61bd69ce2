"""CLI commands for the RECOV assistant.

Provides subcommands for trying the command interpreter from a terminal.

Commands:
    recov parse TEXT    - Show how a message is classified
    recov ask TEXT      - Run a message through the orchestrator
    recov intents       - List classification rules in priority order
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .config import AssistantConfig
from .core.gate import is_quick_action_eligible, missing_entities
from .core.intent import INTENT_RULES, CommandParser
from .core.models import OrchestratorRequest
from .core.orchestrator import AssistantOrchestrator

console = Console()


def _setup_logging() -> logging.Logger:
    """Configure logging with rotation.

    Logs are written to ~/.recov/logs/ with owner-only permissions.
    Uses INFO level by default; set RECOV_DEBUG=1 for DEBUG level.
    """
    log_dir = Path.home() / ".recov" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_dir.chmod(0o700)

    log_level = logging.DEBUG if os.environ.get("RECOV_DEBUG") else logging.INFO

    # 5 MB per file, keep 3 backups
    handler = RotatingFileHandler(
        log_dir / "recov.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)

    return logging.getLogger(__name__)


def _load_config(args: argparse.Namespace) -> AssistantConfig:
    return AssistantConfig.load(Path(args.project_path).resolve())


def parse_message(args: argparse.Namespace) -> int:
    """Show the parsed command for a message.

    Args:
        args: Parsed arguments (text)

    Returns:
        Exit code (0 for success)
    """
    config = _load_config(args)
    command = CommandParser(max_input_length=config.max_input_length).parse(args.text)

    table = Table(title="Parsed Command")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Intent", command.type.value)
    table.add_row("Confidence", str(command.confidence))
    for key, value in command.entities.to_dict().items():
        table.add_row(f"  {key}", str(value))

    if is_quick_action_eligible(command):
        table.add_row("Quick action", "[green]eligible[/green]")
    else:
        missing = missing_entities(command)
        reason = f" (missing {', '.join(missing)})" if missing else ""
        table.add_row("Quick action", f"[yellow]no[/yellow]{reason}")

    console.print(table)
    return 0


def ask(args: argparse.Namespace) -> int:
    """Run a message through the orchestrator and print the response.

    Args:
        args: Parsed arguments (text, tenant, user, voice)

    Returns:
        Exit code (0 for success)
    """
    config = _load_config(args)
    orchestrator = AssistantOrchestrator.from_config(config)

    request = OrchestratorRequest(
        message=args.text,
        tenant_id=args.tenant,
        user_id=args.user,
        is_voice=args.voice,
    )
    response = asyncio.run(orchestrator.process(request))

    style = "green" if response.type == "quick_command" else "cyan"
    console.print(f"[{style}]{response.type}[/{style}] (confidence {response.confidence})")
    console.print(response.text)

    if response.requires_action:
        console.print(f"[bold]Action:[/bold] {response.action_type} {response.action_payload}")

    return 0


def list_intents(args: argparse.Namespace) -> int:
    """List classification rules in the order they are evaluated.

    Args:
        args: Parsed arguments (unused)

    Returns:
        Exit code (0 for success)
    """
    table = Table(title="Intent Rules (first match wins)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Intent", style="cyan")
    table.add_column("Confidence", justify="right")
    table.add_column("Patterns", style="dim")

    for position, rule in enumerate(INTENT_RULES, start=1):
        table.add_row(
            str(position),
            rule.tag.value,
            str(rule.confidence),
            str(len(rule.patterns)),
        )

    console.print(table)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="recov",
        description="RECOV: business assistant command interpreter",
    )
    parser.add_argument(
        "--project",
        "-p",
        dest="project_path",
        default=".",
        help="Directory holding .recov/config.yaml (default: current directory)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # parse
    parse_parser = subparsers.add_parser("parse", help="Show how a message is classified")
    parse_parser.add_argument("text", help="Message to parse")
    parse_parser.set_defaults(func=parse_message)

    # ask
    ask_parser = subparsers.add_parser("ask", help="Run a message through the assistant")
    ask_parser.add_argument("text", help="Message to send")
    ask_parser.add_argument("--tenant", "-t", default="default", help="Tenant id")
    ask_parser.add_argument("--user", "-u", default="cli", help="User id")
    ask_parser.add_argument(
        "--voice",
        action="store_true",
        help="Treat the message as a voice transcript",
    )
    ask_parser.set_defaults(func=ask)

    # intents
    intents_parser = subparsers.add_parser("intents", help="List intent rules")
    intents_parser.set_defaults(func=list_intents)

    return parser


def run_cli(args: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    if not hasattr(parsed, "func"):
        parser.print_help()
        return 0

    try:
        return parsed.func(parsed)
    except KeyboardInterrupt:
        console.print("\n[dim]Cancelled.[/dim]")
        return 130
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1


def main() -> None:
    """Entry point for the recov command."""
    _setup_logging()
    sys.exit(run_cli())


__all__ = [
    "ask",
    "create_parser",
    "list_intents",
    "main",
    "parse_message",
    "run_cli",
]
