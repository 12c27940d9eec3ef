"""
Smart File Commands - Command Line
==================================

Runs one natural-language command against a directory listing (or the
sample collection) and prints what the interpreter decided. Nothing on
disk is moved; a move result only lists the files and the destination.
"""

import argparse
import json
import sys
import uuid
from pathlib import Path
from typing import List, Optional

import yaml

from file_commands.collection import DirectoryScanner, sample_files
from file_commands.config import Config
from file_commands.interpreter import Action, CommandInterpreter, CommandResult, suggest
from file_commands.utils.exceptions import FileCommandsError
from file_commands.utils.logging_config import setup_logging, get_logger, set_correlation_id

logger = get_logger(__name__)


def _format_size(size_bytes: int) -> str:
    size = float(size_bytes)
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


def render_text(result: CommandResult) -> str:
    """Human-readable rendering of a result."""
    lines = []
    if result.message:
        lines.append(result.message)
    lines.append(f"Action: {result.action.value}")
    if result.target_folder:
        lines.append(f"Target folder: {result.target_folder}")
    if result.action is not Action.UNKNOWN:
        lines.append("")
        for record in result.files:
            lines.append(
                f"  {record.name:40} {_format_size(record.size_bytes):>10}  "
                f"{record.modified_at:%Y-%m-%d %H:%M}"
            )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-commands",
        description="Smart File Commands - natural-language file operations"
    )
    parser.add_argument(
        'command',
        nargs='*',
        help='Command to run, e.g. "show pdf files larger than 1 mb"'
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--directory', '-d',
        type=Path,
        help='Directory whose files form the collection (default: current directory)'
    )
    source.add_argument(
        '--sample',
        action='store_true',
        help='Use the built-in sample collection instead of a directory'
    )
    parser.add_argument(
        '--config', '-c',
        type=Path,
        help='Path to a YAML configuration file'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON'
    )
    parser.add_argument(
        '--suggest',
        metavar='TEXT',
        help='List example commands containing TEXT and exit'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI support."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.suggest is not None:
        for line in suggest(args.suggest):
            print(line)
        return 0

    command = " ".join(args.command)
    if not command.strip():
        parser.error("a command is required")

    # one id per command in every log line it produces
    set_correlation_id(str(uuid.uuid4())[:8])

    try:
        config = Config.load(args.config)
        if args.verbose:
            config.logging.level = "DEBUG"
        setup_logging(config.logging)

        if args.sample:
            files = sample_files()
        else:
            files = DirectoryScanner(config.scanner).scan(args.directory or Path.cwd())
    except FileCommandsError as e:
        logger.error(str(e))
        print(f"✗ {e.message}", file=sys.stderr)
        return 1
    except yaml.YAMLError as e:
        print(f"✗ Invalid configuration file: {e}", file=sys.stderr)
        return 1

    result = CommandInterpreter(config.interpreter).process(command, files)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(render_text(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
