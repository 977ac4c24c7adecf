"""
Command-line entry point for rdf-tree.

Usage:
    rdf-tree convert <file> [--config <config.json>] [--output <tree.json>]
    rdf-tree classify <file> [--config <config.json>]
"""

import sys
from typing import Dict, List, Optional, Type

from ..constants import ExitCode
from .commands import BaseCommand, ClassifyCommand, ConvertCommand
from .parsers import create_argument_parser

COMMANDS: Dict[str, Type[BaseCommand]] = {
    'convert': ConvertCommand,
    'classify': ClassifyCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    command_class = COMMANDS.get(args.command)
    if command_class is None:
        parser.print_help()
        return ExitCode.ERROR

    command = command_class(config_path=getattr(args, 'config', None))
    try:
        return int(command.execute(args))
    except KeyboardInterrupt:
        print("\n✗ Interrupted")
        return ExitCode.ERROR


if __name__ == '__main__':
    sys.exit(main())
