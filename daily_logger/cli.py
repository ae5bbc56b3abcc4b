"""Command line interface for the daily logger."""

from pathlib import Path
from typing import Optional
import argparse
import asyncio
import logging
import os
import sys

from . import __version__
from .core.config import DailyLoggerConfig
from .core.store import ConfigStore, StoredSettings
from .core.types import DailyLoggerError, NotAGitRepositoryError
from .git.operations import GitOperations
from .ai.claude import ClaudeClient
from .ai.mock import MockAIClient
from .tool import DailyLoggerTool, REPORT_KINDS

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Reduce noise from external libraries
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('anthropic').setLevel(logging.WARNING)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='daily-logger',
        description=f'daily-logger v{__version__}\n'
                    'Generate daily progress logs from git commits and diffs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog="""
Commands:
  today      Generate log for today's commits
  unpushed   Generate log for unpushed commits
  both       Generate log for both today's and unpushed commits
  config     Show or update stored settings (API key, author, model)
  help       Show this help message

Examples:
  %(prog)s today
  %(prog)s unpushed -o summary.txt
  %(prog)s both --log
  %(prog)s today --summarize
  %(prog)s config --api-key sk-ant-... --author "Jane Doe"

Environment Variables:
  ANTHROPIC_API_KEY      API key for --summarize (overrides the stored key)
  DAILY_LOGGER_CONFIG    Path of the settings file
  DAILY_LOGGER_VERBOSE   Set to enable debug logging
        """
    )

    parser.add_argument(
        'command',
        nargs='?',
        default='help',
        help='Command to run (default: %(default)s)'
    )

    parser.add_argument(
        '-o', '--output',
        help='Output file (default: prompt.txt, or summary.txt with --summarize)',
        metavar='FILE'
    )

    parser.add_argument(
        '-l', '--log',
        action='store_true',
        help='Log to console instead of file'
    )

    parser.add_argument(
        '-h', '--help',
        action='store_true',
        help='Show help message'
    )

    parser.add_argument(
        '--base-branch',
        default='main',
        help='Branch to diff against (default: %(default)s)',
        metavar='BRANCH'
    )

    parser.add_argument(
        '--author',
        help='Only include commits by this author (default: stored author)',
        metavar='NAME'
    )

    # AI summary
    ai_group = parser.add_argument_group('summary')
    ai_group.add_argument(
        '-s', '--summarize',
        action='store_true',
        help='Send the prompt to Claude and output the summary instead'
    )

    ai_group.add_argument(
        '--test-mode',
        action='store_true',
        help='Use mock AI client instead of Claude (no API key required)'
    )

    ai_group.add_argument(
        '--model',
        help=f'Claude model to use (default: stored model or {DailyLoggerConfig.model})',
        metavar='MODEL'
    )

    ai_group.add_argument(
        '--api-key',
        help='Anthropic API key; remembered in the settings file',
        metavar='KEY'
    )

    # Settings file management
    config_group = parser.add_argument_group('config command')
    config_group.add_argument(
        '--show',
        action='store_true',
        help='Display stored settings'
    )

    config_group.add_argument(
        '--clear',
        action='store_true',
        help='Delete the settings file'
    )

    # Output control
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def show_help(parser: argparse.ArgumentParser) -> None:
    print(parser.format_help())


def resolve_api_key(args, stored: StoredSettings) -> Optional[str]:
    """Pick the API key: flag, then environment, then settings file."""
    return args.api_key or os.environ.get('ANTHROPIC_API_KEY') or stored.api_key


def create_ai_client(args, config: DailyLoggerConfig, api_key: Optional[str] = None):
    """Create appropriate AI client based on arguments."""
    if args.test_mode:
        logger.info("Using mock AI client")
        return MockAIClient()

    if not api_key:
        raise DailyLoggerError(
            "No API key available. Pass --api-key, set ANTHROPIC_API_KEY, "
            "or run 'daily-logger config --api-key KEY' (or use --test-mode)")
    logger.info("Using Claude AI client (%s)", config.model)
    return ClaudeClient(api_key=api_key, config=config)


def handle_config_command(args, store: ConfigStore) -> int:
    """Show, update or clear the settings file."""
    if args.clear:
        if store.clear():
            print(f"Removed {store.path}")
        else:
            print(f"No settings file at {store.path}")
        return 0

    changes = {
        'api_key': args.api_key,
        'author': args.author,
        'model': args.model,
    }
    if any(value is not None for value in changes.values()):
        store.update(**changes)
        print(f"Settings saved to {store.path}")
        if not args.show:
            return 0

    settings = store.load()
    print(f"Settings file: {store.path}")
    print(f"  api_key: {store.masked_key(settings)}")
    print(f"  author:  {settings.author or '(not set)'}")
    print(f"  model:   {settings.model or f'(default: {DailyLoggerConfig.model})'}")
    return 0


def handle_output(text: str, args, default_file: str, label: str = "Prompt") -> Optional[Path]:
    """Write text to stdout (--log) or to the output file."""
    if args.log:
        print(text)
        return None

    output_file = Path(args.output or default_file)
    output_file.write_text(text, encoding='utf-8')
    print(f"{label} written to {output_file}")
    return output_file


async def async_main(args: Optional[list] = None) -> int:
    """Async main entry point for the CLI."""
    parser = create_argument_parser()
    parsed_args = parser.parse_args(args)

    # Setup logging
    env_verbose = bool(os.environ.get('DAILY_LOGGER_VERBOSE', ""))
    verbose = parsed_args.verbose or env_verbose
    setup_logging(verbose)

    command = parsed_args.command
    if parsed_args.help or command == 'help':
        show_help(parser)
        return 0

    try:
        store = ConfigStore()

        if command == 'config':
            return handle_config_command(parsed_args, store)

        if command not in REPORT_KINDS:
            print(f"Unknown command: {command}", file=sys.stderr)
            print('Run "daily-logger help" for usage information.', file=sys.stderr)
            return 1

        stored = store.load()
        config = DailyLoggerConfig.from_cli_args(parsed_args, stored)
        logger.debug("Configuration: %s", config)

        git_ops = GitOperations(config=config)

        ai_client = None
        if parsed_args.summarize:
            api_key = resolve_api_key(parsed_args, stored)
            ai_client = create_ai_client(parsed_args, config, api_key)

        if parsed_args.api_key and parsed_args.api_key != stored.api_key:
            store.update(api_key=parsed_args.api_key)

        tool = DailyLoggerTool(git_ops, config, ai_client)
        report = tool.collect(command)
        prompt = tool.build_prompt(report)

        # Let a pending Ctrl-C cancel the run before anything is written
        await asyncio.sleep(0)

        if parsed_args.summarize:
            summary = await tool.summarize(report, prompt)
            handle_output(summary, parsed_args, config.summary_file, label="Summary")
        else:
            handle_output(prompt, parsed_args, config.output_file, label="Prompt")

        return 0

    except NotAGitRepositoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except DailyLoggerError as e:
        logger.debug("Daily logger error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    try:
        return asyncio.run(async_main(args))
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
