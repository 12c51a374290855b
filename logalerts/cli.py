"""
Log Alerts CLI - Command line interface for checking logs and sending alerts.

Provides commands for:
- Configuration validation
- Listing configured logs and showing their matched lines
- Running a single check over all logs
- Manual notifications
"""

import argparse
import sys
from pathlib import Path

from logalerts.config import Config, LogConfig, load_config
from logalerts.core import Alert
from logalerts.errors import InvalidFilterError
from logalerts.logging_config import get_logger, setup_logging
from logalerts.runner import LogAlertsRunner, read_matching_lines

logger = get_logger(__name__)


def _load(args: argparse.Namespace) -> Config | None:
    """Load the configuration, printing an error if it fails."""
    config_path = Path(args.config)

    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        return None

    try:
        return load_config(config_path)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return None


def _find_log(config: Config, key: str) -> LogConfig | None:
    for log_config in config.logs:
        if key in (log_config.display_name, log_config.path):
            return log_config
    return None


def cmd_config_validate(args: argparse.Namespace) -> int:
    """Validate configuration file."""
    config_path = Path(args.config)

    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        return 1

    try:
        config = load_config(config_path)
    except Exception as e:
        print(f"✗ Configuration invalid: {e}", file=sys.stderr)
        return 1

    print(f"✓ Configuration valid: {config_path}")
    print(f"  - {len(config.logs)} log(s) configured")
    print(f"  - {len(config.notifier_configs())} notifier(s) configured")
    if config.email is not None:
        print(f"  - Email recipients: {', '.join(config.email.recipients)}")
    return 0


def cmd_logs_list(args: argparse.Namespace) -> int:
    """List all configured logs."""
    config = _load(args)
    if config is None:
        return 1

    print(f"Configured logs ({len(config.logs)}):\n")
    for i, log_config in enumerate(config.logs, 1):
        exists = "✓" if Path(log_config.path).is_file() else "✗"
        print(f"{i}. {log_config.display_name}")
        print(f"   Path:   {log_config.path} {exists}")
        print(f"   Filter: {log_config.resolve_filter() or '(none)'}")
        print()
    return 0


def cmd_logs_show(args: argparse.Namespace) -> int:
    """Print the matched lines of one configured log."""
    config = _load(args)
    if config is None:
        return 1

    log_config = _find_log(config, args.name)
    if log_config is None:
        print(f"Error: Log '{args.name}' not found", file=sys.stderr)
        print("\nAvailable logs:", file=sys.stderr)
        for entry in config.logs:
            print(f"  - {entry.display_name}", file=sys.stderr)
        return 1

    try:
        lines = read_matching_lines(log_config)
    except (FileNotFoundError, InvalidFilterError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line, end="" if line.endswith("\n") else "\n")
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Check every configured log once and send notifications."""
    config = _load(args)
    if config is None:
        return 1

    try:
        runner = LogAlertsRunner(config)
        report = runner.run(dry_run=args.dry_run)
    except Exception as e:
        print(f"Error running check: {e}", file=sys.stderr)
        logger.exception("Error in run")
        return 1

    for result in report.results:
        if not result.ok:
            print(f"  ✗ {result.name}: {result.error}")
        elif args.dry_run:
            print(f"  ✓ {result.name}: {len(result.lines)} line(s) (dry run)")
        else:
            print(
                f"  ✓ {result.name}: {len(result.lines)} line(s), "
                f"sent to {result.notified}/{len(runner.notifiers)} notifier(s)"
            )

    if report.results and len(report.failed) == len(report.results):
        return 1
    return 0


def cmd_notify(args: argparse.Namespace) -> int:
    """Send a manual notification."""
    config = _load(args)
    if config is None:
        return 1

    try:
        runner = LogAlertsRunner(config)
    except Exception as e:
        print(f"Error creating notifiers: {e}", file=sys.stderr)
        return 1

    alert = Alert(
        log_name=args.title,
        log_path="(manual)",
        lines=[args.message],
        context={"manual": True},
    )

    print(f"Sending notification: {args.title}")
    sent_count = runner.dispatch(alert)
    print(f"\nSent to {sent_count}/{len(runner.notifiers)} notifier(s)")
    return 0 if sent_count > 0 else 1


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="logalerts",
        description="Log Alerts - email the log lines that matter"
    )
    parser.add_argument(
        "-c", "--config",
        default="config.yaml",
        help="Path to configuration file (default: config.yaml)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        help="Optional log file path (logs to console if not specified)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="subcommand")
    config_subparsers.add_parser("validate", help="Validate configuration file")

    logs_parser = subparsers.add_parser("logs", help="Configured logs")
    logs_subparsers = logs_parser.add_subparsers(dest="subcommand")
    logs_subparsers.add_parser("list", help="List all configured logs")
    show_parser = logs_subparsers.add_parser("show", help="Print matched lines of a log")
    show_parser.add_argument("name", help="Name or path of the log")

    run_parser = subparsers.add_parser("run", help="Check all logs once")
    run_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Read logs without sending notifications"
    )

    notify_parser = subparsers.add_parser("notify", help="Send manual notification")
    notify_parser.add_argument("title", help="Notification title")
    notify_parser.add_argument("message", help="Notification message")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "config":
        if args.subcommand == "validate":
            return cmd_config_validate(args)
        parser.print_help()
        return 0

    if args.command == "logs":
        if args.subcommand == "list":
            return cmd_logs_list(args)
        if args.subcommand == "show":
            return cmd_logs_show(args)
        parser.print_help()
        return 0

    if args.command == "run":
        return cmd_run(args)

    if args.command == "notify":
        return cmd_notify(args)

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
