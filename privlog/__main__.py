"""
Run the privlog demo actions from the command line.

Usage:
    python -m privlog                       # Run every action
    python -m privlog compare --user alice  # print vs logger only
    python -m privlog network --delay 0.5   # Simulated API call
    python -m privlog errors --json         # One record per level, as JSON
"""

import argparse
import sys

from .config import configure
from .demo import LoggerDemo
from .logger import setup_logging

ACTIONS = ("all", "compare", "network", "errors", "cmdline")


def run_demo(action="all", user_name="", delay=2.0):
    """Run one demo action (or all of them) and return the demo state."""
    demo = LoggerDemo(network_delay=delay)
    if user_name:
        demo.change_user_name(user_name)

    if action in ("all", "compare"):
        demo.compare_print_vs_logger()
    if action in ("all", "network"):
        timer = demo.simulate_network_request()
        if timer is not None:
            timer.join()
    if action in ("all", "errors"):
        demo.simulate_error_handling()
    if action in ("all", "cmdline"):
        demo.command_line_demo()
    return demo


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="privlog demo: print vs structured logging")
    parser.add_argument('action', nargs='?', default='all', choices=ACTIONS,
                       help='Demo action to run')
    parser.add_argument('--user', default='', help='User name to enter before running')
    parser.add_argument('--delay', type=float, default=2.0,
                       help='Simulated network delay in seconds')
    parser.add_argument('--json', action='store_true', help='Emit JSON records')
    parser.add_argument('--reveal-private', action='store_true',
                       help='Show private arguments instead of redacting them')
    parser.add_argument('--level', default=None, help='Minimum level to emit')

    args = parser.parse_args(argv)

    try:
        # Flags only override the configuration when given
        overrides = {}
        if args.json:
            overrides['fmt'] = 'json'
        if args.reveal_private:
            overrides['reveal_private'] = True
        if args.level:
            overrides['level'] = args.level
        configure(**overrides)
        setup_logging()
        demo = run_demo(args.action, user_name=args.user, delay=args.delay)
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print("\nIn-app log:")
    for message in demo.log_messages:
        print(f"  {message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
