#!/usr/bin/env python3
"""
Console entry point for Rock, Paper, Scissors.
Run: python main.py [best_of]
"""

import sys

from backend.config import DEFAULT_BEST_OF
from backend.console import run_console_series
from backend.engine.errors import InvalidConfiguration
from backend.engine.queries import get_result
from backend.engine.utils import print_series_state


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    best_of = DEFAULT_BEST_OF
    if argv:
        try:
            best_of = int(argv[0])
        except ValueError:
            print(f"best_of must be a number, got {argv[0]!r}")
            return 2

    print("Rock, Paper, Scissors")
    print(f"Best of {best_of}")
    print("=" * 40)

    try:
        state = run_console_series(best_of)
    except InvalidConfiguration as e:
        print(f"Error: {e}")
        return 2
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted. Goodbye!")
        return 0

    result = get_result(state)
    print(result.message)
    print_series_state(state, verbose=True)
    print("You won the series!" if result.is_player_winning else "The computer won the series.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
