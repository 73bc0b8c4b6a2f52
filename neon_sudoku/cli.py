"""Command-line interface for the Sudoku game."""

import argparse
import json
import logging
import sys
import time

from .core.board import SudokuBoard
from .core.validator import has_unique_solution
from .generator import SudokuGenerator, Difficulty
from .solvers import BacktrackingSolver
from .game import GameSession, GameState

log = logging.getLogger(__name__)

PLAY_HELP = """Commands:
  select R C    select the cell at row R, column C (1-9)
  w/a/s/d       move the selection (also up/down/left/right)
  1-9           place a digit in the selected cell
  hint          reveal the selected cell
  undo          revert the last move
  new DIFF      start a new easy/medium/hard game
  show          print the board
  render PATH   save the board as a PNG
  quit          leave the game"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="neon-sudoku",
        description="Sudoku puzzle generator, solver and game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium difficulty puzzles
  neon-sudoku generate --count 5 --difficulty medium

  # Solve a puzzle
  neon-sudoku solve --puzzle "530070000600195000..."

  # Play a hard game in the terminal
  neon-sudoku play --difficulty hard
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard", "all"],
        default="easy",
        help="Difficulty level (default: easy)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--show-solution", action="store_true",
        help="Also print the solution of each puzzle"
    )
    gen_parser.add_argument(
        "--json", action="store_true",
        help="Print puzzles as JSON instead of grids"
    )
    gen_parser.add_argument(
        "--check-unique", action="store_true",
        help="Report whether each puzzle has a unique solution"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--stats", action="store_true",
        help="Show solving statistics"
    )

    # Render command
    render_parser = subparsers.add_parser("render", help="Render a new game to a PNG")
    render_parser.add_argument(
        "--difficulty", "-d", choices=["easy", "medium", "hard"], default="easy",
        help="Difficulty level (default: easy)"
    )
    render_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    render_parser.add_argument(
        "--output", "-o", type=str, required=True,
        help="Path of the PNG file to write"
    )

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument(
        "--difficulty", "-d", choices=["easy", "medium", "hard"], default="easy",
        help="Difficulty level (default: easy)"
    )
    play_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    commands = {
        "generate": cmd_generate,
        "solve": cmd_solve,
        "render": cmd_render,
        "play": cmd_play,
    }

    log.debug("Running %s command", args.command)
    try:
        commands[args.command](args)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)

    if args.difficulty == "all":
        difficulties = list(Difficulty)
    else:
        difficulties = [Difficulty(args.difficulty)]

    all_puzzles = []

    for difficulty in difficulties:
        pairs = generator.generate_batch(
            args.count, difficulty, show_progress=args.count > 1 and not args.json
        )

        for i, (puzzle, solution) in enumerate(pairs, 1):
            puzzle_data = {
                "difficulty": difficulty.value,
                "index": i,
                "puzzle": puzzle.to_string(),
                "clues": puzzle.count_filled(),
            }
            if args.show_solution:
                puzzle_data["solution"] = solution.to_string()
            if args.check_unique:
                puzzle_data["unique"] = has_unique_solution(puzzle)
            all_puzzles.append(puzzle_data)

            if args.json:
                continue

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle.count_filled()} clues) ---")
            print(puzzle)
            if args.check_unique:
                print("Unique solution" if puzzle_data["unique"] else "Multiple solutions")
            if args.show_solution:
                print("Solution:")
                print(solution)

    if args.json:
        print(json.dumps(all_puzzles, indent=2))
    else:
        print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_solve(args):
    """Handle the solve command."""
    try:
        board = SudokuBoard.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    solver = BacktrackingSolver()
    if not solver.solve(board):
        print("✗ No solution exists")
        if args.stats:
            print(f"  Time: {solver.stats.time_seconds:.4f}s")
            print(f"  Iterations: {solver.stats.iterations:,}")
        sys.exit(1)

    print(f"✓ Solved in {solver.stats.time_seconds:.4f}s")
    if args.stats:
        print(f"  Iterations: {solver.stats.iterations:,}")
        print(f"  Backtracks: {solver.stats.backtracks:,}")
    print(board)


def cmd_render(args):
    """Handle the render command."""
    session = GameSession.new(args.difficulty, SudokuGenerator(seed=args.seed))
    _save_png(session, args.output)
    print(f"Board saved to {args.output}")


def cmd_play(args, stdin=None):
    """Handle the play command."""
    stdin = stdin or sys.stdin
    generator = SudokuGenerator(seed=args.seed)
    session = GameSession.new(args.difficulty, generator)
    started = time.monotonic()

    print(PLAY_HELP)
    _print_session(session)

    for line in stdin:
        words = line.split()
        if not words:
            continue

        command = words[0].lower()
        if command in ("quit", "exit", "q"):
            break

        try:
            updated = _play_command(session, generator, command, words[1:])
        except ValueError as e:
            print(f"Error: {e}")
            continue

        if updated is not session:
            session, started = updated, time.monotonic()
        session.tick(max(0, int(time.monotonic() - started) - session.elapsed))

        _print_session(session)
        if session.state is GameState.COMPLETED:
            print(f"VICTORY! Time: {session.time_display}")


def _play_command(session, generator, command, params):
    """Apply one play command, returning the (possibly new) session."""
    if command == "select":
        if len(params) != 2:
            raise ValueError("select needs a row and a column")
        session.select(int(params[0]) - 1, int(params[1]) - 1)
    elif command in ("w", "a", "s", "d", "up", "down", "left", "right"):
        session.move_selection(command)
    elif command.isdigit() and len(command) == 1:
        if session.selected is None:
            raise ValueError("no cell selected")
        if not session.place_number(int(command)):
            print("Cell cannot be changed")
    elif command == "hint":
        if not session.use_hint():
            print("No hint available")
    elif command == "undo":
        if not session.undo():
            print("Nothing to undo")
    elif command == "new":
        difficulty = params[0] if params else session.difficulty
        session = GameSession.new(difficulty, generator)
    elif command == "show":
        pass
    elif command == "render":
        if not params:
            raise ValueError("render needs a file path")
        _save_png(session, params[0])
        print(f"Board saved to {params[0]}")
    else:
        raise ValueError(f"unknown command {command!r}")

    return session


def _save_png(session, path):
    """Render off-screen; the CLI never opens a window."""
    import matplotlib
    matplotlib.use("Agg")
    from .render import render_session

    render_session(session, path)


def _print_session(session):
    print()
    print(session.board)
    selected = "none"
    if session.selected is not None:
        selected = f"row {session.selected[0] + 1}, col {session.selected[1] + 1}"
    print(f"Selected: {selected}  Hints: {session.hints_left}  "
          f"Moves: {len(session.moves)}  State: {session.state.value}")
    if session.state is GameState.ERROR:
        print("Error detected!")


if __name__ == "__main__":
    main()
