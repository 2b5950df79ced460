"""
Command-line interface for cubepaint.

Provides a text front end for playing Painted Cube puzzles and helpers for
creating and validating configuration files.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from cubepaint.controller import PuzzleController
from cubepaint.core.config import Config, create_default_config, load_config, validate_config
from cubepaint.utils.display import StatusDisplay, print_model
from cubepaint.utils.logger import SessionLogger


HELP_TEXT = """
Available commands:
  <row> <col>             - Roll the cube to a cell (e.g., 1 2)
  move <row> <col>        - Same as above
  view                    - Show the board
  state                   - Show puzzle status
  new                     - Start a new puzzle
  seed <n>                - Set the random seed (applies to the next puzzle)
  size <n>                - Set the board size and start a new puzzle
  help                    - Show this help
  quit/exit               - Exit the game
"""


class PaintedCubeGame:
    """Text front end driving a PuzzleController."""

    def __init__(self, controller: PuzzleController):
        self.controller = controller

    def show_state(self):
        model = self.controller.model
        print("\n=== Current State ===")
        print(f"Board: {model.side()}x{model.side()}")
        print(f"Cube at: ({model.cube_row()}, {model.cube_col()})")
        print(f"Moves: {model.moves()}")
        print(f"Painted faces: {sum(model.is_painted_face(k) for k in range(6))}/6")
        if self.controller.is_done:
            print("\n🎉 PUZZLE COMPLETE! 🎉")

    def roll(self, row: int, col: int):
        result = self.controller.click(row, col)
        if result.success:
            print_model(self.controller.model)
            if result.solved:
                print(f"\n🎉 {result.message}")
        else:
            print(f"✗ {result.error.value}: {result.message}")

    @staticmethod
    def _parse_cell(parts: List[str]) -> Optional[Tuple[int, int]]:
        """(row, col) if PARTS is exactly two integers, else None"""
        if len(parts) != 2:
            return None
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            return None

    def handle_command(self, line: str) -> bool:
        """
        Execute one input line.

        Returns:
            False when the session should end, True otherwise
        """
        parts = line.strip().lower().split()
        if not parts:
            return True

        command = parts[0]
        if command == "move":
            parts = parts[1:]
            command = parts[0] if parts else ""

        cell = self._parse_cell(parts)
        if cell is not None:
            self.roll(*cell)

        elif command == "view":
            print_model(self.controller.model)

        elif command == "state":
            self.show_state()

        elif command == "new":
            self.controller.new_puzzle()
            print_model(self.controller.model)

        elif command == "seed":
            if len(parts) < 2:
                print("Usage: seed <n>")
            else:
                try:
                    self.controller.set_seed(int(parts[1]))
                    print(f"Seed set to {parts[1]}")
                except ValueError:
                    print(f"Invalid seed: {parts[1]}")

        elif command == "size":
            if len(parts) < 2:
                print("Usage: size <n>")
            else:
                try:
                    self.controller.set_size(int(parts[1]))
                    print_model(self.controller.model)
                except ValueError as e:
                    print(f"Invalid size: {e}")

        elif command == "help":
            print(HELP_TEXT)

        elif command in ("quit", "exit"):
            print("Goodbye!")
            return False

        else:
            print(f"Unknown command: {line.strip()}")
            print("Type 'help' for commands")

        return True

    def run_cli(self):
        """Main input loop."""
        print("=== Painted Cube ===")
        print("Type 'help' for commands")
        print_model(self.controller.model)

        while True:
            try:
                line = input("\n> ")
            except EOFError:
                break
            except KeyboardInterrupt:
                print("\nUse 'quit' to exit")
                continue
            if not self.handle_command(line):
                break


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="cubepaint: roll a cube across a painted board until every face is painted",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play with default settings
  cubepaint play

  # Play a reproducible 6x6 puzzle and keep a move log
  cubepaint play --side 6 --seed 42 --save-logs

  # Create and check a configuration file
  cubepaint create-config --output config.yaml
  cubepaint validate-config config.yaml
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    play_parser = subparsers.add_parser("play", help="Play puzzles interactively")
    play_parser.add_argument("--config", "-c", help="Path to configuration file")
    play_parser.add_argument("--side", type=int, help="Override board size")
    play_parser.add_argument("--seed", type=int, help="Override random seed")
    play_parser.add_argument("--save-logs", action="store_true", help="Write a move log when the session ends")
    play_parser.add_argument("--quiet", "-q", action="store_true", help="Do not echo log entries to the console")

    config_parser = subparsers.add_parser("create-config", help="Create default configuration file")
    config_parser.add_argument("--output", "-o", default="config.yaml", help="Output configuration file")
    config_parser.add_argument("--force", "-f", action="store_true", help="Overwrite an existing file")

    validate_parser = subparsers.add_parser("validate-config", help="Validate configuration file")
    validate_parser.add_argument("config", help="Configuration file to validate")

    return parser


def _load_play_config(args) -> Config:
    config = load_config(args.config) if args.config else Config()
    if args.side is not None:
        config.puzzle.side = args.side
    if args.seed is not None:
        config.puzzle.seed = args.seed
    if args.save_logs:
        config.session.save_logs = True
    if args.quiet:
        config.session.verbose = False
    return config


def play_command(args) -> int:
    """Execute play command."""
    try:
        config = _load_play_config(args)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        StatusDisplay.print_status(f"Failed to load config: {e}", "error")
        return 1

    for issue in validate_config(config):
        StatusDisplay.print_status(issue, "error" if issue.startswith("ERROR") else "warning")
        if issue.startswith("ERROR"):
            return 1

    logger = None
    if config.session.save_logs:
        logger = SessionLogger(config.session.log_dir, config.session.session_name)

    controller = PuzzleController(config=config, logger=logger)
    PaintedCubeGame(controller).run_cli()

    if logger is not None:
        logger.save_logs()
    return 0


def create_config_command(args) -> int:
    """Execute create-config command."""
    StatusDisplay.print_header("Creating Configuration File")

    if Path(args.output).exists() and not args.force:
        StatusDisplay.print_status(f"Configuration file already exists: {args.output} (use --force)", "warning")
        return 1

    config = create_default_config(args.output)

    StatusDisplay.print_status(f"Configuration created: {args.output}", "success")
    StatusDisplay.print_config(config.to_dict(), "Configuration Summary")
    return 0


def validate_config_command(args) -> int:
    """Execute validate-config command."""
    StatusDisplay.print_header("Validating Configuration")

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        StatusDisplay.print_status(f"Invalid configuration: {e}", "error")
        return 1

    issues = validate_config(config)
    errors = [i for i in issues if i.startswith("ERROR")]
    for issue in issues:
        StatusDisplay.print_status(issue, "error" if issue in errors else "warning")

    if errors:
        return 1

    StatusDisplay.print_status("Configuration is valid", "success")
    StatusDisplay.print_config(config.to_dict())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    command_handlers = {
        "play": play_command,
        "create-config": create_config_command,
        "validate-config": validate_config_command,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
