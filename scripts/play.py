#!/usr/bin/env python3
"""
Terminal client for playing tic-tac-toe against the computer.
"""
import argparse
import sys
import os
import time

# Add the parent directory to Python path so we can import tictak
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tictak.core.config import EngineConfig
from tictak.core.board import Mark
from tictak.core.events import SOUND_EFFECTS
from tictak.core.game import EngineState, GameEngine, GameOutcome
from tictak.core.scheduler import ManualScheduler
from tictak.ai.agents.heuristic_agent import Difficulty


# (title, message, button)
ALERTS = {
    GameOutcome.HUMAN_WIN: ("You Win!", "You are smart. You beat your own AI.", "Hell Yeah!"),
    GameOutcome.COMPUTER_WIN: ("You Lost!", "You programmed a super AI.", "Rematch"),
    GameOutcome.DRAW: ("Draw", "What a battle of wits we have here...", "Try Again"),
}


def display_board(engine):
    """Display the board with 1-9 labels on empty squares."""
    squares = engine.snapshot()
    print()
    for start in range(0, 9, 3):
        cells = []
        for index in range(start, start + 3):
            mark = squares[index]
            if mark is None:
                cells.append(str(index + 1))
            else:
                cells.append('X' if mark is Mark.HUMAN else 'O')
        print(" " + " | ".join(cells))
        if start < 6:
            print("---+---+---")
    print()


def select_difficulty():
    """
    Let user select a difficulty.

    Returns:
        Difficulty or None if the user quit
    """
    print("\nSelect Difficulty:")
    for number, difficulty in enumerate(Difficulty, start=1):
        print(f"{number}. {difficulty.value.title()}")

    choices = {str(n): d for n, d in enumerate(Difficulty, start=1)}
    choices.update({d.value: d for d in Difficulty})

    while True:
        try:
            choice = input("\nEnter your choice (1-3): ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            return None

        if choice in choices:
            return choices[choice]
        print("Invalid choice! Please enter 1, 2 or 3.")


def get_human_move():
    """
    Read a square from the user.

    Returns:
        int: Square index (0-8), or None if quit
    """
    while True:
        try:
            move_input = input("Your move (1-9) or 'quit': ").strip()
        except (KeyboardInterrupt, EOFError):
            return None

        if move_input.lower() in ['quit', 'exit', 'q']:
            return None
        if move_input.isdigit() and 1 <= int(move_input) <= 9:
            return int(move_input) - 1
        print("Invalid input! Please enter a number from 1 to 9.")


def play_round(engine, scheduler, think_delay):
    """
    Run one game to completion.

    Returns:
        bool: False if the user quit mid-game
    """
    while engine.state is not EngineState.GAME_OVER:
        display_board(engine)
        move = get_human_move()
        if move is None:
            return False

        if not engine.submit_human_move(move):
            print(f"Square {move + 1} is already taken!")
            continue

        if engine.state is EngineState.COMPUTER_THINKING:
            print("Computer is thinking...")
            time.sleep(think_delay)
            scheduler.run_pending()
    return True


def main():
    """Main game loop."""
    parser = argparse.ArgumentParser(description='Play tic-tac-toe against the computer')
    parser.add_argument('--think-delay', type=float, default=0.5,
                        help='Seconds the computer pauses before moving (default: 0.5)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for the computer (default: none)')
    parser.add_argument('--sounds', action='store_true',
                        help='Print the sound effect for each event')
    parser.add_argument('--verbose', action='store_true',
                        help='Print engine transitions')
    args = parser.parse_args()

    print("=" * 40)
    print("           TIC-TAC-TOE")
    print("=" * 40)
    print("You are X and move first. Squares are numbered 1-9.")

    scheduler = ManualScheduler()
    config = EngineConfig(think_delay=args.think_delay, seed=args.seed)
    engine = GameEngine(config, scheduler=scheduler, verbose=args.verbose)

    if args.sounds:
        engine.add_listener(lambda event: print(f"[sound] {SOUND_EFFECTS[event]}"))
    while True:
        engine.start_new_game()
        difficulty = select_difficulty()
        if difficulty is None:
            break
        engine.select_difficulty(difficulty)

        if not play_round(engine, scheduler, config.think_delay):
            break

        display_board(engine)
        title, message, button = ALERTS[engine.outcome]
        print("=" * 40)
        print(title)
        print(message)
        print("=" * 40)

        try:
            again = input(f"{button}? (y/n): ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            break
        if again not in ('y', 'yes'):
            break

    print("\nThanks for playing!")


if __name__ == "__main__":
    main()
