#!/usr/bin/env python3
"""
Measure each difficulty tier against a random human stand-in.
"""
import argparse
import sys
import time
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tictak.core.config import EngineConfig
from tictak.core.game import EngineState, GameEngine, GameOutcome
from tictak.core.scheduler import ManualScheduler
from tictak.ai.agents.heuristic_agent import Difficulty
from tictak.ai.agents.random_agent import RandomAgent


def play_game(engine, scheduler, human_agent, difficulty):
    """
    Play one game through the engine with ``human_agent`` tapping squares.

    Returns:
        GameOutcome: Final outcome
    """
    engine.start_new_game()
    engine.select_difficulty(difficulty)

    while engine.state is not EngineState.GAME_OVER:
        move = human_agent.select_action(engine.board)
        if not engine.submit_human_move(move):
            print(f"ERROR: Move {move} was refused")
            break
        scheduler.run_pending()

    return engine.outcome


def evaluate_difficulty(difficulty, num_games=200, seed=42):
    """
    Play ``num_games`` games at one difficulty.

    Returns:
        dict: Counts and rates for computer wins, human wins and draws
    """
    scheduler = ManualScheduler()
    engine = GameEngine(EngineConfig(think_delay=0.0, seed=seed), scheduler=scheduler)
    human = RandomAgent(seed=seed + 1)

    results = {'computer_wins': 0, 'human_wins': 0, 'draws': 0}
    start_time = time.time()

    for _ in range(num_games):
        outcome = play_game(engine, scheduler, human, difficulty)
        if outcome is GameOutcome.COMPUTER_WIN:
            results['computer_wins'] += 1
        elif outcome is GameOutcome.HUMAN_WIN:
            results['human_wins'] += 1
        else:
            results['draws'] += 1

    elapsed = time.time() - start_time
    results.update({
        'total_games': num_games,
        'computer_win_rate': results['computer_wins'] / num_games * 100,
        'human_win_rate': results['human_wins'] / num_games * 100,
        'draw_rate': results['draws'] / num_games * 100,
        'elapsed_time': elapsed,
    })
    return results


def main():
    """Main evaluation function."""
    parser = argparse.ArgumentParser(description='Evaluate tic-tac-toe difficulty tiers')
    parser.add_argument('--games', type=int, default=200,
                        help='Games per difficulty (default: 200)')
    parser.add_argument('--seed', type=int, default=42,
                        help='Random seed (default: 42)')
    args = parser.parse_args()

    print("Tic-Tac-Toe Difficulty Evaluation")
    print("=================================")
    print()

    all_results = {}
    for difficulty in Difficulty:
        results = evaluate_difficulty(difficulty, num_games=args.games, seed=args.seed)
        all_results[difficulty] = results

        print(f"=== {difficulty.value.title()} vs RandomAgent "
              f"({results['total_games']} games, {results['elapsed_time']:.1f}s) ===")
        print(f"Computer wins: {results['computer_wins']} ({results['computer_win_rate']:.1f}%)")
        print(f"Human wins:    {results['human_wins']} ({results['human_win_rate']:.1f}%)")
        print(f"Draws:         {results['draws']} ({results['draw_rate']:.1f}%)")
        print()

    return all_results


if __name__ == "__main__":
    main()
