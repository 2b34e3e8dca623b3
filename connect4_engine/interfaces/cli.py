"""
cli.py - Command-line interface for the Connect Four engine

Commands:
    match      Play computer-vs-computer games and print the tally
    suggest    Replay a sequence of columns and print the engine's next move
    benchmark  Time placement, win checks and the minimax search
"""

import argparse
import sys
from typing import List, Optional

from connect4_engine.ai.minimax import MinimaxPlayer
from connect4_engine.ai.selector import get_computer_move, make_rng
from connect4_engine.debug import debug
from connect4_engine.errors import ConnectFourError, InvalidColumnError, NoLegalMoveError
from connect4_engine.game.board import check_winner, count_pieces
from connect4_engine.game.rules import GameState, create_initial_state, place_piece
from connect4_engine.utils import Color, Quality

QUALITY_CHOICES = [q.value for q in Quality]
DEBUG_LEVEL_CHOICES = ['none', 'error', 'warning', 'info', 'debug', 'trace']


def parse_moves(moves_str: str) -> List[int]:
    """Parse a comma-separated list of columns such as "3,3,4"."""
    if not moves_str:
        return []
    try:
        return [int(move) for move in moves_str.split(',')]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid move list '{moves_str}'")


def replay_moves(moves: List[int]) -> GameState:
    """
    Apply columns in order from the initial position.

    Raises:
        InvalidColumnError: If a column is out of range or full
        NoLegalMoveError: If a move is played after the game ended
    """
    state = create_initial_state()
    for i, column in enumerate(moves):
        if state.is_game_over:
            raise NoLegalMoveError(f"Move {i + 1} (column {column}) played after the game ended",
                                   {"move": i + 1, "column": column})
        next_state = place_piece(state, column)
        if next_state is state:
            raise InvalidColumnError(f"Move {i + 1}: column {column} is full",
                                     {"move": i + 1, "column": column})
        state = next_state
    return state


def play_match(red: Quality, yellow: Quality, games: int, seed: Optional[int] = None) -> dict:
    """
    Play computer-vs-computer games.

    Returns:
        Dict with 'red', 'yellow' and 'draw' counts plus total 'moves'
    """
    rng = make_rng(seed)
    qualities = {Color.RED: red, Color.YELLOW: yellow}
    tally = {'red': 0, 'yellow': 0, 'draw': 0, 'moves': 0}

    for game in range(games):
        state = create_initial_state()
        while not state.is_game_over:
            column = get_computer_move(state, qualities[state.current_player], rng=rng)
            state = place_piece(state, column)
            tally['moves'] += 1

        result = state.winner.label if state.winner else 'draw'
        tally[result] += 1
        debug.info(f"Game {game + 1}: {result}", "cli")

    return tally


def handle_match(args) -> int:
    red, yellow = Quality(args.red), Quality(args.yellow)
    print(f"Playing {args.games} game(s): red={red.value} vs yellow={yellow.value}")
    tally = play_match(red, yellow, args.games, args.seed)
    print(f"Red wins:    {tally['red']}")
    print(f"Yellow wins: {tally['yellow']}")
    print(f"Draws:       {tally['draw']}")
    if args.games:
        print(f"Average length: {tally['moves'] / args.games:.1f} moves")
    return 0


def handle_suggest(args) -> int:
    state = replay_moves(args.moves)
    column = get_computer_move(state, args.quality, rng=args.seed)
    print(f"Suggested column for {state.current_player} ({args.quality}): {column}")
    return 0


def handle_benchmark(args) -> int:
    iterations = args.iterations
    print(f"Running benchmark with {iterations} iterations...")
    rng = make_rng(args.seed)

    debug.start_timer("games")
    positions = []
    for _ in range(iterations):
        state = create_initial_state()
        while not state.is_game_over:
            state = place_piece(state, get_computer_move(state, Quality.BAD, rng=rng))
        positions.append(state.board)
    games_time = debug.end_timer("games", "cli")
    total_moves = sum(count_pieces(board) for board in positions)
    print(f"Played {iterations} random games with {total_moves} moves: "
          f"{games_time:.6f} seconds total, "
          f"{games_time / max(total_moves, 1) * 1000:.6f} ms per move")

    debug.start_timer("win_check")
    for board in positions:
        check_winner(board, Color.RED)
        check_winner(board, Color.YELLOW)
    win_check_time = debug.end_timer("win_check", "cli")
    checks = 2 * len(positions)
    print(f"Performed {checks} win checks: {win_check_time:.6f} seconds total, "
          f"{win_check_time / max(checks, 1) * 1000:.6f} ms per check")

    player = MinimaxPlayer()
    debug.start_timer("search")
    column = player.get_move(create_initial_state())
    search_time = debug.end_timer("search", "cli")
    print(f"Depth {player.depth} search from the empty board chose column {column}: "
          f"{player.nodes_evaluated} nodes in {search_time:.6f} seconds")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Connect Four engine',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Ten games of the search against the one-move lookahead
    python run.py match --red best --yellow medium --games 10 --seed 1

    # Ask for yellow's reply after red opened in the center
    python run.py suggest --moves 3 --quality best

    # Benchmark with 200 random games
    python run.py benchmark --iterations 200
    """
    )
    parser.add_argument('--debug_level',
                        choices=DEBUG_LEVEL_CHOICES,
                        default='warning',
                        help='Set debug level: none (silent) ... trace (most verbose)')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    match_parser = subparsers.add_parser('match', help='Play computer-vs-computer games')
    match_parser.add_argument('--red', choices=QUALITY_CHOICES, default='best',
                              help='Quality of the red player')
    match_parser.add_argument('--yellow', choices=QUALITY_CHOICES, default='medium',
                              help='Quality of the yellow player')
    match_parser.add_argument('--games', type=int, default=1, help='Number of games')
    match_parser.add_argument('--seed', type=int, default=None, help='Random seed')

    suggest_parser = subparsers.add_parser('suggest', help='Suggest the next move')
    suggest_parser.add_argument('--moves', type=parse_moves, default=[],
                                help='Comma-separated columns played so far, red first')
    suggest_parser.add_argument('--quality', choices=QUALITY_CHOICES, default='best',
                                help='Quality of the suggestion')
    suggest_parser.add_argument('--seed', type=int, default=None, help='Random seed')

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
    benchmark_parser.add_argument('--iterations', type=int, default=100,
                                  help='Number of random games to play')
    benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

    return parser


HANDLERS = {
    'match': handle_match,
    'suggest': handle_suggest,
    'benchmark': handle_benchmark,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    debug.set_from_string(args.debug_level)

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except ConnectFourError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
