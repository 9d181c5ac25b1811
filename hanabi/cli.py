"""
Hanabi CLI - Command-line interface for the engine.

Usage:
    hanabi new [--players N] [--multicolor] [--seed S]       Print a new game as JSON
    hanabi simulate [--players N] [--policy P] [--seed S]    Play a bot game
"""

import argparse
import json
import logging
import sys

from .config import get_settings


def main(argv=None):
    """Main CLI entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Hanabi - Cooperative card game rules engine",
        prog="hanabi",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # New game command
    new_parser = subparsers.add_parser("new", help="Create a game and print its state")
    new_parser.add_argument("--players", type=int, default=settings.default_players, help="Number of players (2-5)")
    new_parser.add_argument("--multicolor", action="store_true", default=settings.multicolor, help="Add the multicolor suit")
    new_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deal")

    # Simulate command
    sim_parser = subparsers.add_parser("simulate", help="Play a full game with bots")
    sim_parser.add_argument("--players", type=int, default=settings.default_players, help="Number of players (2-5)")
    sim_parser.add_argument("--multicolor", action="store_true", default=settings.multicolor, help="Add the multicolor suit")
    sim_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deal")
    sim_parser.add_argument("--policy", default="cautious", help="Bot policy: cautious, random, first")
    sim_parser.add_argument("--verbose", "-v", action="store_true", help="Print every turn")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "new":
        cmd_new(args, settings)
    elif args.command == "simulate":
        cmd_simulate(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_new(args, settings):
    """Create a game and print its snapshot."""
    from .api import APIService, CreateGameRequest, ErrorResponse

    service = APIService()
    response = service.create_game(CreateGameRequest(
        players_count=args.players,
        multicolor=args.multicolor,
        seed=args.seed,
    ))
    if isinstance(response, ErrorResponse):
        print(f"Error: {response.error}")
        sys.exit(1)

    indent = None if settings.env == "production" else 2
    print(json.dumps(response.state.model_dump(mode="json"), indent=indent))


def cmd_simulate(args):
    """Play a bot game to the end."""
    from .bots import POLICIES
    from .engine_core import GameOptions, ConfigViolation
    from .session import SessionManager, GameLoop

    policy_cls = POLICIES.get(args.policy)
    if policy_cls is None:
        print(f"Error: Unknown policy: {args.policy} (choose from {', '.join(POLICIES)})")
        sys.exit(1)

    manager = SessionManager()
    try:
        session = manager.create_session(
            GameOptions(players_count=args.players, multicolor=args.multicolor),
            seed=args.seed,
        )
    except ConfigViolation as e:
        print(f"Error: {e.message}")
        sys.exit(1)

    policies = [policy_cls() for _ in range(args.players)]
    loop = GameLoop(session, policies, manager.reducer)
    results = loop.run()

    if args.verbose:
        for result in results:
            if result.success:
                print(f"{result.action}: {', '.join(result.changes)} ({result.explanation})")
            else:
                print(f"Error: {', '.join(result.errors)}")

    state = session.game_state
    print(f"Seed: {state.seed}")
    print(f"Turns: {len(session.action_history)}")
    print(f"Score: {state.score}/{state.max_score}")
    print(f"Strikes left: {state.tokens.strikes}")


if __name__ == "__main__":
    main()
