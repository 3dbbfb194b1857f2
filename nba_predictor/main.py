"""Main CLI interface for the NBA betting predictor."""

import argparse
import json
import logging
import sys
from typing import List, Optional

import pandas as pd

from .config import Settings, save_keys
from .data.api_manager import ApiManager
from .data.dates import today_eastern
from .data.envelope import describe
from .data.errors import MissingParameterError
from .models.stats import TeamStats
from .predictors.weighted import WeightedFactorPredictor

logger = logging.getLogger(__name__)


def games_frame(games) -> pd.DataFrame:
    """Tabulate games for display."""
    rows = [
        {
            "id": game.id,
            "date": game.date,
            "matchup": game.matchup,
            "time": game.time,
            "status": game.status.value,
            "score": f"{game.visitor_team_score}-{game.home_team_score}",
        }
        for game in games
    ]
    return pd.DataFrame(rows, columns=["id", "date", "matchup", "time", "status", "score"])


def _print_notes(responses) -> None:
    for note in describe(responses):
        print(f"Note: {note}")


def show_games(args, manager: ApiManager) -> int:
    """Print the schedule for a date or a page of upcoming games."""
    if args.start_date:
        response = manager.get_games_list(args.start_date, per_page=args.per_page, cursor=args.cursor)
    else:
        response = manager.get_games(args.date or today_eastern())

    if response.fallback_date:
        print(response.message)
    _print_notes([response])

    frame = games_frame(response.data)
    if frame.empty:
        print(response.message or "No games found")
        return 0
    print(frame.to_string(index=False))
    if response.meta and response.meta.get("next_cursor") is not None:
        print(f"\nNext cursor: {response.meta['next_cursor']}")
    return 0


def predict_games(args, manager: ApiManager) -> int:
    """Predict spread and moneyline for each game on a date."""
    date = args.date or today_eastern()
    response = manager.get_games(date)
    games = response.data
    if args.game_id is not None:
        games = [game for game in games if game.id == args.game_id]
        if not games:
            print(f"Error: game {args.game_id} not found on {date}")
            return 1

    predictor = WeightedFactorPredictor()
    results = []
    notes = [response]
    for game in games:
        matchup = manager.fetch_matchup(game, args.season)
        notes.extend(matchup.responses)
        prediction = predictor.generate_prediction(
            game,
            matchup.home_stats.data or TeamStats(),
            matchup.away_stats.data or TeamStats(),
            matchup.odds.data,
        )
        results.append((game, prediction))

    if args.json:
        print(json.dumps(
            [{"game": game.to_dict(), "prediction": prediction.to_dict()} for game, prediction in results],
            indent=2,
        ))
        return 0

    if response.fallback_date:
        print(response.message)
    _print_notes(notes)

    for game, prediction in results:
        spread = prediction.spread
        moneyline = prediction.moneyline
        line = f" (market {spread.actual_line:+g})" if spread.actual_line is not None else ""
        print(f"\n{'=' * 60}")
        print(f"{game.visitor_team.full_name} @ {game.home_team.full_name}  {game.date} {game.time}")
        print(f"{'=' * 60}")
        print(f"Spread:    {spread.pick.name} by {spread.line:.1f}{line}  confidence {spread.confidence}/10")
        for reason in spread.reasoning:
            print(f"   - {reason}")
        print(f"Moneyline: {moneyline.pick.name} ({moneyline.odds})  confidence {moneyline.confidence}/10")
        for reason in moneyline.reasoning:
            print(f"   - {reason}")
    return 0


def run_serve(args, settings: Settings) -> int:
    from .server import run_server

    run_server(host=args.host, port=args.port, settings=settings)
    return 0


def store_keys(args, settings: Settings) -> int:
    """Save API keys for later runs."""
    if not save_keys(settings.keys_file, args.balldontlie or "", args.odds or ""):
        print(f"Error: could not write {settings.keys_file}")
        return 1
    print(f"✓ API keys saved to {settings.keys_file}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="NBA Betting Predictor - spread and moneyline picks from live or mock data"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--keys-file", default=None, help="Saved API keys file (default: ~/.nba_predictor/keys.json)")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    games_parser = subparsers.add_parser("games", help="Show games for a date")
    games_parser.add_argument("--date", "-d", default=None, help="Schedule date YYYY-MM-DD (default: today, ET)")
    games_parser.add_argument("--start-date", default=None, help="List upcoming games from this date instead")
    games_parser.add_argument("--per-page", type=int, default=10, help="Games per page for --start-date (default: 10)")
    games_parser.add_argument("--cursor", type=int, default=0, help="Page cursor for --start-date (default: 0)")

    predict_parser = subparsers.add_parser("predict", help="Predict spread and moneyline picks")
    predict_parser.add_argument("--date", "-d", default=None, help="Schedule date YYYY-MM-DD (default: today, ET)")
    predict_parser.add_argument("--game-id", type=int, default=None, help="Only predict this game")
    predict_parser.add_argument("--season", type=int, default=None, help="Season for team stats")
    predict_parser.add_argument("--json", action="store_true", help="Print predictions as JSON")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP proxy")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port (default: $PORT or 3001)")

    keys_parser = subparsers.add_parser("keys", help="Save API keys")
    keys_parser.add_argument("--balldontlie", default=None, help="BallDontLie API key")
    keys_parser.add_argument("--odds", default=None, help="The Odds API key")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env(keys_file=args.keys_file)

    try:
        if args.command == "games":
            return show_games(args, ApiManager(settings))
        elif args.command == "predict":
            return predict_games(args, ApiManager(settings))
        elif args.command == "serve":
            return run_serve(args, settings)
        elif args.command == "keys":
            return store_keys(args, settings)
        else:
            parser.print_help()
            return 1
    except MissingParameterError as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
