"""
HTTP proxy in front of the data layer.

Routes are thin pass-throughs to ``ApiManager``: a missing parameter is the
only error response (400); upstream trouble has already been absorbed into
a mock-data envelope, so every other request answers 200.
"""

import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from .config import Settings
from .data.api_manager import ApiManager
from .data.errors import MissingParameterError

logger = logging.getLogger(__name__)


def create_app(manager: Optional[ApiManager] = None) -> Flask:
    """Build the Flask app; a manager is created from the environment if not given."""
    app = Flask(__name__)
    CORS(app)
    manager = manager or ApiManager(Settings.from_env())
    app.config["API_MANAGER"] = manager

    @app.errorhandler(MissingParameterError)
    def handle_missing_parameter(exc):
        return jsonify({"error": str(exc)}), 400

    @app.route("/health")
    def health():
        return jsonify(manager.health())

    @app.route("/api/games")
    @app.route("/games")
    def games():
        args = request.args
        if args.get("date"):
            response = manager.get_games(args.get("date"))
        elif args.get("start_date"):
            response = manager.get_games_list(
                args.get("start_date"),
                per_page=args.get("per_page", 10),
                cursor=args.get("cursor", 0),
            )
        else:
            raise MissingParameterError("date", "Date parameter required")
        return jsonify(response.to_dict())

    @app.route("/api/team-stats")
    @app.route("/team-stats")
    def team_stats():
        response = manager.get_team_stats(request.args.get("teamId"), request.args.get("season"))
        return jsonify(response.to_dict())

    @app.route("/api/odds")
    @app.route("/odds")
    def odds():
        response = manager.get_odds(request.args.get("homeTeam"), request.args.get("awayTeam"))
        return jsonify(response.to_dict())

    return app


def run_server(host: str = "127.0.0.1", port: Optional[int] = None, settings: Optional[Settings] = None) -> None:
    settings = settings or Settings.from_env()
    app = create_app(ApiManager(settings))
    port = port or settings.port
    logger.info("NBA predictor backend running on http://%s:%s", host, port)
    app.run(host=host, port=port)
