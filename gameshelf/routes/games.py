"""
Game Routes - CRUD endpoints for the catalog
"""

from flask import Blueprint, request, jsonify

from gameshelf.api_responses import handle_api_errors
from gameshelf.services import game_service
from gameshelf.services.game_service import serialize_game, parse_game_id

games_bp = Blueprint("games", __name__, url_prefix="/api")


@games_bp.route("/games")
@handle_api_errors
def list_games():
    """All games with their genres and platforms, best rated first"""
    return jsonify([serialize_game(game) for game in game_service.list_games()])


@games_bp.route("/games", methods=["POST"])
@handle_api_errors
def create_game():
    game = game_service.create_game(request.get_json(silent=True))
    return jsonify(serialize_game(game)), 201


@games_bp.route("/games/<game_id>")
@handle_api_errors
def get_game(game_id):
    game = game_service.get_game(parse_game_id(game_id))
    return jsonify(serialize_game(game))


@games_bp.route("/games/<game_id>", methods=["PUT"])
@handle_api_errors
def update_game(game_id):
    """Update scalar fields and replace every genre and platform link"""
    game_id = parse_game_id(game_id)
    game = game_service.update_game(game_id, request.get_json(silent=True))
    return jsonify(serialize_game(game))


@games_bp.route("/games/<game_id>", methods=["DELETE"])
@handle_api_errors
def delete_game(game_id):
    deleted_id = game_service.delete_game(parse_game_id(game_id))
    return jsonify({"message": "Game deleted", "id": deleted_id})
