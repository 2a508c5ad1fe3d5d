"""
Web Routes - Dashboard, detail page and game forms
"""

import logging

from flask import Blueprint, render_template, request, redirect, url_for, flash
from sqlalchemy.exc import SQLAlchemyError

from gameshelf.catalog_view import CatalogStore, Filters
from gameshelf.constants import BUILD_VERSION, ID_MAX, VIEW_GRID, VIEW_LIST, SORT_KEYS, SORT_ASC, SORT_DESC
from gameshelf.db import db
from gameshelf.exceptions import GameShelfException
from gameshelf.services import game_service
from gameshelf.services.game_service import serialize_game
from gameshelf.services.stats_service import catalog_stats
from gameshelf.utils import ensure_utc

logger = logging.getLogger("main")

web_bp = Blueprint("web", __name__)


def _split_tags(raw):
    return [name.strip() for name in (raw or "").split(",") if name.strip()]


def _form_payload(form):
    """Map the submitted form to the JSON body the API accepts"""
    return {
        "name": form.get("name", ""),
        "igdbId": form.get("igdbId", ""),
        "rating": form.get("rating", ""),
        "releaseDate": form.get("releaseDate", ""),
        "coverUrl": form.get("coverUrl", ""),
        "genres": _split_tags(form.get("genres")),
        "platforms": _split_tags(form.get("platforms")),
    }


def _form_values(game):
    released = ensure_utc(game["releaseDate"])
    return {
        "name": game["name"],
        "igdbId": game["igdbId"],
        "rating": "" if game["rating"] is None else game["rating"],
        "releaseDate": released.strftime("%Y-%m-%d") if released else "",
        "coverUrl": game["coverUrl"] or "",
        "genres": ", ".join(g["name"] for g in game["genres"]),
        "platforms": ", ".join(p["name"] for p in game["platforms"]),
    }


@web_bp.route("/")
def index():
    return redirect(url_for("web.dashboard"))


@web_bp.route("/dashboard")
def dashboard():
    """Catalog with filters, grid/list view and charts"""
    store = CatalogStore()
    store.loading = True
    try:
        store.load(serialize_game(game) for game in game_service.list_games())
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Error fetching games: {e}")
        store.error = "Error fetching games"
    finally:
        store.loading = False

    filters = Filters.from_args(request.args)
    store.set_filters(**filters.to_dict())

    view = request.args.get("view", VIEW_GRID)
    if view not in (VIEW_GRID, VIEW_LIST):
        view = VIEW_GRID

    args = store.filters.to_dict()
    view_urls = {v: url_for("web.dashboard", **dict(args, view=v)) for v in (VIEW_GRID, VIEW_LIST)}
    flipped = SORT_ASC if store.filters.sort_order == SORT_DESC else SORT_DESC
    toggle_order_url = url_for("web.dashboard", **dict(args, view=view, sort_order=flipped))

    return render_template(
        "dashboard.html",
        title="Dashboard",
        store=store,
        filters=store.filters,
        view=view,
        view_urls=view_urls,
        toggle_order_url=toggle_order_url,
        sort_keys=SORT_KEYS,
        genre_options=store.genre_options(),
        platform_options=store.platform_options(),
        stats=catalog_stats(store.filtered_games),
        build_version=BUILD_VERSION,
    )


@web_bp.route(f"/games/<int(max={ID_MAX}):game_id>")
def game_detail(game_id):
    game = serialize_game(game_service.get_game(game_id))
    released = ensure_utc(game["releaseDate"])
    return render_template(
        "game_detail.html",
        title=game["name"],
        game=game,
        released=released,
        build_version=BUILD_VERSION,
    )


@web_bp.route("/games/add", methods=["GET", "POST"])
def add_game():
    values = {}
    if request.method == "POST":
        values = request.form.to_dict()
        try:
            game = game_service.create_game(_form_payload(request.form))
        except GameShelfException as e:
            return render_template(
                "game_form.html", title="Add game", values=values, error=e.message,
                build_version=BUILD_VERSION,
            ), e.status_code
        flash(f"{game.name} added to the catalog", "success")
        return redirect(url_for("web.game_detail", game_id=game.id))

    return render_template("game_form.html", title="Add game", values=values, error=None,
                           build_version=BUILD_VERSION)


@web_bp.route(f"/games/<int(max={ID_MAX}):game_id>/edit", methods=["GET", "POST"])
def edit_game(game_id):
    game = game_service.get_game(game_id)

    if request.method == "POST":
        values = request.form.to_dict()
        try:
            game = game_service.update_game(game_id, _form_payload(request.form))
        except GameShelfException as e:
            return render_template(
                "game_form.html", title="Edit game", values=values, game_id=game_id, error=e.message,
                build_version=BUILD_VERSION,
            ), e.status_code
        flash(f"{game.name} updated", "success")
        return redirect(url_for("web.game_detail", game_id=game.id))

    return render_template(
        "game_form.html", title="Edit game", values=_form_values(serialize_game(game)), game_id=game_id,
        error=None, build_version=BUILD_VERSION,
    )
