from __future__ import annotations
import logging
from pathlib import Path
from flask import Blueprint, current_app, render_template_string, redirect, url_for, flash, request, send_from_directory, jsonify

from . import service
from .errors import MyHubError, NotFound
from .models import MediaType
from .settings import load_settings, save_settings
from .utils import image_size

from .templates import GAMES_HTML, MEDIA_HTML, UPLOAD_HTML, SETTINGS_HTML, ERROR_HTML

log = logging.getLogger(__name__)

bp = Blueprint("myhub", __name__)

API = "/api/1.2"


def _cfg():
    c = current_app.config
    return (
        Path(c["GAMES_ROOT"]),
        Path(c["MEDIA_ROOT"]),
        c["APP_TITLE"],
        Path(c["SETTINGS_FILE"]),
    )


def _wants_json() -> bool:
    return request.path.startswith(API + "/")


def _page_args(default_size: int):
    return request.args.get("page", 0, type=int), request.args.get("size", default_size, type=int)


def _game_dto(g):
    return {"name": g.name, "htmlFile": g.html_file}


def _media_dto(m, with_size: bool = False):
    d = {"fileName": m.file_name, "type": m.type.value}
    if with_size and m.type is MediaType.IMAGE:
        size = image_size(Path(m.path))
        if size:
            d["width"], d["height"] = size
    return d


def _result_dto(r):
    d = {"originalName": r.original_name, "fileName": r.stored_name, "error": r.error}
    if r.media:
        d["type"] = r.media.type.value
    return d


@bp.errorhandler(MyHubError)
def handle_catalog_error(e: MyHubError):
    if e.status >= 500:
        log.error("Catalog failure: %s", e, exc_info=True)
    else:
        log.warning("Request failed (%d): %s", e.status, e)
    if _wants_json():
        return jsonify({"error": str(e)}), e.status
    _, _, APP_TITLE, _ = _cfg()
    return render_template_string(ERROR_HTML, app_title=APP_TITLE, status=e.status, message=str(e)), e.status


@bp.errorhandler(OSError)
def handle_io_error(e: OSError):
    log.error("Unexpected I/O error class='%s', message='%s'", type(e).__name__, e, exc_info=True)
    message = f"Unexpected error has occurred '{e}'."
    if _wants_json():
        return jsonify({"error": message}), 500
    _, _, APP_TITLE, _ = _cfg()
    return render_template_string(ERROR_HTML, app_title=APP_TITLE, status=500, message=message), 500


# ──────────────────────────────────────────────────────────────────────────────
# Pages
# ──────────────────────────────────────────────────────────────────────────────

@bp.get("/")
def index():
    return redirect(url_for("myhub.games"))


@bp.get("/games")
def games():
    G, _, APP_TITLE, _ = _cfg()
    return render_template_string(
        GAMES_HTML,
        app_title=APP_TITLE,
        games=[g.name for g in service.list_games(G)],
        root=G,
    )


@bp.post("/games/upload")
def games_upload():
    G, *_ = _cfg()
    file = request.files.get("game")
    if not file or not file.filename:
        flash("No archive provided for upload.")
        return redirect(url_for("myhub.games"))
    try:
        game = service.upload_game_archive(G, file.filename, file.stream)
    except MyHubError as e:
        log.warning("Game upload failed: %s", e)
        flash(f"Game upload failed: {e}")
    else:
        flash(f"Game '{game.name}' uploaded.")
    return redirect(url_for("myhub.games"))


@bp.get("/games/<name>")
def launch_game(name):
    G, *_ = _cfg()
    game = service.get_game(G, name)
    return redirect(url_for("myhub.game_file", name=game.name, filename=game.html_file))


@bp.get("/games/<name>/<path:filename>")
def game_file(name, filename):
    G, *_ = _cfg()
    game = service.get_game(G, name)
    return send_from_directory(game.folder, filename)


@bp.get("/media")
def media():
    _, M, APP_TITLE, SETTINGS_FILE = _cfg()
    settings = load_settings(SETTINGS_FILE)
    page, size = _page_args(settings["page_size"])
    result = service.list_media(M, page, size)
    return render_template_string(
        MEDIA_HTML,
        app_title=APP_TITLE,
        media=result.content,
        current_page=result.page,
        size=result.size,
        total_pages=result.total_pages,
        total_count=result.total_elements,
    )


@bp.get("/settings")
def settings():
    _, _, APP_TITLE, SETTINGS_FILE = _cfg()
    settings = load_settings(SETTINGS_FILE)
    return render_template_string(SETTINGS_HTML, app_title=APP_TITLE, page_size=settings["page_size"])


@bp.post("/settings")
def settings_post():
    _, _, _, SETTINGS_FILE = _cfg()
    settings = load_settings(SETTINGS_FILE)
    page_size = request.form.get("page_size", type=int)
    if not page_size or page_size <= 0:
        flash("Page size must be a positive number.")
        return redirect(url_for("myhub.settings"))
    settings["page_size"] = page_size
    save_settings(SETTINGS_FILE, settings)
    flash("Settings saved.")
    return redirect(url_for("myhub.settings"))


@bp.get("/media/file/<filename>")
def media_file(filename):
    _, M, *_ = _cfg()
    m = service.get_media(M, filename)
    return send_from_directory(M, m.file_name, mimetype=m.mime_type)


@bp.get("/media/upload")
def media_upload_form():
    _, _, APP_TITLE, _ = _cfg()
    return render_template_string(UPLOAD_HTML, app_title=APP_TITLE, message="", results=[])


@bp.post("/media/upload")
def media_upload():
    _, M, APP_TITLE, _ = _cfg()
    files = [f for f in request.files.getlist("files") if f]
    if not files:
        return render_template_string(UPLOAD_HTML, app_title=APP_TITLE,
                                      message="No files provided for upload.", results=[])
    results = service.upload_media_batch(M, [(f.filename, f.stream) for f in files])
    failed = [r for r in results if not r.ok]
    if failed:
        message = f"Uploaded {len(results) - len(failed)} of {len(results)} files."
    else:
        message = "Files uploaded successfully."
    return render_template_string(UPLOAD_HTML, app_title=APP_TITLE, message=message, results=results)


# ──────────────────────────────────────────────────────────────────────────────
# REST API
# ──────────────────────────────────────────────────────────────────────────────

@bp.get(f"{API}/games")
def api_games():
    G, *_ = _cfg()
    return jsonify({"content": [_game_dto(g) for g in service.list_games(G)]})


@bp.post(f"{API}/games")
def api_add_game():
    G, *_ = _cfg()
    file = request.files.get("game")
    if file is None:
        return jsonify({"error": "Missing 'game' archive."}), 400
    service.upload_game_archive(G, file.filename, file.stream)
    return jsonify({"message": "The game has been successfully uploaded."})


@bp.delete(f"{API}/games/<game_name>")
def api_delete_game(game_name):
    G, *_ = _cfg()
    service.delete_game(G, game_name)
    return jsonify({"message": "The game has been successfully deleted."})


@bp.get(f"{API}/media")
def api_media():
    _, M, *_ = _cfg()
    page, size = _page_args(10)
    result = service.list_media(M, page, size)
    total_pages = max(result.total_pages, 1)
    if page != 0 and page >= total_pages:
        raise NotFound("Requested page out of bounds.")
    return jsonify({
        "content": [_media_dto(m, with_size=True) for m in result.content],
        "page": result.page,
        "size": result.size,
        "totalPages": total_pages,
        "totalElements": result.total_elements,
    })


@bp.get(f"{API}/media/<file_name>")
def api_media_file(file_name):
    _, M, *_ = _cfg()
    m = service.get_media(M, file_name)
    return send_from_directory(M, m.file_name, mimetype=m.mime_type, as_attachment=True)


@bp.post(f"{API}/media")
def api_add_media():
    _, M, *_ = _cfg()
    files = [f for f in request.files.getlist("files") if f]
    if not files:
        return jsonify({"error": "No files provided for upload."}), 400
    results = service.upload_media_batch(M, [(f.filename, f.stream) for f in files])
    return jsonify({"content": [_result_dto(r) for r in results]})


@bp.delete(f"{API}/media/<file_name>")
def api_delete_media(file_name):
    # interface only, media deletion is not implemented
    return jsonify({"error": "Media deletion is not implemented."}), 501


@bp.get("/favicon.ico")
def favicon():
    return ("", 204)
