import logging
import os
from flask import Flask
from .routes import bp as routes_bp

# Bind only localhost unless overridden
BIND = os.environ.get("BIND", "127.0.0.1")
PORT = int(os.environ.get("PORT", "5000"))
MAX_UPLOAD_MB = int(os.environ.get("MAX_UPLOAD_MB", "512"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def ensure_root(root: str, label: str = "GAMES_ROOT") -> None:
    if not os.path.isdir(root):
        raise SystemExit(f"{label} does not exist: {root}")


def create_app(games_root: str, media_root: str) -> Flask:
    app = Flask(__name__)
    app.secret_key = os.environ.get("FLASK_SECRET", "dev-" + os.urandom(8).hex())
    app.config["GAMES_ROOT"] = games_root
    app.config["MEDIA_ROOT"] = media_root
    app.config["APP_TITLE"] = "My Hub"
    app.config["SETTINGS_FILE"] = os.path.join(games_root, "_myhub.json")
    app.config["MAX_CONTENT_LENGTH"] = MAX_UPLOAD_MB * 1024 * 1024

    app.register_blueprint(routes_bp)
    return app
