#!/usr/bin/env python3
import os
import sys
from myhub import create_app, configure_logging, ensure_root, BIND, PORT


def _resolve_roots():
    games = sys.argv[1] if len(sys.argv) >= 2 else os.environ.get("GAMES_ROOT", "games")
    media = sys.argv[2] if len(sys.argv) >= 3 else os.environ.get("MEDIA_ROOT", "media")
    return os.path.abspath(games), os.path.abspath(media)


if __name__ == "__main__":
    configure_logging()
    games_root, media_root = _resolve_roots()
    ensure_root(games_root, "GAMES_ROOT")
    ensure_root(media_root, "MEDIA_ROOT")
    app = create_app(games_root, media_root)
    app.run(host=BIND, port=PORT, debug=False)
