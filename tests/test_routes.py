import io
import json
from pathlib import Path

from myhub.settings import load_settings

from conftest import make_png, make_zip, touch


def test_index_redirects_to_games(client) -> None:
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/games")


def test_games_page_lists_names(client, games_root: Path) -> None:
    touch(games_root / "Alpha" / "index.html")
    resp = client.get("/games")
    assert resp.status_code == 200
    assert b"Alpha" in resp.data


def test_game_redirects_to_its_html_file(client, games_root: Path) -> None:
    touch(games_root / "Alpha" / "start.html", b"<h1>alpha</h1>")
    resp = client.get("/games/alpha")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/games/Alpha/start.html")
    page = client.get("/games/Alpha/start.html")
    assert page.status_code == 200
    assert page.data == b"<h1>alpha</h1>"


def test_unknown_game_page_is_404(client) -> None:
    assert client.get("/games/ghost").status_code == 404


def test_api_games_listing(client, games_root: Path) -> None:
    touch(games_root / "Alpha" / "index.html")
    resp = client.get("/api/1.2/games")
    assert resp.status_code == 200
    assert resp.get_json() == {"content": [{"name": "Alpha", "htmlFile": "index.html"}]}


def test_api_game_upload_and_delete(client, games_root: Path) -> None:
    data = make_zip({"Mega/index.html": b"x"})
    resp = client.post("/api/1.2/games", data={"game": (io.BytesIO(data), "Mega_Game.zip")},
                       content_type="multipart/form-data")
    assert resp.status_code == 200, resp.data
    assert [g["name"] for g in client.get("/api/1.2/games").get_json()["content"]] == ["Mega"]

    again = client.post("/api/1.2/games", data={"game": (io.BytesIO(data), "Mega_Game.zip")},
                        content_type="multipart/form-data")
    assert again.status_code == 409

    assert client.delete("/api/1.2/games/Mega").status_code == 200
    assert not (games_root / "Mega").exists()
    assert client.delete("/api/1.2/games/Mega").status_code == 404


def test_api_malformed_game_upload_is_400(client) -> None:
    data = make_zip({"A/index.html": b"x", "B/index.html": b"x"})
    resp = client.post("/api/1.2/games", data={"game": (io.BytesIO(data), "two.zip")},
                       content_type="multipart/form-data")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_api_media_pagination(client, media_root: Path) -> None:
    touch(media_root / "a.png", make_png(40, 30))
    touch(media_root / "b.mp4")
    touch(media_root / "c.webp")
    body = client.get("/api/1.2/media?page=0&size=2").get_json()
    assert body["totalElements"] == 3 and body["totalPages"] == 2
    assert body["content"][0] == {"fileName": "a.png", "type": "IMAGE", "width": 40, "height": 30}
    assert body["content"][1] == {"fileName": "b.mp4", "type": "VIDEO"}

    assert client.get("/api/1.2/media?page=5&size=2").status_code == 404
    assert client.get("/api/1.2/media?page=-1").status_code == 400
    assert client.get("/api/1.2/media?size=0").status_code == 400


def test_api_media_empty_catalog_reports_one_page(client) -> None:
    body = client.get("/api/1.2/media").get_json()
    assert body["content"] == [] and body["totalPages"] == 1


def test_api_media_file_download(client, media_root: Path) -> None:
    touch(media_root / "clip.mov", b"movie")
    resp = client.get("/api/1.2/media/clip.mov")
    assert resp.status_code == 200
    assert resp.mimetype == "video/quicktime"
    assert resp.headers["Content-Disposition"].startswith("attachment")
    assert client.get("/api/1.2/media/ghost.png").status_code == 404


def test_api_media_upload_reports_per_file(client, media_root: Path) -> None:
    resp = client.post("/api/1.2/media", data={"files": [
        (io.BytesIO(b"img"), "pic.jpg"),
        (io.BytesIO(b"txt"), "notes.txt"),
    ]}, content_type="multipart/form-data")
    assert resp.status_code == 200
    content = resp.get_json()["content"]
    assert content[0]["fileName"] == "pic.jpg" and content[0]["error"] is None
    assert content[1]["fileName"] is None and content[1]["error"]
    assert (media_root / "pic.jpg").read_bytes() == b"img"


def test_api_media_upload_without_files_is_400(client) -> None:
    assert client.post("/api/1.2/media", data={}, content_type="multipart/form-data").status_code == 400


def test_api_media_delete_not_implemented(client) -> None:
    assert client.delete("/api/1.2/media/a.png").status_code == 501


def test_media_pages(client, media_root: Path) -> None:
    touch(media_root / "a.png", make_png())
    resp = client.get("/media")
    assert resp.status_code == 200 and b"a.png" in resp.data
    inline = client.get("/media/file/a.png")
    assert inline.status_code == 200 and inline.mimetype == "image/png"
    assert client.get("/media?page=-1").status_code == 400

    up = client.post("/media/upload", data={"files": [(io.BytesIO(b"v"), "new.webm")]},
                     content_type="multipart/form-data")
    assert up.status_code == 200 and b"uploaded successfully" in up.data
    assert (media_root / "new.webm").exists()


def test_games_page_upload_flashes_result(client, games_root: Path) -> None:
    data = make_zip({"Page/index.html": b"x"})
    resp = client.post("/games/upload", data={"game": (io.BytesIO(data), "page.zip")},
                       content_type="multipart/form-data", follow_redirects=True)
    assert resp.status_code == 200
    assert b"Page" in resp.data
    assert (games_root / "Page" / "index.html").exists()


def test_media_page_uses_saved_page_size(client, app, media_root: Path) -> None:
    for n in ["a.png", "b.png", "c.png"]:
        touch(media_root / n)
    resp = client.post("/settings", data={"page_size": "2"})
    assert resp.status_code == 302
    assert load_settings(Path(app.config["SETTINGS_FILE"]))["page_size"] == 2
    assert b'value="2"' in client.get("/settings").data
    resp = client.get("/media")
    assert b"a.png" in resp.data and b"c.png" not in resp.data


def test_load_settings_falls_back_on_bad_file(tmp_path: Path) -> None:
    f = tmp_path / "_myhub.json"
    f.write_text("{not json", encoding="utf-8")
    assert load_settings(f) == {"page_size": 10}
    f.write_text(json.dumps({"page_size": 0}), encoding="utf-8")
    assert load_settings(f)["page_size"] == 10
    assert load_settings(tmp_path / "missing.json") == {"page_size": 10}


def test_settings_rejects_bad_page_size(client, app) -> None:
    resp = client.post("/settings", data={"page_size": "0"}, follow_redirects=True)
    assert b"Page size must be a positive number" in resp.data
    assert not Path(app.config["SETTINGS_FILE"]).exists()


def test_api_game_upload_with_non_ascii_archive_name(client, games_root: Path) -> None:
    data = make_zip({"Igra/index.html": b"x"})
    resp = client.post("/api/1.2/games", data={"game": (io.BytesIO(data), "игра.zip")},
                       content_type="multipart/form-data")
    assert resp.status_code == 200, resp.data
    assert (games_root / "Igra" / "index.html").exists()
