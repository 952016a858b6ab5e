# shared head/nav kept inline per page, same Bootstrap dark look everywhere
GAMES_HTML = r"""<!doctype html>
<html lang="en" data-bs-theme="dark">
<head>
  <meta charset="utf-8">
  <title>Games — {{ app_title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
  <style>
    .card { border: 1px solid rgba(255,255,255,.08); }
    .title { white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }
  </style>
</head>
<body>
<nav class="navbar navbar-expand-lg bg-body-tertiary px-3">
  <a class="navbar-brand" href="{{ url_for('myhub.games') }}">{{ app_title }}</a>
  <div class="ms-auto d-flex gap-2">
    <a class="btn btn-outline-light btn-sm" href="{{ url_for('myhub.games') }}">Games</a>
    <a class="btn btn-outline-light btn-sm" href="{{ url_for('myhub.media') }}">Media</a>
  </div>
</nav>

<div class="container py-4">
  {% with messages = get_flashed_messages() %}
    {% if messages %}
      <div class="alert alert-warning">{{ messages|join('. ') }}</div>
    {% endif %}
  {% endwith %}

  <form class="card p-3 mb-4" action="{{ url_for('myhub.games_upload') }}" method="post" enctype="multipart/form-data">
    <label class="form-label">Upload a game (.zip with one folder holding one .html file)</label>
    <div class="d-flex gap-2">
      <input class="form-control" type="file" name="game" accept=".zip" required>
      <button class="btn btn-success" type="submit">Upload</button>
    </div>
  </form>

  {% if not games %}
    <div class="text-center py-5">
      <h4>No games found in <code>{{ root }}</code>.</h4>
      <p class="text-secondary">Add one folder per game with exactly one .html file inside.</p>
    </div>
  {% else %}
  <div class="row row-cols-1 row-cols-sm-2 row-cols-md-3 row-cols-xl-5 g-4">
    {% for name in games %}
      <div class="col">
        <div class="card h-100 shadow-sm">
          <div class="card-body d-flex flex-column">
            <div class="title fw-semibold" title="{{ name }}">{{ name }}</div>
            <div class="mt-2">
              <a class="btn btn-success btn-sm" href="{{ url_for('myhub.launch_game', name=name) }}">Play</a>
            </div>
          </div>
        </div>
      </div>
    {% endfor %}
  </div>
  {% endif %}
</div>
</body>
</html>
"""

MEDIA_HTML = r"""<!doctype html>
<html lang="en" data-bs-theme="dark">
<head>
  <meta charset="utf-8">
  <title>Media — {{ app_title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
  <style>
    .card { border: 1px solid rgba(255,255,255,.08); }
    .media-item { width: 100%; height: 220px; object-fit: cover; border-radius: .5rem .5rem 0 0; background:#222; }
    .title { white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }
  </style>
</head>
<body>
<nav class="navbar navbar-expand-lg bg-body-tertiary px-3">
  <a class="navbar-brand" href="{{ url_for('myhub.games') }}">{{ app_title }}</a>
  <div class="ms-auto d-flex gap-2">
    <a class="btn btn-outline-light btn-sm" href="{{ url_for('myhub.games') }}">Games</a>
    <a class="btn btn-outline-light btn-sm" href="{{ url_for('myhub.media_upload_form') }}">Upload</a>
    <a class="btn btn-outline-light btn-sm" href="{{ url_for('myhub.settings') }}">Settings</a>
  </div>
</nav>

<div class="container py-4">
  <div class="mb-3 small">{{ total_count }} files, page {{ current_page + 1 }} of {{ total_pages or 1 }}</div>

  <div class="row row-cols-1 row-cols-sm-2 row-cols-md-3 row-cols-xl-4 g-4">
    {% for m in media %}
      <div class="col">
        <div class="card h-100 shadow-sm">
          {% if m.type.value == 'IMAGE' %}
            <img class="media-item" src="{{ url_for('myhub.media_file', filename=m.file_name) }}" alt="{{ m.file_name }}">
          {% else %}
            <video class="media-item" src="{{ url_for('myhub.media_file', filename=m.file_name) }}" controls preload="metadata"></video>
          {% endif %}
          <div class="card-body">
            <div class="title small" title="{{ m.file_name }}">{{ m.file_name }}</div>
          </div>
        </div>
      </div>
    {% endfor %}
  </div>

  <nav class="mt-4 d-flex gap-2">
    {% if current_page > 0 %}
      <a class="btn btn-outline-light btn-sm" href="{{ url_for('myhub.media', page=current_page - 1, size=size) }}">Previous</a>
    {% endif %}
    {% if current_page + 1 < total_pages %}
      <a class="btn btn-outline-light btn-sm" href="{{ url_for('myhub.media', page=current_page + 1, size=size) }}">Next</a>
    {% endif %}
  </nav>
</div>
</body>
</html>
"""

UPLOAD_HTML = r"""<!doctype html>
<html lang="en" data-bs-theme="dark">
<head>
  <meta charset="utf-8">
  <title>Upload — {{ app_title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
</head>
<body>
<nav class="navbar navbar-expand-lg bg-body-tertiary px-3">
  <a class="navbar-brand" href="{{ url_for('myhub.games') }}">{{ app_title }}</a>
  <div class="ms-auto">
    <a class="btn btn-outline-light btn-sm" href="{{ url_for('myhub.media') }}">Media</a>
  </div>
</nav>

<div class="container py-4">
  {% if message %}
    <div class="alert alert-info">{{ message }}</div>
  {% endif %}
  {% if results %}
    <ul class="small">
      {% for r in results %}
        <li>{{ r.original_name }}:
          {% if r.ok %}stored as <code>{{ r.stored_name }}</code>{% else %}<span class="text-warning">{{ r.error }}</span>{% endif %}
        </li>
      {% endfor %}
    </ul>
  {% endif %}
  <form class="card p-3" action="{{ url_for('myhub.media_upload') }}" method="post" enctype="multipart/form-data">
    <label class="form-label">Images or videos</label>
    <input class="form-control mb-2" type="file" name="files" multiple required>
    <button class="btn btn-success" type="submit">Upload</button>
  </form>
</div>
</body>
</html>
"""

SETTINGS_HTML = r"""<!doctype html>
<html lang="en" data-bs-theme="dark">
<head>
  <meta charset="utf-8">
  <title>Settings — {{ app_title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
</head>
<body>
<nav class="navbar navbar-expand-lg bg-body-tertiary px-3">
  <a class="navbar-brand" href="{{ url_for('myhub.games') }}">{{ app_title }}</a>
  <div class="ms-auto">
    <a class="btn btn-outline-light btn-sm" href="{{ url_for('myhub.media') }}">Media</a>
  </div>
</nav>

<div class="container py-4">
  {% with messages = get_flashed_messages() %}
    {% if messages %}
      <div class="alert alert-warning">{{ messages|join('. ') }}</div>
    {% endif %}
  {% endwith %}
  <form class="card p-3" action="{{ url_for('myhub.settings_post') }}" method="post">
    <label class="form-label">Media per page</label>
    <input class="form-control mb-2" type="number" name="page_size" min="1" value="{{ page_size }}" required>
    <button class="btn btn-success" type="submit">Save</button>
  </form>
</div>
</body>
</html>
"""

ERROR_HTML = r"""<!doctype html>
<html lang="en" data-bs-theme="dark">
<head>
  <meta charset="utf-8">
  <title>{{ status }} — {{ app_title }}</title>
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
</head>
<body>
<div class="container py-5 text-center">
  <h3>{{ status }}</h3>
  <p class="text-secondary">{{ message }}</p>
  <a class="btn btn-outline-light btn-sm" href="{{ url_for('myhub.games') }}">Back</a>
</div>
</body>
</html>
"""
