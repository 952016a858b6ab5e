class MyHubError(Exception):
    """Base for catalog errors; `status` is the HTTP code the web layer answers with."""
    status = 500


class InvalidRoot(MyHubError):
    status = 500


class MalformedGame(MyHubError):
    status = 400


class MalformedArchive(MyHubError):
    status = 400


class UnsupportedMediaExtension(MyHubError, ValueError):
    status = 400


class DuplicateUpload(MyHubError):
    status = 409


class InvalidUpload(MyHubError):
    status = 400


class InvalidRequest(MyHubError):
    status = 400


class NotFound(MyHubError):
    status = 404
