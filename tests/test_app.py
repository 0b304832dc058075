import logging
from logging.handlers import TimedRotatingFileHandler

from bizcards.core.config import Settings
from bizcards.core.logging_config import REQUEST_LOGGER, configure_logging
from bizcards.middleware.error_logger import describe_status


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_unknown_route(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.json() == {
        "error": "Page not found",
        "message": "The route '/api/nothing-here' does not exist",
    }


def test_missing_resource_keeps_detail_shape(client):
    r = client.get("/api/cards/12")
    assert r.status_code == 404
    assert r.json() == {"detail": "No card with id 12 found"}


def test_error_responses_are_logged(client, caplog):
    with caplog.at_level(logging.WARNING, logger="bizcards.requests"):
        client.get("/api/users")
        client.get("/")
    messages = [rec.getMessage() for rec in caplog.records if rec.name == "bizcards.requests"]
    assert messages == [
        'UNAUTHORIZED: GET /api/users - Status: 401 - {"detail":"Access denied. No token provided."}'
    ]


def test_logged_error_response_still_reaches_client(client, caplog):
    with caplog.at_level(logging.WARNING, logger="bizcards.requests"):
        r = client.get("/api/users")
    assert r.status_code == 401
    assert r.json() == {"detail": "Access denied. No token provided."}
    assert r.headers["WWW-Authenticate"] == "Bearer"


def test_status_labels():
    assert describe_status(400) == "BAD REQUEST"
    assert describe_status(403) == "FORBIDDEN"
    assert describe_status(500) == "SERVER ERROR"
    assert describe_status(418) == "ERROR"


def test_error_log_file_records_response_body(client, tmp_path):
    configure_logging(Settings(LOG_DIR=str(tmp_path)))
    request_logger = logging.getLogger(REQUEST_LOGGER)
    handlers = [h for h in request_logger.handlers if isinstance(h, TimedRotatingFileHandler)]
    try:
        client.get("/api/users")
    finally:
        for handler in handlers:
            request_logger.removeHandler(handler)
            handler.close()
    assert len(handlers) == 1
    content = (tmp_path / "errors.log").read_text(encoding="utf-8")
    assert "WARNING: UNAUTHORIZED: GET /api/users - Status: 401" in content
    assert "Access denied. No token provided." in content
