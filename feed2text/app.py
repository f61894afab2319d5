"""HTTP boundary for the feed2text service."""

import uuid
from importlib import resources
from typing import Any

from flask import Flask, Response, abort, g, request

from .config import Config
from .errors import Feed2TextError, ValidationError
from .fetch import create_session
from .html import HtmlExtractor
from .logging_config import create_request_logger, setup_structured_logging
from .params import parse_html_params, parse_rss_params
from .rss import FeedProcessor

TEXT_MIMETYPE = "text/plain; charset=utf-8"
MARKDOWN_MIMETYPE = "text/markdown; charset=utf-8"
USAGE_DOCUMENT = "USAGE.md"


def text_response(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype=TEXT_MIMETYPE)


def current_request_id() -> str:
    """Request id shared by every log line of the current request."""
    if "request_id" not in g:
        g.request_id = (
            request.headers.get("X-Request-ID") or f"req_{uuid.uuid4().hex[:16]}"
        )
    return g.request_id


def load_usage_document() -> str:
    """Read the usage document bundled with the package."""
    return resources.files("feed2text").joinpath(USAGE_DOCUMENT).read_text("utf-8")


def create_app(test_config: dict[str, Any] | None = None) -> Flask:
    """Build the Flask application.

    Args:
        test_config: Overrides applied on top of the environment configuration

    Returns:
        Configured Flask app
    """
    config = Config()
    fetch_config = config.get_fetch_config()

    app = Flask(__name__)
    app.config.update(
        FETCH_TIMEOUT=fetch_config.timeout,
        USER_AGENT=fetch_config.user_agent,
    )
    if test_config:
        app.config.update(test_config)

    session = create_session(app.config["USER_AGENT"])
    app.extensions["feed2text_session"] = session
    usage = load_usage_document()

    @app.before_request
    def reject_non_get():
        # Flask maps HEAD onto GET routes
        if request.method != "GET":
            abort(405, valid_methods=["GET"])

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError) -> Response:
        logger = create_request_logger("app", current_request_id())
        logger.warning(f"Rejected request: {exc}", error=str(exc), url=request.url)
        return text_response(str(exc), exc.status_code)

    @app.route("/process-rss", methods=["GET"], provide_automatic_options=False)
    def process_rss_route() -> Response:
        request_id = current_request_id()
        url, options = parse_rss_params(request.args)
        processor = FeedProcessor(
            timeout=app.config["FETCH_TIMEOUT"],
            request_id=request_id,
            session=session,
        )
        try:
            content = processor.process(url, options)
        except ValidationError:
            raise
        except Feed2TextError as e:
            return text_response(f"Error processing RSS feed: {e}", e.status_code)
        return text_response(content)

    @app.route("/process-html", methods=["GET"], provide_automatic_options=False)
    def process_html_route() -> Response:
        request_id = current_request_id()
        url, options = parse_html_params(request.args)
        extractor = HtmlExtractor(
            timeout=app.config["FETCH_TIMEOUT"],
            request_id=request_id,
            session=session,
        )
        try:
            content = extractor.extract(url, options)
        except ValidationError:
            raise
        except Feed2TextError as e:
            return text_response(f"Failed to fetch HTML: {e}", e.status_code)
        return text_response(content)

    @app.route("/", methods=["GET"], provide_automatic_options=False)
    def usage_route() -> Response:
        return Response(usage, status=200, mimetype=MARKDOWN_MIMETYPE)

    return app


def main() -> None:
    """Run the HTTP server."""
    config = Config()
    setup_structured_logging(config.log_level)
    server = config.get_server_config()

    logger = create_request_logger("app", "startup")
    logger.info(f"Server listening on {server.host}:{server.port}")

    app = create_app()
    app.run(host=server.host, port=server.port, threaded=True)


if __name__ == "__main__":
    main()
