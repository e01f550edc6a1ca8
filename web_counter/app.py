import logging
import re
from typing import Optional

from flask import Flask, Response, current_app, request

from .config import load_settings
from .pages import generate_countup_page, generate_top_page
from .store import MAX_COUNT, CounterOverflowError, CounterStore

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"\+?[0-9]+")


def parse_parameter(param: str) -> Optional[int]:
    """Extract ``diff`` from a ``diff=<n>`` request body.

    Only the first ``&``-separated field is looked at, and it is not
    percent-decoded. Returns None when the key is not ``diff`` or the value
    is not an unsigned integer that fits in MAX_COUNT.
    """
    first = param.split("&")[0]
    parts = first.split("=")
    if len(parts) < 2:
        return None
    key, val = parts[0], parts[1]
    if key != "diff" or not _DIGITS.fullmatch(val):
        return None
    n = int(val)
    if n > MAX_COUNT:
        return None
    return n


def _html(page: str) -> Response:
    # werkzeug fills in Content-Length from the encoded body
    return Response(page, status=200, content_type="text/html")


def _empty(status: int) -> Response:
    return Response(b"", status=status)


def _store() -> CounterStore:
    return current_app.extensions["counter_store"]


def create_app(store: Optional[CounterStore] = None) -> Flask:
    app = Flask(__name__)
    app.url_map.merge_slashes = False
    app.extensions["counter_store"] = store if store is not None else CounterStore()

    @app.before_request
    def only_get_and_post():
        if request.method not in ("GET", "POST"):
            return _empty(404)
        return None

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(_e):
        return _empty(404)

    @app.get("/")
    def top():
        return _html(generate_top_page(_store().read()))

    @app.post("/count-up")
    def count_up():
        try:
            param = request.get_data().decode("utf-8")
        except UnicodeDecodeError:
            logger.info("count-up: body is not valid UTF-8")
            return _empty(400)

        diff = parse_parameter(param)
        if diff is None:
            logger.info("count-up: rejected body %r", param[:64])
            return _empty(400)

        try:
            n = _store().increment_by(diff)
        except CounterOverflowError as e:
            logger.warning("count-up: %s", e)
            return _empty(400)

        logger.debug("count-up: +%d -> %d", diff, n)
        return _html(generate_countup_page(n))

    return app


app = create_app()


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from waitress import serve

    logger.info("Listening on http://%s:%d", settings.host, settings.port)
    serve(app, host=settings.host, port=settings.port, threads=settings.threads)


if __name__ == "__main__":
    main()
