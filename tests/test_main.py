import logging

from web_counter import app as app_module


def test_main_serves_app_with_settings(monkeypatch, caplog):
    monkeypatch.setenv("COUNTER_HOST", "127.0.0.1")
    monkeypatch.setenv("COUNTER_PORT", "3456")
    monkeypatch.setenv("COUNTER_THREADS", "3")
    calls = []

    def fake_serve(wsgi_app, **kwargs):
        calls.append((wsgi_app, kwargs))

    monkeypatch.setattr("waitress.serve", fake_serve)

    with caplog.at_level(logging.INFO, logger="web_counter.app"):
        app_module.main()

    assert calls == [(app_module.app, {"host": "127.0.0.1", "port": 3456, "threads": 3})]
    assert any("Listening on http://127.0.0.1:3456" in m for m in caplog.messages)
