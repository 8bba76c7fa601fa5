import logging

from readermode import logging_setup


def test_normalise_level_accepts_names_numbers_and_junk():
    assert logging_setup.normalise_level("warning") == logging.WARNING
    assert logging_setup.normalise_level("15") == 15
    assert logging_setup.normalise_level("WARN") == logging.WARNING
    assert logging_setup.normalise_level(logging.DEBUG) == logging.DEBUG
    assert logging_setup.normalise_level("not-a-level") == logging.INFO
    assert logging_setup.normalise_level(None) == logging.INFO


def test_configure_logging_writes_fresh_file(tmp_path):
    path = logging_setup.configure_logging("debug", log_dir=tmp_path)
    logging.getLogger("readermode.test").debug("first run")
    path = logging_setup.configure_logging("debug", log_dir=tmp_path)
    logging.getLogger("readermode.test").debug("second run")

    for handler in logging.root.handlers:
        handler.flush()
    contents = path.read_text(encoding="utf-8")

    assert path.parent == tmp_path
    assert logging.root.level == logging.DEBUG
    assert "second run" in contents
    assert "first run" not in contents
    assert len(logging.root.handlers) == 2


def test_server_entrypoint_passes_numeric_level_to_uvicorn(monkeypatch):
    import uvicorn

    import readermode.__main__ as entrypoint
    import readermode.main as main_module

    captured = {}

    def fake_run(app, **kwargs):
        captured["app"] = app
        captured.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", fake_run)
    monkeypatch.setenv("LOG_LEVEL", "WARN")

    entrypoint.main()

    assert captured["app"] is main_module.app
    assert captured["port"] == entrypoint.PORT
    assert captured["log_level"] == logging.WARNING
