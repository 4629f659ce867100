"""
Module: conftest.py

Date: 2026-10-18

Global pytest configuration and fixtures for the fbrowser test suite.
Includes CI-friendly setup for PyQt5 testing and directory fixtures.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI and local-only tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ

    if is_ci:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")

        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture(scope="session")
def qapp():
    """Create the QApplication shared by all tests."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def browse_dir(tmp_path):
    """Directory with a mix of visible and hidden files and folders.

    Layout:
        beta/            (dir)
        alpha/           (dir)
        .git/            (hidden dir)
        notes.txt        (11 bytes)
        archive.zip      (2048 bytes)
        photo.png        (4 bytes)
        .hidden          (hidden file)
    """
    (tmp_path / "beta").mkdir()
    (tmp_path / "alpha").mkdir()
    (tmp_path / ".git").mkdir()
    (tmp_path / "notes.txt").write_text("hello world")
    (tmp_path / "archive.zip").write_bytes(b"\0" * 2048)
    (tmp_path / "photo.png").write_bytes(b"\x89PNG")
    (tmp_path / ".hidden").write_text("secret")
    return tmp_path


@pytest.fixture
def dir_model(qapp):
    """Fresh DirModel with default managers."""
    from fbrowser.models.dir_model import DirModel

    model = DirModel()
    yield model
    model.deleteLater()


@pytest.fixture
def signal_log(dir_model):
    """Record path_changed and operation_failed emissions of dir_model."""
    log = {"path_changed": 0, "operation_failed": []}

    def on_path_changed():
        log["path_changed"] += 1

    def on_failed(path, message):
        log["operation_failed"].append((path, message))

    dir_model.path_changed.connect(on_path_changed)
    dir_model.operation_failed.connect(on_failed)
    return log


@pytest.fixture
def english_collation(monkeypatch):
    """Switch LC_COLLATE to en_US.UTF-8 for one test, skipping if unavailable."""
    import locale

    from fbrowser.models.dir_model import sort_manager

    # Keep SortManager from resetting the collation to the environment's
    monkeypatch.setattr(sort_manager, "_collation_setup_attempted", True)

    previous = locale.setlocale(locale.LC_COLLATE)
    for name in ("en_US.UTF-8", "en_US.utf8"):
        try:
            locale.setlocale(locale.LC_COLLATE, name)
            break
        except locale.Error:
            continue
    else:
        pytest.skip("en_US.UTF-8 locale not installed")

    yield
    locale.setlocale(locale.LC_COLLATE, previous)
