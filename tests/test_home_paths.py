import os

from fbrowser.utils.filesystem import home_paths
from fbrowser.utils.filesystem.home_paths import paths_to_home


def test_chain_is_root_first_and_ends_at_home(monkeypatch, tmp_path):
    home = tmp_path / "users" / "me"
    home.mkdir(parents=True)
    monkeypatch.setattr(os.path, "expanduser", lambda p: str(home))

    chain = paths_to_home()

    assert chain[0] == "/"
    assert chain[-1] == str(home)
    assert str(tmp_path) in chain
    for parent, child in zip(chain, chain[1:]):
        assert os.path.dirname(child) == parent


def test_missing_home_falls_back_to_root(monkeypatch, tmp_path, caplog):
    monkeypatch.setattr(os.path, "expanduser", lambda p: str(tmp_path / "gone"))

    assert paths_to_home() == ["/"]
    assert "nonexistent" in caplog.text


def test_unexpanded_home_falls_back_to_root(monkeypatch):
    monkeypatch.setattr(os.path, "expanduser", lambda p: p)

    assert paths_to_home() == ["/"]


def test_unreadable_home_falls_back_to_root(monkeypatch, tmp_path, caplog):
    monkeypatch.setattr(os.path, "expanduser", lambda p: str(tmp_path))
    monkeypatch.setattr(home_paths.os, "access", lambda path, mode: False)

    assert paths_to_home() == ["/"]
    assert "not readable" in caplog.text
