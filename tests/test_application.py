from pathlib import Path

import pytest

from lenna.application import Application, Settings, configure, current


@pytest.fixture
def restore_app():
    app = current()
    saved = (app.name, app.version, app.organization, app.dir_path)
    yield
    configure(*saved)


def test_value_default_and_round_trip(tmp_path):
    settings = Settings("org", "app", tmp_path / "s.json")
    assert settings.value("missing", 7) == 7
    settings.set_value("TipsDialog/counter", 3)
    settings.set_value("language", "english")
    reopened = Settings("org", "app", tmp_path / "s.json")
    assert reopened.value("TipsDialog/counter") == 3
    assert reopened.value("language") == "english"


def test_child_keys(tmp_path):
    settings = Settings(path=tmp_path / "s.json")
    settings.set_value("group/b", 1)
    settings.set_value("group/a", 2)
    settings.set_value("group/sub/c", 3)
    settings.set_value("top", 4)
    assert settings.child_keys("group") == ["a", "b"]
    assert settings.child_keys() == ["top"]
    assert settings.child_keys("nothing") == []


def test_remove_group(tmp_path):
    settings = Settings(path=tmp_path / "s.json")
    settings.set_value("active-plugins/x", "resize")
    settings.set_value("active-plugins/y", "savefile")
    settings.set_value("active-pluginsX", "kept")
    settings.remove("active-plugins")
    assert settings.child_keys("active-plugins") == []
    assert settings.value("active-pluginsX") == "kept"
    assert Settings(path=tmp_path / "s.json").value("active-plugins/x") is None


def test_remove_all(tmp_path):
    settings = Settings(path=tmp_path / "s.json")
    settings.set_value("a", 1)
    settings.remove("")
    assert settings.child_keys() == []


def test_bad_file_rejected(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        Settings(path=path)


def test_application_settings_uses_identity(tmp_path):
    app = Application(name="myapp", organization="myorg", dir_path=tmp_path)
    settings = app.settings(tmp_path / "x.json")
    assert (settings.organization, settings.application) == ("myorg", "myapp")
    assert settings.path == tmp_path / "x.json"


def test_configure_updates_current(tmp_path, restore_app):
    app = configure(name="lenna-test", version="1.2", dir_path=str(tmp_path))
    assert app is current()
    assert current().name == "lenna-test"
    assert current().version == "1.2"
    assert current().dir_path == Path(tmp_path)


def test_configure_keeps_unspecified(restore_app):
    before = current().organization
    configure(version="9")
    assert current().organization == before
    assert current().version == "9"