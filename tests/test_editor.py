import pytest

from clinvardl.editor import DarwinEditor, Editor, LinuxEditor, WindowsEditor


@pytest.fixture
def no_editor(monkeypatch):
    monkeypatch.delenv("EDITOR", raising=False)


def test_from_env_unset_is_empty(no_editor):
    assert Editor.from_env() == Editor(name="", path="")


def test_from_env_reads_basename(monkeypatch):
    monkeypatch.setenv("EDITOR", "/usr/local/bin/nano")
    editor = Editor.from_env()
    assert editor.path == "/usr/local/bin/nano"
    assert editor.name == "nano"


def test_linux_default(no_editor):
    assert LinuxEditor().info() == Editor(name="vi", path="/usr/bin/vi")


def test_darwin_default(no_editor):
    assert DarwinEditor().info() == Editor(name="open", path="/usr/bin/open")


def test_windows_default(no_editor):
    assert WindowsEditor().info() == Editor(name="notepad", path="C:\\Windows\\System32\\notepad.exe")


@pytest.mark.parametrize("cls", [LinuxEditor, DarwinEditor, WindowsEditor])
def test_env_overrides_default(monkeypatch, cls):
    monkeypatch.setenv("EDITOR", "/opt/tools/emacs")
    assert cls().info() == Editor(name="emacs", path="/opt/tools/emacs")


def test_empty_env_falls_back(monkeypatch):
    monkeypatch.setenv("EDITOR", "")
    assert LinuxEditor().info() == Editor(name="vi", path="/usr/bin/vi")


def test_info_returns_plain_editor(no_editor):
    result = DarwinEditor().info()
    assert type(result) is Editor
    assert result.name == DarwinEditor().name