"""Regression tests for the CLI entrypoint helpers."""
from __future__ import annotations

import argparse
import io
import json
import sys
import types

import pytest

from code_translator import main as entry
from code_translator.platform_resolver import NullPlatformResolver
from code_translator.resolver import Resolver


def _stub_app_icon(monkeypatch, icon):
    module = types.ModuleType("code_translator.gui.app_icon")
    module.load_app_icon = lambda: icon
    monkeypatch.setitem(sys.modules, "code_translator.gui.app_icon", module)


def _settings(max_length: int = 30):
    return types.SimpleNamespace(
        lookup=types.SimpleNamespace(platform_lookup=False, input_max_length=max_length)
    )


@pytest.fixture
def offline_resolver(monkeypatch):
    resolver = Resolver(platform=NullPlatformResolver())
    monkeypatch.setattr(entry, "get_resolver", lambda platform_lookup=True: resolver)
    return resolver


def test_build_arg_parser_includes_flags():
    parser = entry.build_arg_parser()
    assert isinstance(parser, argparse.ArgumentParser)
    args = parser.parse_args(["--debug", "--lookup", "0x9", "--json", "--write-config", "cfg.yaml"])
    assert args.debug is True
    assert args.lookup == "0x9"
    assert args.json is True
    assert str(args.write_config) == "cfg.yaml"


def test_run_lookup_prints_rendered_report(offline_resolver):
    out = io.StringIO()

    assert entry.run_lookup("0xDEADDEAD", _settings(), out=out) == 0

    text = out.getvalue()
    assert text.startswith("DWORD \t3735936685\nint \t-559030611\nHex \t0xDEADDEAD")
    assert "StopCode/BugCheck: MANUALLY_INITIATED_CRASH1" in text


def test_run_lookup_json_output(offline_resolver):
    out = io.StringIO()

    assert entry.run_lookup("9", _settings(), as_json=True, out=out) == 0

    payload = json.loads(out.getvalue())
    assert payload["hex"] == "0x00000009"
    assert payload["hits"] == [
        {"namespace": "directory-protocol", "label": "LDAP", "text": "LDAP_PARTIAL_RESULTS"},
        {
            "namespace": "kernel-panic",
            "label": "StopCode/BugCheck",
            "text": "IRQL_NOT_GREATER_OR_EQUAL",
        },
    ]


def test_run_lookup_rejects_invalid_input(offline_resolver):
    out = io.StringIO()
    err = io.StringIO()

    result = entry.run_lookup("0xZZ", _settings(), out=out, err=err)

    assert result == entry.EXIT_INVALID_INPUT
    assert out.getvalue() == ""
    assert "[TC002]" in err.getvalue()


def test_main_lookup_mode_skips_gui(monkeypatch, capsys, offline_resolver):
    class ExplodingApplication:
        def __init__(self, *_):
            raise AssertionError("GUI must not start in lookup mode")

    monkeypatch.setattr(entry, "QApplication", ExplodingApplication)
    monkeypatch.setattr(entry, "get_settings", lambda: _settings())

    assert entry.main(["--lookup", "0x00240005"]) == 0
    assert "WU: WU_S_REBOOT_REQUIRED" in capsys.readouterr().out


def test_main_lookup_accepts_negative_hex_with_equals_form(monkeypatch, capsys, offline_resolver):
    monkeypatch.setattr(entry, "get_settings", lambda: _settings())

    assert entry.main(["--lookup=-0x1", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["unsigned"] == 0xFFFFFFFF
    assert payload["signed"] == -1
    assert payload["hex"] == "0xFFFFFFFF"


def test_main_lookup_accepts_negative_decimal(monkeypatch, capsys, offline_resolver):
    monkeypatch.setattr(entry, "get_settings", lambda: _settings())

    assert entry.main(["--lookup", "-559030611"]) == 0
    assert "StopCode/BugCheck: MANUALLY_INITIATED_CRASH1" in capsys.readouterr().out


def test_main_lookup_mode_reports_configuration_error(monkeypatch, capsys):
    def fake_get_settings():
        raise entry.ConfigurationError("boom")

    monkeypatch.setattr(entry, "get_settings", fake_get_settings)
    monkeypatch.setattr(entry.logging, "exception", lambda *_: None)

    assert entry.main(["--lookup", "1"]) == 1
    assert "boom" in capsys.readouterr().err


def test_main_exits_when_configuration_fails(monkeypatch):
    class FakeWindow:
        def __init__(self, *args, **kwargs):
            pass

        def show(self):
            pass

    class FakeApplication:
        def __init__(self, *_):
            pass

        def exec(self):
            return 0

        def setWindowIcon(self, *_):
            pass

    class DummyIcon:
        def isNull(self):
            return True

    class FakeMessageBox:
        def critical(self, *args, **kwargs):
            self.called = True

    fake_message_box = FakeMessageBox()
    monkeypatch.setattr(entry, "QApplication", FakeApplication)
    monkeypatch.setattr(entry, "MainWindow", FakeWindow)
    monkeypatch.setattr(entry, "QMessageBox", fake_message_box)
    monkeypatch.setattr(entry.logging, "exception", lambda *_: None)

    def fake_get_settings():
        raise entry.ConfigurationError("boom")

    monkeypatch.setattr(entry, "get_settings", fake_get_settings)
    _stub_app_icon(monkeypatch, DummyIcon())

    assert entry.main([]) == 1
    assert getattr(fake_message_box, "called", False) is True


def test_main_runs_success_path(monkeypatch):
    events: dict[str, object] = {}
    expected_exit_code = 7

    class FakeIcon:
        def isNull(self):
            return False

    class FakeApplication:
        def __init__(self, argv):
            events["argv"] = list(argv)

        def setWindowIcon(self, icon):
            events["icon_set"] = icon

        def exec(self):
            return expected_exit_code

    class FakeWindow:
        def __init__(self, settings, app_icon):
            events["window_settings"] = settings
            events["window_icon"] = app_icon

        def show(self):
            events["window_shown"] = True

    settings = _settings()
    monkeypatch.setattr(entry, "QApplication", FakeApplication)
    monkeypatch.setattr(entry, "MainWindow", FakeWindow)
    monkeypatch.setattr(entry, "get_settings", lambda: settings)
    monkeypatch.setattr(entry, "QMessageBox", types.SimpleNamespace(critical=lambda *args, **kwargs: None))
    icon = FakeIcon()
    _stub_app_icon(monkeypatch, icon)

    result = entry.main(["--debug"])

    assert result == expected_exit_code
    assert events["window_shown"] is True
    assert events["window_icon"] is icon
    assert events["icon_set"] is icon
    assert events["window_settings"] is settings


def test_main_write_config_writes_template_without_gui(monkeypatch, tmp_path, capsys):
    class ExplodingApplication:
        def __init__(self, *_):
            raise AssertionError("GUI must not start when writing the template")

    monkeypatch.setattr(entry, "QApplication", ExplodingApplication)
    target = tmp_path / "nested" / "code-translator.config.yaml"

    assert entry.main(["--write-config", str(target)]) == 0

    assert target.exists()
    assert str(target) in capsys.readouterr().out
