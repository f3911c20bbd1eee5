"""Minimal translation helpers for GUI text."""
from __future__ import annotations

from typing import Dict

from PySide6.QtCore import QLocale

from .models import ErrorRecord

Translations = Dict[str, str]


_TRANSLATIONS: Dict[str, Translations] = {
    "en": {
        "error_action_label": "Action",
        "window_title": "Translate Error Code",
        "lookup_group": "Error code",
        "input_placeholder": "Decimal or 0x hex value",
        "input_tooltip": (
            "Enter a Win32, HRESULT, NTSTATUS, Windows Update, LDAP or stop code "
            "as decimal (e.g. -1073741510) or hexadecimal (e.g. 0xC000013A)"
        ),
        "search_tooltip": "Translate the error code",
        "project_link": "Project page",
        "ready": "Ready",
        "lookup_done": "{count} description(s) found for {hex}",
        "platform_lookup_unavailable": (
            "Win32/HRESULT and NTSTATUS texts are only available on Windows"
        ),
        "config_error_title": "Configuration Error",
        "config_error_body": (
            "Failed to load configuration file.\n{detail}\n"
            "Delete or fix code-translator.config.yaml and retry."
        ),
        "storage_warning_title": "Storage problem",
        "storage_warning_body": (
            "Some settings could not be saved. The last input will not be remembered."
        ),
        "storage_warning_line": "{scope} ({action}): {path}\n{detail}",
        "storage_warning_continue": "Continue",
        "storage_warning_exit": "Exit",
        "storage_scope_state": "Application state",
        "storage_scope_config": "Configuration",
        "storage_action_write": "write",
        "error.input_empty.message": "No error code was entered.",
        "error.input_empty.action": "Type a decimal or 0x hexadecimal number.",
        "error.input_malformed.message": "'{value}' is not a decimal or 0x hexadecimal number.",
        "error.input_malformed.action": "Use digits only, optionally prefixed with - or 0x.",
        "error.input_out_of_range.message": "'{value}' does not fit into 32 bits.",
        "error.input_out_of_range.action": (
            "Enter a value between -2147483648 and 4294967295 (0xFFFFFFFF)."
        ),
        "error.input_too_long.message": "The input is longer than {limit} characters.",
        "error.input_too_long.action": "Shorten the value and retry.",
    },
    "de": {
        "error_action_label": "Aktion",
        "window_title": "Fehlercode übersetzen",
        "lookup_group": "Fehlercode",
        "input_placeholder": "Dezimal- oder 0x-Hexwert",
        "input_tooltip": (
            "Win32-, HRESULT-, NTSTATUS-, Windows Update-, LDAP- oder Stopcode "
            "dezimal (z. B. -1073741510) oder hexadezimal (z. B. 0xC000013A) eingeben"
        ),
        "search_tooltip": "Fehlercode übersetzen",
        "project_link": "Projektseite",
        "ready": "Bereit",
        "lookup_done": "{count} Beschreibung(en) für {hex} gefunden",
        "platform_lookup_unavailable": (
            "Win32/HRESULT- und NTSTATUS-Texte gibt es nur unter Windows"
        ),
        "config_error_title": "Konfigurationsfehler",
        "config_error_body": (
            "Die Konfigurationsdatei konnte nicht geladen werden.\n{detail}\n"
            "code-translator.config.yaml löschen oder korrigieren und erneut starten."
        ),
        "storage_warning_title": "Speicherproblem",
        "storage_warning_body": (
            "Einige Einstellungen konnten nicht gespeichert werden. "
            "Die letzte Eingabe wird nicht gemerkt."
        ),
        "storage_warning_continue": "Weiter",
        "storage_warning_exit": "Beenden",
        "storage_scope_state": "Anwendungszustand",
        "storage_scope_config": "Konfiguration",
        "storage_action_write": "schreiben",
        "error.input_empty.message": "Es wurde kein Fehlercode eingegeben.",
        "error.input_empty.action": "Eine Dezimalzahl oder 0x-Hexzahl eingeben.",
        "error.input_malformed.message": "'{value}' ist keine Dezimal- oder 0x-Hexzahl.",
        "error.input_malformed.action": "Nur Ziffern verwenden, optional mit - oder 0x davor.",
        "error.input_out_of_range.message": "'{value}' passt nicht in 32 Bit.",
        "error.input_out_of_range.action": (
            "Einen Wert zwischen -2147483648 und 4294967295 (0xFFFFFFFF) eingeben."
        ),
        "error.input_too_long.message": "Die Eingabe ist länger als {limit} Zeichen.",
        "error.input_too_long.action": "Den Wert kürzen und erneut versuchen.",
    },
}


DEFAULT_LANGUAGE = "en"


def detect_language() -> str:
    """Return the UI language code based on OS locale."""
    if QLocale.system().language() == QLocale.Language.German:
        return "de"
    return DEFAULT_LANGUAGE


def translate(key: str, lang: str | None = None) -> str:
    """Simple dictionary lookup with English fallback."""
    language = lang or detect_language()
    catalog = _TRANSLATIONS.get(language, _TRANSLATIONS[DEFAULT_LANGUAGE])
    if key in catalog:
        return catalog[key]
    return _TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key)


def _format_template(template: str, context: Dict[str, str]) -> str:
    try:
        return template.format(**context)
    except KeyError:
        return template


def format_error_record(record: ErrorRecord, lang: str | None = None) -> str:
    """Return a localized string combining code, message, and action."""

    language = lang or detect_language()
    message = _format_template(translate(record.message_key, language), record.context)
    action = _format_template(translate(record.action_key, language), record.context)
    action_label = translate("error_action_label", language)
    return f"[{record.code}] {message} ({action_label}: {action})"
