"""Tests for message resolution, fallback chains and the Translator facade.

Python 3.13+.
"""

import logging
from datetime import date
from pathlib import Path

import pytest

from tests.helpers.types import WriteTranslation
from tongues import translate
from tongues.diagnostics import (
    ArgumentTypeError,
    DiagnosticCode,
    FallbackCycleError,
    FileResolutionFailure,
    KeyNotFound,
    LocaleParseError,
    MarkupSyntaxError,
)
from tongues.localization import (
    FallbackInfo,
    ResolverConfig,
    Translator,
    lookup_key,
    resolve_message,
)
from tongues.localization.orchestrator import stringify_value


class TestLookupKey:
    """Test lookup_key tree walking."""

    def test_nested_hit(self) -> None:
        """Every segment resolves."""
        assert lookup_key({"a": {"b": "c"}}, ("a", "b")) == ("c", None)

    def test_reports_first_missing_segment(self) -> None:
        """Miss returns the first segment that failed."""
        assert lookup_key({"a": {"b": "c"}}, ("a", "x", "y")) == (None, "x")

    def test_cannot_descend_into_string(self) -> None:
        """A leaf string has no children."""
        assert lookup_key({"greeting": "hi"}, ("greeting", "missing")) == (None, "missing")

    def test_empty_segment_never_matches(self) -> None:
        """Segments from doubled dots fail unless the table has an empty key."""
        assert lookup_key({"a": {"b": "c"}}, ("a", "", "b")) == (None, "")

    def test_intermediate_table_returned(self) -> None:
        """A path may stop at a table."""
        assert lookup_key({"a": {"b": "c"}}, ("a",)) == ({"b": "c"}, None)


class TestStringifyValue:
    """Test TOML-style rendering of non-string leaves."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("plain", "plain"),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (1.5, "1.5"),
            (date(2024, 2, 29), "2024-02-29"),
            ([1, "two"], '[1, "two"]'),
            ({}, "{}"),
            ({"a": "b", "n": [1, 2]}, '{ a = "b", n = [1, 2] }'),
        ],
    )
    def test_values(self, value: object, expected: str) -> None:
        """Each TOML type has a textual form."""
        assert stringify_value(value) == expected

    def test_nested_string_escaped(self) -> None:
        """Quotes inside nested strings are escaped."""
        assert stringify_value(['say "hi"']) == '["say \\"hi\\""]'


class TestResolveMessage:
    """Test resolve_message file selection and fallback following."""

    def test_direct_hit(self, locale_dir: Path, write_translation: WriteTranslation) -> None:
        """Key present in the selected document."""
        write_translation("fr.toml", '[messages.greeting]\nformal = "Bonjour"\n')

        resolved = resolve_message(locale_dir, "greeting.formal", "fr_FR.UTF-8")

        assert resolved.template == "Bonjour"
        assert resolved.locale_string == "fr_FR.UTF-8"
        assert resolved.source_path == str(locale_dir / "fr.toml")
        assert resolved.fallback_chain == ("fr_FR.UTF-8",)
        assert not resolved.used_fallback

    def test_default_language_file_without_document_fallback(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """Only en.toml present: fr_FR selects it by prefix and resolves directly."""
        write_translation("en.toml", '[messages]\ngreeting = "hi"\n')

        resolved = resolve_message(locale_dir, "greeting", "fr_FR")

        assert resolved.template == "hi"
        assert resolved.source_path == str(locale_dir / "en.toml")
        assert resolved.attempts == (str(locale_dir / "en.toml"),)
        assert not resolved.used_fallback

    def test_missing_segment_without_fallback(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """KeyNotFound names the key, segment and last document."""
        write_translation("en.toml", '[messages]\ngreeting = "hi"\n')

        with pytest.raises(KeyNotFound) as exc_info:
            resolve_message(locale_dir, "greeting.missing", "en")

        error = exc_info.value
        assert not isinstance(error, FallbackCycleError)
        assert error.message_key == "greeting.missing"
        assert error.segment == "missing"
        assert error.path == str(locale_dir / "en.toml")
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.KEY_NOT_FOUND

    def test_document_fallback_supplies_key(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """A miss restarts resolution with the document's fallback locale."""
        write_translation(
            "lv.toml", 'fallback = "en_US"\n[messages]\ngreeting = "Sveiki"\n'
        )
        write_translation(
            "en.toml", '[messages]\ngreeting = "Hello"\nfarewell = "Goodbye"\n'
        )

        resolved = resolve_message(locale_dir, "farewell", "lv_LV")

        assert resolved.template == "Goodbye"
        assert resolved.locale_string == "en_US"
        assert resolved.fallback_chain == ("lv_LV", "en_US")
        assert resolved.used_fallback

    def test_fallback_chain_of_three(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """Fallbacks are followed transitively."""
        write_translation("fr_ca.toml", 'fallback = "fr"\n[messages]\n')
        write_translation("fr.toml", 'fallback = "en"\n[messages]\n')
        write_translation("en.toml", '[messages]\nok = "OK"\n')

        resolved = resolve_message(locale_dir, "ok", "fr_CA")

        assert resolved.fallback_chain == ("fr_CA", "fr", "en")
        assert len(resolved.attempts) == 3

    def test_fallback_last_document_lacks_key(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """KeyNotFound is reported against the end of the chain."""
        write_translation("de.toml", 'fallback = "en"\n[messages]\n')
        write_translation("en.toml", "[messages]\n")

        with pytest.raises(KeyNotFound) as exc_info:
            resolve_message(locale_dir, "nope", "de")

        assert exc_info.value.path == str(locale_dir / "en.toml")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.fallback_chain == ("de", "en")

    def test_fallback_cycle_detected(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """A chain that revisits a locale string fails instead of looping."""
        write_translation("en.toml", 'fallback = "fr"\n[messages]\n')
        write_translation("fr.toml", 'fallback = "en"\n[messages]\n')

        with pytest.raises(FallbackCycleError) as exc_info:
            resolve_message(locale_dir, "missing", "en")

        assert exc_info.value.chain == ("en", "fr", "en")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.FALLBACK_CYCLE

    def test_self_fallback_is_cycle(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """A document falling back to its own locale string is a cycle."""
        write_translation("en.toml", 'fallback = "en"\n[messages]\n')

        with pytest.raises(FallbackCycleError):
            resolve_message(locale_dir, "missing", "en")

    def test_cycle_is_key_not_found(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """Callers catching KeyNotFound also see cycles."""
        write_translation("en.toml", 'fallback = "en"\n[messages]\n')

        with pytest.raises(KeyNotFound):
            resolve_message(locale_dir, "missing", "en")

    def test_depth_limit(self, locale_dir: Path, write_translation: WriteTranslation) -> None:
        """Distinct locale strings still stop at max_fallback_depth."""
        write_translation("en.toml", 'fallback = "en_GB"\n[messages]\n')
        write_translation("en_gb.toml", 'fallback = "en_AU"\n[messages]\n')
        write_translation("en_au.toml", 'fallback = "en_NZ"\n[messages]\n')

        with pytest.raises(FallbackCycleError) as exc_info:
            resolve_message(
                locale_dir, "missing", "en", config=ResolverConfig(max_fallback_depth=2)
            )

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.FALLBACK_DEPTH_EXCEEDED

    def test_on_fallback_called(
        self,
        locale_dir: Path,
        write_translation: WriteTranslation,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Observer receives one FallbackInfo per hop."""
        write_translation("lv.toml", 'fallback = "en"\n[messages.cart]\ntitle = "Grozs"\n')
        write_translation("en.toml", '[messages.cart]\ncheckout = "Checkout"\n')
        events: list[FallbackInfo] = []

        with caplog.at_level(logging.INFO, logger="tongues.localization.orchestrator"):
            resolve_message(locale_dir, "cart.checkout", "lv", on_fallback=events.append)

        assert events == [
            FallbackInfo(
                requested_locale="lv",
                fallback_locale="en",
                message_key="cart.checkout",
                missing_segment="checkout",
                source_path=str(locale_dir / "lv.toml"),
            )
        ]
        assert "falling back" in caplog.text

    def test_no_file_for_locale(self, locale_dir: Path, write_translation: WriteTranslation) -> None:
        """No candidate, prefix or default-language file."""
        write_translation("de.toml", "[messages]\n")

        with pytest.raises(FileResolutionFailure) as exc_info:
            resolve_message(locale_dir, "hello", "ja_JP")

        assert exc_info.value.locale_string == "ja_JP"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.NO_TRANSLATION_FILE

    def test_fallback_to_missing_file(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """A fallback locale with no file is a FileResolutionFailure."""
        write_translation("de.toml", 'fallback = "ja"\n[messages]\n')

        with pytest.raises(FileResolutionFailure) as exc_info:
            resolve_message(locale_dir, "hello", "de")

        assert exc_info.value.locale_string == "ja"

    def test_malformed_fallback_locale(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """A fallback string without language letters fails to parse."""
        write_translation("de.toml", 'fallback = "_US"\n[messages]\n')

        with pytest.raises(LocaleParseError) as exc_info:
            resolve_message(locale_dir, "hello", "de")

        assert exc_info.value.locale_string == "_US"

    def test_locale_from_environment(
        self,
        locale_dir: Path,
        write_translation: WriteTranslation,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """LANG is consulted when no locale is passed."""
        monkeypatch.setenv("LANG", "de_DE.UTF-8")
        write_translation("de.toml", '[messages]\nhello = "Hallo"\n')
        write_translation("en.toml", '[messages]\nhello = "Hello"\n')

        assert resolve_message(locale_dir, "hello").template == "Hallo"

    def test_default_when_environment_unset(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """Without LANG the default language is used."""
        write_translation("de.toml", '[messages]\nhello = "Hallo"\n')
        write_translation("en.toml", '[messages]\nhello = "Hello"\n')

        resolved = resolve_message(locale_dir, "hello")

        assert resolved.template == "Hello"
        assert resolved.locale_string == "en"

    def test_non_string_leaf_stringified(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """Numbers and tables resolve to their TOML text."""
        write_translation("en.toml", "[messages]\nlimit = 10\n")

        assert resolve_message(locale_dir, "limit", "en").template == "10"

    def test_edits_visible_without_restart(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """Files are re-read on every call."""
        write_translation("en.toml", '[messages]\nhello = "Hello"\n')
        assert resolve_message(locale_dir, "hello", "en").template == "Hello"

        write_translation("en.toml", '[messages]\nhello = "Howdy"\n')
        assert resolve_message(locale_dir, "hello", "en").template == "Howdy"


class TestTranslator:
    """Test the Translator facade end to end."""

    @pytest.fixture
    def translator(self, locale_dir: Path, write_translation: WriteTranslation) -> Translator:
        write_translation(
            "en.toml",
            """
language = "en"

[messages.greeting]
hello = "Hello, ($name)!"
styled = "(ansi bold)Hello(ansi ), ($name)"

[messages.status]
done = "(ansi color[green])Done(ansi ) in ($seconds)s"
broken = "(ansi bold"
""",
        )
        write_translation(
            "fr.toml",
            """
language = "fr"
fallback = "en"

[messages.greeting]
hello = "Bonjour, ($name) !"
""",
        )
        return Translator(locale_dir)

    def test_substitution(self, translator: Translator) -> None:
        """Arguments replace placeholders."""
        assert translator.translate("greeting.hello", {"name": "Ada"}, locale="en") == (
            "Hello, Ada!"
        )

    def test_locale_selection(self, translator: Translator) -> None:
        """The locale picks the document."""
        assert translator.translate("greeting.hello", {"name": "Ada"}, locale="fr_FR") == (
            "Bonjour, Ada !"
        )

    def test_fallback_then_markup(self, translator: Translator) -> None:
        """Key from the fallback document is styled."""
        result = translator.translate("status.done", {"seconds": 1.5}, locale="fr")
        assert result == "\x1b[32mDone\x1b[0m in 1.5s"

    def test_plain_output(self, translator: Translator) -> None:
        """color=False strips styling but keeps the text."""
        result = translator.translate(
            "greeting.styled", {"name": "Ada"}, locale="en", color=False
        )
        assert result == "Hello, Ada"

    def test_styled_output(self, translator: Translator) -> None:
        """Bold run followed by an explicit reset command."""
        result = translator.translate("greeting.styled", {"name": "Ada"}, locale="en")
        assert result == "\x1b[1mHello\x1b[0m, Ada"

    def test_unsupplied_placeholder_kept(self, translator: Translator) -> None:
        """No args leaves placeholders verbatim."""
        assert translator.translate("greeting.hello", locale="en") == "Hello, ($name)!"

    def test_compile_returns_runs(self, translator: Translator) -> None:
        """compile exposes the styled runs."""
        runs = translator.compile("greeting.styled", {"name": "Ada"}, locale="en")
        assert [run.text for run in runs] == ["", "Hello", ", Ada"]
        assert runs[1].style.bold

    def test_resolve_returns_raw_template(self, translator: Translator) -> None:
        """resolve applies neither substitution nor markup."""
        assert translator.resolve("greeting.styled", "en").template == (
            "(ansi bold)Hello(ansi ), ($name)"
        )

    def test_markup_error_propagates(self, translator: Translator) -> None:
        """Unterminated command fails the whole call."""
        with pytest.raises(MarkupSyntaxError):
            translator.translate("status.broken", locale="en")

    def test_argument_error_propagates(self, translator: Translator) -> None:
        """Non-coercible argument fails the whole call."""
        with pytest.raises(ArgumentTypeError):
            translator.translate("greeting.hello", {"name": object()}, locale="en")

    def test_properties_and_repr(self, translator: Translator, locale_dir: Path) -> None:
        """Read-only configuration accessors."""
        assert translator.directory == locale_dir
        assert translator.config == ResolverConfig()
        assert repr(translator) == f"Translator(directory={str(locale_dir)!r})"


class TestTranslateFunction:
    """Test the module-level translate shortcut."""

    def test_one_shot(self, locale_dir: Path, write_translation: WriteTranslation) -> None:
        """translate builds a Translator internally."""
        write_translation("en.toml", '[messages]\nhello = "Hello, ($name)!"\n')

        assert translate(locale_dir, "hello", {"name": "Ada"}, locale="en") == "Hello, Ada!"

    def test_custom_extension(
        self, locale_dir: Path, write_translation: WriteTranslation
    ) -> None:
        """Config is honored."""
        write_translation("en.lang", '[messages]\nhello = "Hi"\n')

        result = translate(
            locale_dir, "hello", locale="en", config=ResolverConfig(extension=".lang")
        )

        assert result == "Hi"
