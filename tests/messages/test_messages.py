"""Tests for the per-locale message catalog."""

import pytest

from projstrap.messages import CATALOG, Message, Messages, available_locales


@pytest.mark.unit
class TestMessages:

    def test_english_catalog_covers_every_key(self):
        assert set(CATALOG["en"]) == set(Message)

    def test_formats_arguments(self):
        text = Messages("en").get(Message.STEP_SKIPPED, step="license-generate", reason="unlicensed")

        assert text == "license-generate: skipped (unlicensed)"

    def test_german_translation(self):
        assert Messages("de").get(Message.PROJECT_NAME) == "Projektname"

    def test_missing_translation_falls_back_to_english(self):
        assert Messages("de").get(Message.INVALID_EXTENSION) == Messages("en").get(Message.INVALID_EXTENSION)

    def test_unknown_locale_raises(self):
        with pytest.raises(ValueError, match="Unknown locale 'fr'"):
            Messages("fr")

    def test_available_locales(self):
        assert available_locales() == ["de", "en"]

    def test_instances_do_not_share_locale(self):
        english = Messages("en")
        Messages("de")

        assert english.get(Message.PROJECT_NAME) == "Project name"


@pytest.mark.unit
class TestIsYes:

    @pytest.mark.parametrize("answer", ["y", "Yes", " YES "])
    def test_english_yes(self, answer):
        assert Messages("en").is_yes(answer)

    def test_english_rejects_german_yes(self):
        assert not Messages("en").is_yes("ja")

    def test_german_accepts_ja(self):
        assert Messages("de").is_yes("Ja")
