"""Tests for the storefront logging setup."""

import logging

from catalogue.utils.logging import (
    MAX_LOGGED_VALUE_LENGTH,
    configure_logging,
    get_log_level,
    shorten_long_values,
)


class TestLogLevel:
    def test_follows_environment(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENV", raising=False)
        monkeypatch.setenv("ENVIRONMENT", "production")

        assert get_log_level() == "INFO"

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert get_log_level() == "ERROR"


class TestShortenLongValues:
    def test_inline_photo_is_clipped(self):
        photo = "data:image/jpeg;base64," + "A" * 10_000

        event = shorten_long_values(None, "info", {"event": "Product saved", "image_url": photo})

        assert len(event["image_url"]) < 300
        assert event["image_url"].endswith(f"({len(photo)} chars)")

    def test_short_values_and_event_untouched(self):
        long_event = "x" * (MAX_LOGGED_VALUE_LENGTH + 1)

        event = shorten_long_values(None, "info", {"event": long_event, "product_id": "bread", "count": 3})

        assert event == {"event": long_event, "product_id": "bread", "count": 3}


def test_log_files_written_when_directory_given(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    configure_logging(log_dir=str(tmp_path), log_file_prefix="shop", force=True)
    logging.getLogger("storefront.test").error("disk full")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "disk full" in (tmp_path / "shop.log").read_text(encoding="utf-8")
    assert "disk full" in (tmp_path / "shop_error.log").read_text(encoding="utf-8")

    configure_logging(force=True)
