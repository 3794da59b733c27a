from unittest.mock import patch

import pytest

from modules.auth.messages import LOGIN_MESSAGES, trans


class TestMessages:
    def test_every_locale_has_every_key(self):
        keys = set(LOGIN_MESSAGES["en"])
        for locale, messages in LOGIN_MESSAGES.items():
            assert set(messages) == keys, locale

    def test_explicit_locale(self):
        assert trans("verify-first", "fr") == LOGIN_MESSAGES["fr"]["verify-first"]

    def test_locale_is_case_insensitive(self):
        assert trans("logged-in", "ES") == LOGIN_MESSAGES["es"]["logged-in"]

    def test_unknown_locale_falls_back_to_english(self):
        assert trans("invalid-credentials", "de") == LOGIN_MESSAGES["en"]["invalid-credentials"]

    def test_unknown_key_is_returned_unchanged(self):
        assert trans("no-such-key", "en") == "no-such-key"

    @pytest.mark.parametrize("locale", ["en", "fr", "es"])
    def test_configured_locale(self, locale):
        with patch("modules.auth.messages.get_settings") as mock_settings:
            mock_settings.return_value.locale = locale
            assert trans("not-activated") == LOGIN_MESSAGES[locale]["not-activated"]
