"""Tests for UnnestConfig."""

import pytest

from unnest.config import UnnestConfig


class TestUnnestConfig:
    def test_defaults(self):
        config = UnnestConfig()
        assert config.indent == 2
        assert config.nesting_token == "&"
        assert config.log_level == "WARNING"

    def test_negative_indent_rejected(self):
        with pytest.raises(ValueError):
            UnnestConfig(indent=-1)

    @pytest.mark.parametrize("token", ["", "&&"])
    def test_token_must_be_single_char(self, token):
        with pytest.raises(ValueError):
            UnnestConfig(nesting_token=token)
