"""
Tests for CLI utility functions.
"""

import pytest

from solprep.cli.utils import load_config, merge_defines, parse_defines, parse_vars
from solprep.preprocessor.shared.exceptions import ConfigurationError


class TestParseDefines:
    """Test -D/--define parsing."""

    def test_key_value(self):
        assert parse_defines(["FOO=bar", "NETWORK=mainnet"]) == {"FOO": "bar", "NETWORK": "mainnet"}

    def test_bare_key_is_true(self):
        assert parse_defines(["DEBUG"]) == {"DEBUG": "true"}

    def test_value_may_contain_equals(self):
        assert parse_defines(["EXPR=a=b"]) == {"EXPR": "a=b"}

    def test_empty_value(self):
        assert parse_defines(["EMPTY="]) == {"EMPTY": ""}

    def test_last_wins(self):
        assert parse_defines(["FOO=1", "FOO=2"]) == {"FOO": "2"}

    def test_none(self):
        assert parse_defines(None) == {}

    @pytest.mark.parametrize("arg", ["=bar", "1FOO=bar", "FOO-BAR=1", "with space=1"])
    def test_invalid_name(self, arg):
        with pytest.raises(ConfigurationError, match="Invalid define name"):
            parse_defines([arg])

    @pytest.mark.parametrize("arg", ["true=1", "none=1", "False=0", "if=1", "not=1", "class=1"])
    def test_reserved_name(self, arg):
        """Test that names Jinja2 reads as literals or keywords are rejected."""
        with pytest.raises(ConfigurationError, match="reserved word"):
            parse_defines([arg])

    def test_reserved_name_in_vars(self):
        with pytest.raises(ConfigurationError, match="reserved word"):
            parse_vars('{"none": 1}')


class TestParseVars:
    """Test --vars JSON parsing."""

    def test_json_object(self):
        assert parse_vars('{"RATE": 50, "NAME": "DIP"}') == {"RATE": 50, "NAME": "DIP"}

    def test_empty(self):
        assert parse_vars(None) == {}
        assert parse_vars("") == {}

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError, match="must be valid JSON"):
            parse_vars("{not json")

    def test_not_an_object(self):
        with pytest.raises(ConfigurationError, match="expected a JSON object"):
            parse_vars("[1, 2]")


class TestLoadConfig:
    """Test TOML config loading."""

    def test_no_config(self):
        assert load_config(None) == {"defines": {}}

    def test_loads_options_and_defines(self, tmp_path):
        config_file = tmp_path / "solprep.toml"
        config_file.write_text(
            'source = "contracts"\n'
            'destination = "build"\n'
            "share_include_cache = true\n"
            "\n"
            "[defines]\n"
            'NETWORK = "ropsten"\n'
            "RATE = 50\n"
        )

        config = load_config(str(config_file))

        assert config["source"] == "contracts"
        assert config["destination"] == "build"
        assert config["share_include_cache"] is True
        assert config["defines"] == {"NETWORK": "ropsten", "RATE": 50}

    def test_defines_table_optional(self, tmp_path):
        config_file = tmp_path / "solprep.toml"
        config_file.write_text('source = "contracts"\n')

        assert load_config(str(config_file))["defines"] == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Config file not found"):
            load_config(str(tmp_path / "missing.toml"))

    def test_malformed_file(self, tmp_path):
        config_file = tmp_path / "solprep.toml"
        config_file.write_text("source = \n")

        with pytest.raises(ConfigurationError, match="Cannot load config file"):
            load_config(str(config_file))

    def test_unknown_keys(self, tmp_path):
        config_file = tmp_path / "solprep.toml"
        config_file.write_text('source = "contracts"\nrecursive = true\n')

        with pytest.raises(ConfigurationError, match="recursive"):
            load_config(str(config_file))

    def test_defines_must_be_table(self, tmp_path):
        config_file = tmp_path / "solprep.toml"
        config_file.write_text('defines = "FOO"\n')

        with pytest.raises(ConfigurationError, match="must be a table"):
            load_config(str(config_file))


def test_merge_defines_later_layers_win():
    assert merge_defines({"A": 1, "B": 1}, {"B": 2}, {"C": 3}) == {"A": 1, "B": 2, "C": 3}
