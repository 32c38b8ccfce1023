"""
Tests for domain layer entities and services.
"""

import dataclasses

import pytest

from delimlog.core.exceptions import ConfigError, ConfigurationError
from delimlog.domain.entities import ColumnSchema, FormatterConfig
from delimlog.domain.services import Clock, RandomSource
from delimlog.formatter import SystemClock, ThreadLocalRandomSource


class TestColumnSchema:
    """Tests for ColumnSchema."""

    def test_parse_assigns_positions_left_to_right(self):
        """Test positions follow declaration order."""
        schema = ColumnSchema.parse("host,level,message")
        assert schema.position("host") == 0
        assert schema.position("level") == 1
        assert schema.position("message") == 2
        assert schema.width == 3
        assert len(schema) == 3

    def test_unknown_name(self):
        """Test undeclared names have no position."""
        schema = ColumnSchema.parse("a,b")
        assert schema.position("c") is None
        assert "c" not in schema
        assert "a" in schema

    def test_empty_tokens_kept(self):
        """Test empty tokens still occupy positions."""
        schema = ColumnSchema.parse("a,,b,")
        assert schema.names == ("a", "", "b", "")
        assert schema.width == 4
        assert schema.position("b") == 2

    def test_names_not_trimmed(self):
        """Test names are used exactly as declared."""
        schema = ColumnSchema.parse("a, b")
        assert " b" in schema
        assert "b" not in schema

    @pytest.mark.parametrize("columns", [None, "", "   "])
    def test_blank_rejected(self, columns):
        """Test missing or blank column lists fail fast."""
        with pytest.raises(ConfigurationError) as exc_info:
            ColumnSchema.parse(columns)
        assert exc_info.value.config_key == "columns"

    def test_empty_name_list_rejected(self):
        """Test constructing from an empty sequence fails."""
        with pytest.raises(ConfigurationError):
            ColumnSchema([])

    @pytest.mark.parametrize("names", [[" "], ["", "  "]])
    def test_all_blank_names_rejected(self, names):
        """Test a sequence of only blank names fails like a blank list."""
        with pytest.raises(ConfigurationError) as exc_info:
            ColumnSchema(names)
        assert exc_info.value.config_key == "columns"

    def test_some_blank_names_kept(self):
        """Test blank names are fine next to a real one."""
        assert ColumnSchema(["", "a", ""]).position("a") == 1

    def test_duplicate_names_warn_and_last_wins(self):
        """Duplicate names are accepted with a warning; the later position wins."""
        with pytest.warns(UserWarning, match="Duplicate column names"):
            schema = ColumnSchema.parse("a,b,a")
        assert schema.position("a") == 2
        assert schema.width == 3

    def test_equality_and_iteration(self):
        """Test value semantics."""
        assert ColumnSchema.parse("a,b") == ColumnSchema(["a", "b"])
        assert hash(ColumnSchema.parse("a,b")) == hash(ColumnSchema(("a", "b")))
        assert list(ColumnSchema.parse("x,y")) == ["x", "y"]
        assert "x,y" in repr(ColumnSchema.parse("x,y"))


class TestFormatterConfig:
    """Tests for FormatterConfig validation."""

    def test_defaults(self):
        """Test default option values."""
        config = FormatterConfig(columns=ColumnSchema.parse("a,b"), destination="store")
        assert config.separator == ","
        assert config.line_end == ""
        assert config.use_record_time is False
        assert config.append_timestamp is False
        assert config.append_local_time is False
        assert config.drop_percent == 0
        assert config.width == 2
        assert config.timestamp_position is None
        assert config.local_time_position is None

    def test_columns_string_is_parsed(self):
        """Test a raw column string is accepted."""
        config = FormatterConfig(columns="a,b,c", destination="store")
        assert isinstance(config.columns, ColumnSchema)
        assert config.width == 3

    def test_width_with_appended_timestamp(self):
        """Test the timestamp adds exactly one trailing column."""
        config = FormatterConfig(columns="a,b,c", destination="store", append_timestamp=True)
        assert config.width == 4
        assert config.timestamp_position == 3

    def test_immutable(self):
        """Test the config cannot be changed after construction."""
        config = FormatterConfig(columns="a", destination="store")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.separator = "|"

    def test_missing_columns(self):
        """Test columns must be provided."""
        with pytest.raises(ConfigurationError):
            FormatterConfig(columns=None, destination="store")

    def test_blank_column_names_rejected(self):
        """Test a blank column list given as names is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            FormatterConfig(columns=[" "], destination="store")
        assert exc_info.value.config_key == "columns"

    def test_columns_name_list_accepted(self):
        """Test columns may be given as a list or tuple of names."""
        config = FormatterConfig(columns=["a", "b", "c"], destination="store")
        assert isinstance(config.columns, ColumnSchema)
        assert config.width == 3
        assert FormatterConfig(columns=("a", "b"), destination="store").columns.position("b") == 1

    def test_columns_wrong_type(self):
        """Test an unsupported columns value names the type."""
        with pytest.raises(ConfigurationError, match="got int") as exc_info:
            FormatterConfig(columns=42, destination="store")
        assert exc_info.value.config_key == "columns"

    @pytest.mark.parametrize("separator", ["", ",,", "ab", None])
    def test_separator_must_be_one_char(self, separator):
        """Test separator length validation."""
        with pytest.raises(ConfigurationError) as exc_info:
            FormatterConfig(columns="a", destination="store", separator=separator)
        assert exc_info.value.config_key == "separator-char"

    @pytest.mark.parametrize("destination", ["", "  ", None])
    def test_destination_required(self, destination):
        """Test blank destinations are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            FormatterConfig(columns="a", destination=destination)
        assert exc_info.value.config_key == "destination"

    @pytest.mark.parametrize("drop_percent", [-1, 101, 1.5, True, "10"])
    def test_drop_percent_range(self, drop_percent):
        """Test drop percent must be an integer in [0, 100]."""
        with pytest.raises(ConfigurationError):
            FormatterConfig(columns="a", destination="store", drop_percent=drop_percent)

    @pytest.mark.parametrize("drop_percent", [0, 1, 100])
    def test_drop_percent_bounds_accepted(self, drop_percent):
        """Test both ends of the range are valid."""
        config = FormatterConfig(columns="a", destination="store", drop_percent=drop_percent)
        assert config.drop_percent == drop_percent

    def test_local_time_column_required(self):
        """Test append_local_time needs a column name."""
        with pytest.raises(ConfigurationError) as exc_info:
            FormatterConfig(columns="a,b", destination="store", append_local_time=True)
        assert exc_info.value.config_key == "local-time-field-name"

    def test_local_time_column_blank(self):
        """Test a blank column name is rejected."""
        with pytest.raises(ConfigurationError):
            FormatterConfig(
                columns="a,b", destination="store",
                append_local_time=True, local_time_column=" ",
            )

    def test_local_time_column_not_text(self):
        """Test a non-string column name is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            FormatterConfig(
                columns="a,b", destination="store",
                append_local_time=True, local_time_column=1,
            )
        assert exc_info.value.config_key == "local-time-field-name"

    def test_local_time_column_must_exist(self):
        """Test the column must be declared."""
        with pytest.raises(ConfigError, match="not exist in columns"):
            FormatterConfig(
                columns="a,b", destination="store",
                append_local_time=True, local_time_column="c",
            )

    def test_local_time_position(self):
        """Test the local-time slot resolves through the schema."""
        config = FormatterConfig(
            columns="a,b,c", destination="store",
            append_local_time=True, local_time_column="c",
        )
        assert config.local_time_position == 2

    def test_local_time_column_ignored_when_disabled(self):
        """Test the column name is not validated unless enabled."""
        config = FormatterConfig(columns="a", destination="store", local_time_column="zzz")
        assert config.local_time_position is None


class TestProviders:
    """Tests for the default clock and random source."""

    def test_system_clock_satisfies_protocol(self):
        """Test SystemClock implements Clock."""
        assert isinstance(SystemClock(), Clock)

    def test_system_clock_returns_millis(self):
        """Test the clock reads milliseconds since epoch."""
        now = SystemClock().now_millis()
        # After 2020-01-01 and before 2100-01-01
        assert 1_577_836_800_000 < now < 4_102_444_800_000

    def test_random_source_satisfies_protocol(self):
        """Test ThreadLocalRandomSource implements RandomSource."""
        assert isinstance(ThreadLocalRandomSource(), RandomSource)

    def test_random_source_bounds(self):
        """Test draws stay within [0, bound)."""
        source = ThreadLocalRandomSource()
        draws = [source.next_int(100) for _ in range(1000)]
        assert min(draws) >= 0
        assert max(draws) < 100

    def test_seeded_random_source_is_reproducible(self):
        """Test equal seeds give equal sequences."""
        first = ThreadLocalRandomSource(seed=42)
        second = ThreadLocalRandomSource(seed=42)
        assert [first.next_int(100) for _ in range(20)] == [second.next_int(100) for _ in range(20)]
