"""Tests for schema inference and time bucket definitions."""

import pytest

from beruang.data.errors import EmptyHeaderError, QueryError
from beruang.data.schemas import (
    DEFAULT_HEADER, Duration, Header, Schema, SemanticType, TimeBucket, TimeGroup, infer_type,
)


class TestInferType:
    def test_default_columns(self):
        assert infer_type("Tarikh") is SemanticType.DATE
        assert infer_type("Jumlah") is SemanticType.DECIMAL
        assert infer_type("Keterangan") is SemanticType.TEXT
        assert infer_type("Anything else") is SemanticType.TEXT

    def test_custom_header(self):
        english = Header(
            date="Date", details="Details", category="Category",
            account="Account", currency="Currency", cost="Cost",
            date_columns=frozenset({"Date"}), cost_columns=frozenset({"Cost"}),
        )
        assert infer_type("Date", english) is SemanticType.DATE
        assert infer_type("Cost", english) is SemanticType.DECIMAL
        assert infer_type("Tarikh", english) is SemanticType.TEXT


class TestSchemaFromHeader:
    def test_types_follow_names(self):
        schema = Schema.from_header(["Tarikh", "Keterangan", "Jumlah"], "Jan")
        assert schema.names == ["Tarikh", "Keterangan", "Jumlah"]
        assert schema.types == [SemanticType.DATE, SemanticType.TEXT, SemanticType.DECIMAL]

    def test_trailing_blanks_trimmed(self):
        schema = Schema.from_header(["Tarikh", "Jumlah", None, None], "Jan")
        assert len(schema) == 2

    def test_interior_blank_named(self):
        schema = Schema.from_header(["Tarikh", None, "Jumlah"], "Jan")
        assert schema.names == ["Tarikh", "Unnamed: 1", "Jumlah"]

    def test_names_stripped(self):
        assert Schema.from_header([" Tarikh "], "Jan").types == [SemanticType.DATE]

    @pytest.mark.parametrize("cells", [[], [None], [None, "  "]])
    def test_empty_header(self, cells):
        with pytest.raises(EmptyHeaderError) as exc:
            Schema.from_header(cells, "Mac")
        assert exc.value.sheet == "Mac"


class TestDuration:
    @pytest.mark.parametrize("text, expected", [
        ("4mo", Duration(months=4)),
        ("1mo", Duration(months=1)),
        ("2w", Duration(weeks=2)),
        ("3d", Duration(days=3)),
        ("1mo2w", Duration(months=1, weeks=2)),
        ("0", Duration()),
    ])
    def test_parse(self, text, expected):
        assert Duration.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "4", "mo", "1y", "2w ago"])
    def test_parse_rejects(self, text):
        with pytest.raises(QueryError):
            Duration.parse(text)

    def test_str(self):
        assert str(Duration(months=4)) == "4mo"
        assert str(Duration()) == "0"
        assert str(Duration(weeks=1, days=2)) == "1w2d"


class TestTimeGroup:
    def test_presets(self):
        assert TimeGroup.QUARTERLY.bucket == TimeBucket(Duration(months=4), Duration(months=4))
        assert TimeGroup.MONTHLY.bucket == TimeBucket(Duration(months=1), Duration(months=1))
        assert TimeGroup.BIWEEKLY.bucket == TimeBucket(Duration(weeks=2), Duration(weeks=2))
        assert TimeGroup.WEEKLY.bucket == TimeBucket(Duration(weeks=1), Duration(weeks=1))

    def test_presets_contiguous(self):
        for group in TimeGroup:
            bucket = group.bucket
            assert bucket.every == bucket.period
            assert bucket.offset.is_zero

    def test_from_cli_value(self):
        assert TimeGroup("biweekly") is TimeGroup.BIWEEKLY


def test_default_header_names():
    assert DEFAULT_HEADER.date == "Tarikh"
    assert DEFAULT_HEADER.cost == "Jumlah"
    assert "Jumlah" in DEFAULT_HEADER.cost_columns
