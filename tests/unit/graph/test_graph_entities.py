"""
Tests for entity reading and verification colors.
"""

from types import SimpleNamespace

import pytest

from polymath_monitor.core.models import VerificationLevel
from polymath_monitor.graph import (
    UNKNOWN_COLOR,
    VERIFICATION_COLORS,
    coerce_verification,
    get_verification_color,
    read_entity,
    row_field,
)
from polymath_monitor.graph.entities import normalize_integer


class FakeNode:
    """Stands in for a driver Node: element_id, labels, mapping-style items()."""

    def __init__(self, element_id, labels, properties):
        self.element_id = element_id
        self.labels = frozenset(labels)
        self._properties = properties

    def items(self):
        return self._properties.items()


class TestReadEntity:
    """Tests for read_entity()"""

    def test_mapping_form(self):
        ref = read_entity({"identity": 3, "labels": ["Statement"], "properties": {"uid": "S3"}})

        assert ref.identity == 3
        assert ref.labels == ("Statement",)
        assert ref.properties == {"uid": "S3"}

    def test_identity_key_order(self):
        ref = read_entity({"identity": 1, "elementId": "4:x:1", "id": 9})

        assert ref.identity == 1

    def test_element_id_key(self):
        assert read_entity({"elementId": "4:abc:7"}).identity == "4:abc:7"

    def test_driver_object(self):
        node = FakeNode("4:abc:7", ["Statement", "Lemma"], {"uid": "L1"})

        ref = read_entity(node)

        assert ref.identity == "4:abc:7"
        assert ref.labels == ("Lemma", "Statement")
        assert ref.properties == {"uid": "L1"}

    def test_object_with_properties_attribute(self):
        obj = SimpleNamespace(id=5, labels=["Statement"], properties={"uid": "S5"})

        ref = read_entity(obj)

        assert ref.identity == 5
        assert ref.properties == {"uid": "S5"}

    def test_low_high_identity(self):
        ref = read_entity({"identity": {"low": 7, "high": 0}, "properties": {}})

        assert ref.identity == 7

    def test_low_high_property(self):
        ref = read_entity({"identity": 1, "properties": {"verification": {"low": 2, "high": 0}}})

        assert ref.properties["verification"] == 2

    @pytest.mark.parametrize(
        "entity",
        [None, {}, {"labels": ["Statement"]}, {"identity": ["unhashable"]}],
    )
    def test_unreadable_entities(self, entity):
        assert read_entity(entity) is None

    def test_duplicate_labels_collapsed(self):
        ref = read_entity({"identity": 1, "labels": ["A", "B", "A"]})

        assert ref.labels == ("A", "B")


class TestNormalizeInteger:
    """Tests for normalize_integer()"""

    def test_high_word(self):
        assert normalize_integer({"low": 1, "high": 1}) == (1 << 32) + 1

    @pytest.mark.parametrize(
        "value,expected",
        [
            ({"low": -2147483648, "high": 0}, 2**31),
            ({"low": -1, "high": 0}, 2**32 - 1),
            ({"low": -1, "high": 1}, 2**33 - 1),
        ],
    )
    def test_low_word_is_unsigned(self, value, expected):
        assert normalize_integer(value) == expected

    def test_large_identity(self):
        ref = read_entity({"identity": {"low": -2147483648, "high": 0}})

        assert ref.identity == 2**31

    @pytest.mark.parametrize("value", [5, "5", {"low": 1}, {"low": 1, "high": 0, "x": 2}])
    def test_other_values_unchanged(self, value):
        assert normalize_integer(value) == value


class TestRowField:
    """Tests for row_field()"""

    def test_mapping_row(self):
        assert row_field({"source": 1}, "source") == 1

    def test_missing_field(self):
        assert row_field({"source": 1}, "target") is None

    def test_object_row(self):
        assert row_field(SimpleNamespace(source=4), "source") == 4

    def test_record_raising_key_error(self):
        class Record:
            def get(self, name):
                raise KeyError(name)

        assert row_field(Record(), "source") is None

    def test_none_row(self):
        assert row_field(None, "source") is None


class TestVerificationColors:
    """Tests for the verification color map"""

    @pytest.mark.parametrize(
        "level,color",
        [
            (0, "#e74c3c"),
            (1, "#f1c40f"),
            (2, "#3498db"),
            (3, "#9b59b6"),
            (4, "#2ecc71"),
        ],
    )
    def test_known_levels(self, level, color):
        assert get_verification_color(level) == color

    def test_every_level_has_a_color(self):
        assert set(VERIFICATION_COLORS) == set(VerificationLevel)

    @pytest.mark.parametrize("value", [None, -1, 5, 1.5, "x", "", True, False, {}, "²"])
    def test_unknown_values(self, value):
        assert get_verification_color(value) == UNKNOWN_COLOR
        assert coerce_verification(value) is None

    @pytest.mark.parametrize("digit", ["1", "9"])
    def test_digit_strings_past_conversion_limit(self, digit):
        value = digit * 5000

        assert get_verification_color(value) == UNKNOWN_COLOR
        assert coerce_verification(value) is None

    @pytest.mark.parametrize("value", [2, 2.0, "2", " 2 "])
    def test_coercible_values(self, value):
        assert coerce_verification(value) is VerificationLevel.NUMERICAL
