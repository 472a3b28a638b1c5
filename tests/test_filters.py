"""Tests for attribute filtering."""

import pytest

from pydevfile.data import DevfileOptions, InvalidAttributesError, filter_devfile_object


class TestFilterDevfileObject:
    """Subset matching of attribute bags."""

    def test_no_options_matches(self):
        """Test None options keep everything."""
        assert filter_devfile_object({"a": 1}, None)

    def test_empty_filter_matches(self):
        """Test an empty filter keeps everything, even without attributes."""
        assert filter_devfile_object({}, DevfileOptions())
        assert filter_devfile_object(None, DevfileOptions())

    def test_subset_match(self):
        """Test extra attributes on the entity are ignored."""
        attributes = {"firstString": "firstStringValue", "secondString": "secondStringValue"}
        options = DevfileOptions(filter={"firstString": "firstStringValue"})
        assert filter_devfile_object(attributes, options)

    def test_missing_key(self):
        """Test a key absent from the entity excludes it."""
        options = DevfileOptions(filter={"firstStringIsWrong": "firstStringValue"})
        assert not filter_devfile_object({"firstString": "firstStringValue"}, options)

    def test_different_value(self):
        """Test a key with another value excludes the entity."""
        options = DevfileOptions(filter={"enabled": True})
        assert not filter_devfile_object({"enabled": False}, options)

    def test_structured_values(self):
        """Test nested values are compared by equality."""
        options = DevfileOptions(filter={"ports": [8080, 8443]})
        assert filter_devfile_object({"ports": [8080, 8443], "x": 1}, options)
        assert not filter_devfile_object({"ports": [8080]}, options)

    def test_invalid_attributes(self):
        """Test a non-mapping attribute bag fails."""
        with pytest.raises(InvalidAttributesError):
            filter_devfile_object(["not", "a", "mapping"], DevfileOptions())
