"""
Tests for point records and the YAML point archive
"""

import pytest
import yaml

from point_geometry.points import Point2, Point3, StereoPoint2
from point_geometry.serialization import (
    PointArchive, field_names, to_record, from_record, type_name, resolve_type,
)
from point_geometry.utils.config_manager import ConfigManager


class TestRecords:
    """Test suite for the fields <-> record mapping."""

    def test_field_names_are_stable(self):
        assert field_names(Point2) == ('x', 'y')
        assert field_names(Point3) == ('x', 'y', 'z')
        assert field_names(StereoPoint2) == ('uL', 'uR', 'v')

    def test_to_record_order(self):
        record = to_record(StereoPoint2(10, 8, 5))
        assert list(record.items()) == [('uL', 10.0), ('uR', 8.0), ('v', 5.0)]

    @pytest.mark.parametrize("point", [Point2(1.5, -2), Point3(0.1, 0.2, 0.3), StereoPoint2(320, 300, 240)])
    def test_record_round_trip(self, point):
        assert from_record(type(point), to_record(point)) == point

    def test_missing_field(self):
        with pytest.raises(ValueError, match="missing fields: z"):
            from_record(Point3, {'x': 1.0, 'y': 2.0})

    @pytest.mark.parametrize("value", [None, "abc", [1.0], {'a': 1}])
    def test_non_numeric_field(self, value):
        with pytest.raises(ValueError, match="field 'x' is not a number"):
            from_record(Point2, {'x': value, 'y': 1.0})

    @pytest.mark.parametrize("record", [5, None, "x", [1.0, 2.0]])
    def test_record_not_a_mapping(self, record):
        with pytest.raises(ValueError, match="record must be a mapping"):
            from_record(Point2, record)

    def test_numeric_strings_accepted(self):
        assert from_record(Point2, {'x': '1.5', 'y': 2}) == Point2(1.5, 2)

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="unknown fields: w"):
            from_record(Point2, {'x': 1.0, 'y': 2.0, 'w': 3.0})

    def test_type_tags(self):
        assert type_name(Point3()) == 'Point3'
        assert resolve_type('StereoPoint2') is StereoPoint2
        with pytest.raises(ValueError, match="Unknown point type 'Pose3'"):
            resolve_type('Pose3')
        with pytest.raises(ValueError, match="Unsupported point type"):
            type_name((1.0, 2.0))


class TestPointArchive:
    """Test suite for the versioned point archive."""

    @pytest.fixture
    def archive(self):
        """Fixture providing a point archive instance."""
        return PointArchive()

    def test_archive_initialization(self, archive):
        assert archive.format_version == 1
        assert hasattr(archive, 'logger')

    def test_save_and_load(self, archive, sample_points, tmp_path):
        path = tmp_path / "points.yaml"
        archive.save(sample_points, path)

        loaded = archive.load(path)
        assert list(loaded) == list(sample_points)
        for name, point in sample_points.items():
            assert loaded[name] == point
            assert type(loaded[name]) is type(point)

    def test_document_layout(self, archive, tmp_path):
        path = tmp_path / "points.yaml"
        archive.save({'p': Point2(1, 2)}, path)

        with open(path) as file:
            document = yaml.safe_load(file)

        assert document == {
            'format_version': 1,
            'points': [{'name': 'p', 'type': 'Point2', 'record': {'x': 1.0, 'y': 2.0}}],
        }

    def test_empty_archive(self, archive, tmp_path):
        path = tmp_path / "empty.yaml"
        archive.save({}, path)
        assert archive.load(path) == {}

    def test_unsupported_version(self, archive):
        with pytest.raises(ValueError, match="Unsupported archive format version: 2"):
            archive.from_document({'format_version': 2, 'points': []})

    def test_unknown_type(self, archive):
        document = {
            'format_version': 1,
            'points': [{'name': 'r', 'type': 'Rot3', 'record': {}}],
        }
        with pytest.raises(ValueError, match="Unknown point type"):
            archive.from_document(document)

    def test_malformed_entry(self, archive):
        with pytest.raises(ValueError, match="Malformed archive entry"):
            archive.from_document({'format_version': 1, 'points': [{'name': 'p'}]})

    @pytest.mark.parametrize("points", [5, "p", {'name': 'p'}])
    def test_points_not_a_list(self, archive, points):
        with pytest.raises(ValueError, match="'points' must be a list"):
            archive.from_document({'format_version': 1, 'points': points})

    def test_missing_points_section(self, archive):
        assert archive.from_document({'format_version': 1}) == {}

    def test_null_record_field_in_file(self, archive, tmp_path):
        path = tmp_path / "null_field.yaml"
        path.write_text(
            "format_version: 1\n"
            "points:\n"
            "- name: p\n"
            "  type: Point2\n"
            "  record: {x: null, y: 1}\n"
        )
        with pytest.raises(ValueError, match="field 'x' is not a number"):
            archive.load(path)

    def test_scalar_record_in_file(self, archive, tmp_path):
        path = tmp_path / "scalar_record.yaml"
        path.write_text(
            "format_version: 1\n"
            "points:\n"
            "- name: p\n"
            "  type: Point3\n"
            "  record: 5\n"
        )
        with pytest.raises(ValueError, match="record must be a mapping"):
            archive.load(path)

    def test_duplicate_names(self, archive):
        entry = {'name': 'p', 'type': 'Point2', 'record': {'x': 0.0, 'y': 0.0}}
        with pytest.raises(ValueError, match="Duplicate point name"):
            archive.from_document({'format_version': 1, 'points': [entry, entry]})

    def test_missing_file(self, archive, tmp_path):
        with pytest.raises(FileNotFoundError, match="Archive file not found"):
            archive.load(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, archive, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("points: [unclosed\n")
        with pytest.raises(ValueError, match="Error parsing archive file"):
            archive.load(path)

    def test_unsupported_configured_version(self, tmp_path):
        config = ConfigManager()
        config.set('serialization.format_version', 3)
        with pytest.raises(ValueError, match="Unsupported archive format version: 3"):
            PointArchive(config)
