"""
Unit tests for XliffFile serialization and change-tracking persistence.
"""

from pathlib import Path

import pytest
from lxml import etree

from xliff_aggregator.core.resources import TranslationSet
from xliff_aggregator.xliff import XLIFF_NAMESPACE, XliffFile

NS = {"x": XLIFF_NAMESPACE}


@pytest.fixture
def xliff_file(project, xliff_path):
    return XliffFile(project, xliff_path)


class TestSerialize:
    """Tests for XliffFile.serialize"""

    def test_empty_document(self, xliff_file):
        root = etree.fromstring(xliff_file.serialize())

        assert root.tag == f"{{{XLIFF_NAMESPACE}}}xliff"
        assert root.get("version") == "1.2"
        assert root.findall("x:file", NS) == []

    def test_xml_declaration(self, xliff_file):
        assert xliff_file.serialize().lower().startswith(b"<?xml version='1.0' encoding='utf-8'?>")

    def test_trans_unit_fields(self, xliff_file, make_record):
        xliff_file.add_resource(make_record(
            "welcome.title",
            source="Welcome!",
            target="Willkommen!",
            target_locale="de-DE",
            state="translated",
            comment="Shown on launch",
            context="launch",
        ))

        root = etree.fromstring(xliff_file.serialize())
        file_el = root.find("x:file", NS)
        unit = file_el.find("x:body/x:trans-unit", NS)

        assert file_el.get("source-language") == "en-US"
        assert file_el.get("target-language") == "de-DE"
        assert file_el.get("original") == "Feelgood/Base.lproj/Main.strings"
        assert file_el.get("product-name") == "feelgood"
        assert file_el.get("datatype") == "x-strings"
        assert unit.get("id") == "1"
        assert unit.get("resname") == "welcome.title"
        assert unit.get("restype") == "string"
        assert unit.get("x-context") == "launch"
        assert unit.find("x:source", NS).text == "Welcome!"
        assert unit.find("x:target", NS).text == "Willkommen!"
        assert unit.find("x:target", NS).get("state") == "translated"
        assert unit.find("x:note", NS).text == "Shown on launch"

    def test_untranslated_unit_has_no_target(self, xliff_file, make_record):
        xliff_file.add_resource(make_record("a"))

        root = etree.fromstring(xliff_file.serialize())
        unit = root.find("x:file/x:body/x:trans-unit", NS)

        assert unit.find("x:target", NS) is None
        assert unit.find("x:note", NS) is None

    def test_groups_by_path_and_locale_in_first_seen_order(self, xliff_file, make_record):
        xliff_file.add_resource(make_record("a", path_name="A.strings"))
        xliff_file.add_resource(make_record("b", path_name="B.strings"))
        xliff_file.add_resource(make_record("c", path_name="A.strings"))
        xliff_file.add_resource(make_record("a", path_name="A.strings", target="[a]", target_locale="zxx-XX"))

        root = etree.fromstring(xliff_file.serialize())
        files = root.findall("x:file", NS)

        assert [(f.get("original"), f.get("target-language")) for f in files] == [
            ("A.strings", None),
            ("B.strings", None),
            ("A.strings", "zxx-XX"),
        ]
        assert [u.get("resname") for u in files[0].findall("x:body/x:trans-unit", NS)] == ["a", "c"]
        ids = [u.get("id") for u in root.iter(f"{{{XLIFF_NAMESPACE}}}trans-unit")]
        assert ids == ["1", "2", "3", "4"]

    def test_record_without_path_uses_file_path(self, xliff_file, make_record):
        xliff_file.add_resource(make_record("a", path_name=""))

        root = etree.fromstring(xliff_file.serialize())

        assert root.find("x:file", NS).get("original") == xliff_file.path_name

    def test_special_characters_escaped(self, xliff_file, make_record):
        xliff_file.add_resource(make_record("amp", source="Tom & Jerry <3"))

        content = xliff_file.serialize()
        root = etree.fromstring(content)

        assert b"Tom &amp; Jerry &lt;3" in content
        assert root.find("x:file/x:body/x:trans-unit/x:source", NS).text == "Tom & Jerry <3"


class TestWrite:
    """Tests for XliffFile.write"""

    def test_clean_set_writes_nothing(self, xliff_file, xliff_path):
        result = xliff_file.write()

        assert result.changed is False
        assert result.checksum is None
        assert not Path(xliff_path).exists()

    def test_dirty_set_writes_file(self, xliff_file, xliff_path, make_record):
        xliff_file.add_resource(make_record("a"))

        result = xliff_file.write()

        assert result.changed is True
        assert result.resource_count == 1
        assert result.path == xliff_path
        assert Path(xliff_path).read_bytes() == xliff_file.serialize()
        assert xliff_file.get_translation_set().is_dirty() is False

    def test_second_write_without_changes_reports_unchanged(self, xliff_file, make_record):
        xliff_file.add_resource(make_record("a"))
        xliff_file.write()

        xliff_file.add_resource(make_record("a"))
        result = xliff_file.write()

        assert result.changed is False

    def test_identical_content_on_disk_reports_unchanged(self, project, xliff_path, make_record):
        first = XliffFile(project, xliff_path)
        first.add_resource(make_record("a"))
        first.write()
        mtime = Path(xliff_path).stat().st_mtime_ns

        second = XliffFile(project, xliff_path)
        second.add_resource(make_record("a"))
        result = second.write()

        assert result.changed is False
        assert result.checksum is not None
        assert second.get_translation_set().is_dirty() is False
        assert Path(xliff_path).stat().st_mtime_ns == mtime

    def test_new_resource_after_write_reports_changed(self, xliff_file, make_record):
        xliff_file.add_resource(make_record("a"))
        xliff_file.write()

        xliff_file.add_resource(make_record("b"))
        result = xliff_file.write()

        assert result.changed is True
        assert result.resource_count == 2

    def test_creates_parent_directories(self, project, tmp_path, make_record):
        path = tmp_path / "nested" / "dir" / "en-US.xliff"
        xliff_file = XliffFile(project, str(path))
        xliff_file.add_resource(make_record("a"))

        xliff_file.write()

        assert path.exists()

    def test_write_error_propagates(self, project, tmp_path, make_record):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        xliff_file = XliffFile(project, str(blocker / "en-US.xliff"))
        xliff_file.add_resource(make_record("a"))

        with pytest.raises(OSError):
            xliff_file.write()

        assert xliff_file.get_translation_set().is_dirty() is True

    def test_add_set_merges_into_file_set(self, xliff_file, make_record):
        ts = TranslationSet()
        ts.add_all([make_record("a"), make_record("b")])

        xliff_file.add_set(ts)

        assert xliff_file.get_translation_set().size() == 2
