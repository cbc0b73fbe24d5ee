"""
XLIFF 1.2 resource file.

Serializes the file's translation set to XLIFF with lxml and writes it to
disk. Writes are skipped when the set is clean or when the serialized bytes
match what is already on disk, so repeated runs report no change.
"""

import hashlib
from pathlib import Path

from lxml import etree

from xliff_aggregator.core.models import PersistResult, ResourceRecord
from xliff_aggregator.core.resources import ResourceFile
from xliff_aggregator.observability.logger import get_logger

logger = get_logger(__name__)

XLIFF_NAMESPACE = "urn:oasis:names:tc:xliff:document:1.2"
XLIFF_VERSION = "1.2"
DEFAULT_DATATYPE = "plaintext"


def _tag(name: str) -> str:
    return f"{{{XLIFF_NAMESPACE}}}{name}"


class XliffFile(ResourceFile):
    """
    A single XLIFF file aggregating string resources for one project.
    """

    def serialize(self) -> bytes:
        """
        Render the translation set as an XLIFF 1.2 document.

        Records are grouped into one <file> element per
        (path_name, source_locale, target_locale), in first-seen order.

        Returns:
            UTF-8 encoded document with XML declaration
        """
        root = etree.Element(_tag("xliff"), nsmap={None: XLIFF_NAMESPACE})
        root.set("version", XLIFF_VERSION)

        groups: dict[tuple[str, str, str | None], list[ResourceRecord]] = {}
        for record in self.set.get_all():
            group_key = (record.path_name, record.source_locale, record.target_locale)
            groups.setdefault(group_key, []).append(record)

        unit_id = 1
        for (path_name, source_locale, target_locale), records in groups.items():
            file_el = etree.SubElement(root, _tag("file"))
            file_el.set("original", path_name or self.path_name)
            file_el.set("source-language", source_locale)
            if target_locale:
                file_el.set("target-language", target_locale)
            file_el.set("product-name", self.project.project_id)
            file_el.set("datatype", records[0].datatype or DEFAULT_DATATYPE)

            body = etree.SubElement(file_el, _tag("body"))
            for record in records:
                self._append_unit(body, record, unit_id)
                unit_id += 1

        return etree.tostring(
            root,
            encoding="utf-8",
            xml_declaration=True,
            pretty_print=True,
        )

    def _append_unit(self, body: etree._Element, record: ResourceRecord, unit_id: int) -> None:
        unit = etree.SubElement(body, _tag("trans-unit"))
        unit.set("id", str(unit_id))
        unit.set("resname", record.reskey)
        unit.set("restype", record.res_type)
        if record.datatype:
            unit.set("datatype", record.datatype)
        if record.context:
            unit.set("x-context", record.context)

        source = etree.SubElement(unit, _tag("source"))
        source.text = record.source

        if record.target is not None:
            target = etree.SubElement(unit, _tag("target"))
            target.text = record.target
            if record.state:
                target.set("state", record.state)

        if record.comment:
            note = etree.SubElement(unit, _tag("note"))
            note.text = record.comment

    def write(self) -> PersistResult:
        """
        Persist the translation set to disk.

        Nothing is written when the set is clean. Otherwise the document is
        serialized and only written if its checksum differs from the current
        file contents. The set is marked clean afterwards in both cases.

        Returns:
            PersistResult with changed=True only when bytes were written

        Raises:
            OSError: If the file or its parent directory cannot be written
        """
        resource_count = self.set.size()

        if not self.set.is_dirty():
            logger.debug(f"File {self.path_name} is not dirty. Skipping.")
            return PersistResult(path=self.path_name, changed=False, resource_count=resource_count)

        content = self.serialize()
        checksum = self._calculate_checksum(content)
        path = Path(self.path_name)

        if path.exists() and self._calculate_checksum(path.read_bytes()) == checksum:
            logger.debug(f"File {self.path_name} is unchanged on disk. Skipping.")
            self.set.set_clean()
            return PersistResult(
                path=self.path_name,
                changed=False,
                resource_count=resource_count,
                checksum=checksum,
            )

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        self.set.set_clean()
        logger.debug(f"Wrote {resource_count} string translations to file {self.path_name}")

        return PersistResult(
            path=self.path_name,
            changed=True,
            resource_count=resource_count,
            checksum=checksum,
        )

    def _calculate_checksum(self, content: bytes) -> str:
        """
        Calculate MD5 checksum of serialized content.

        Args:
            content: Raw file bytes

        Returns:
            Hexadecimal checksum string
        """
        return hashlib.md5(content).hexdigest()
