"""
Diffing implementation.
"""

from __future__ import annotations

import logging
import pathlib as pl
from typing import BinaryIO, List, Optional

from tar_diff.archive_walker import EntryHeader, TarEntryStream
from tar_diff.content_comparison import ContentComparator, DEFAULT_CHUNK_SIZE
from tar_diff.diff_data import DiffState, DiffRecord, TarDiff

logger = logging.getLogger(__name__)


def compare_entries(left: EntryHeader, right: EntryHeader, left_content: BinaryIO,
                    right_content: BinaryIO, comparator: ContentComparator
                    ) -> Optional[DiffRecord]:
    """
    Compares one positionally paired pair of entries. The contents are only read if the headers
    match.

    :param left: Header of the entry in the first archive.
    :param right: Header of the entry in the second archive.
    :param left_content: Content of the entry in the first archive.
    :param right_content: Content of the entry in the second archive.
    :param comparator: Comparator used to check the contents.
    :return: Diff record named after the first entry, None if the entries are equal.
    """
    if left.name != right.name or left.size != right.size:
        return DiffRecord(left.name, DiffState.HEADER_MISMATCH)

    if not comparator.contents_equal(left_content, right_content):
        return DiffRecord(left.name, DiffState.CONTENT_MISMATCH)

    return None


def drain_unpaired(stream: TarEntryStream, state: DiffState) -> List[DiffRecord]:
    """
    Consumes the remaining entries of a stream.

    :param stream: Stream with trailing entries.
    :param state: Diff state assigned to each remaining entry.
    :return: One record per remaining entry.
    """
    records = []
    while True:
        header = stream.next_entry()
        if header is None:
            return records
        records.append(DiffRecord(header.name, state))


class TarDiffer:
    """
    Positional tar archive diffing tool.
    """

    def __init__(self, chunk_size=DEFAULT_CHUNK_SIZE, report_unpaired=False):
        """
        :param chunk_size: Size of the chunks read from both entries per comparison step.
        :param report_unpaired: True to report the trailing entries of the longer archive instead
            of silently stopping at the end of the shorter one.
        """
        self.report_unpaired = report_unpaired
        self._comparator = ContentComparator(chunk_size)

    def compute_diff(self, left_archive: pl.Path, right_archive: pl.Path) -> TarDiff:
        """
        Walks both archives in lockstep and compares the entries pairwise.

        :param left_archive: Path to the first archive.
        :param right_archive: Path to the second archive.
        :raises ArchiveOpenError: If one of the archives cannot be opened.
        :raises ArchiveFormatError: If a header of one of the archives cannot be read.
        :return: Diff between the archives.
        """
        tar_diff = TarDiff()

        with TarEntryStream.open(left_archive, 'file1') as left, \
                TarEntryStream.open(right_archive, 'file2') as right:
            while True:
                left_header = left.next_entry()
                if left_header is None:
                    if self.report_unpaired:
                        tar_diff.records += drain_unpaired(right, DiffState.ONLY_RIGHT)
                    break

                right_header = right.next_entry()
                if right_header is None:
                    if self.report_unpaired:
                        tar_diff.records.append(DiffRecord(left_header.name, DiffState.ONLY_LEFT))
                        tar_diff.records += drain_unpaired(left, DiffState.ONLY_LEFT)
                    break

                with left.open_content() as left_content, \
                        right.open_content() as right_content:
                    record = compare_entries(left_header, right_header, left_content,
                                             right_content, self._comparator)
                tar_diff.pairs_compared += 1
                if record is not None:
                    logger.debug('%s: %s', record.name, record.result.name)
                    tar_diff.records.append(record)

        logger.debug('Compared %d entry pairs, %d differences', tar_diff.pairs_compared,
                     len(tar_diff.records))
        return tar_diff
