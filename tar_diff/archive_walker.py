"""
Forward-only access to the entries of a tar archive.
"""
from __future__ import annotations

import io
import logging
import pathlib as pl
import tarfile
from dataclasses import dataclass
from typing import Optional, BinaryIO

logger = logging.getLogger(__name__)

# Streaming mode never seeks backwards and detects the compression on its own.
STREAM_MODE = 'r|*'


@dataclass(frozen=True)
class EntryHeader:
    """
    Metadata of a single archive member that takes part in the comparison.
    """
    name: str
    size: int

    @classmethod
    def from_tarinfo(cls, member: tarfile.TarInfo) -> EntryHeader:
        """
        Creates the header from a tar member. tarfile strips the trailing slash of directory names,
        it is restored if the archive stores the name with one.
        """
        name = member.name
        if member.isdir() and getattr(member, 'slash_terminated', False) \
                and not name.endswith('/'):
            name += '/'
        return cls(name, member.size)


class StrictTarInfo(tarfile.TarInfo):
    """
    TarInfo that rejects corrupt or truncated headers after the first entry. Plain tarfile treats
    them as the end of the archive.
    """

    @classmethod
    def frombuf(cls, buf, encoding, errors):
        obj = super().frombuf(buf, encoding, errors)
        obj.slash_terminated = buf[0:100].split(b'\0', 1)[0].endswith(b'/')
        return obj

    @classmethod
    def fromtarfile(cls, tarfile_obj):
        try:
            return super().fromtarfile(tarfile_obj)
        except (tarfile.InvalidHeaderError, tarfile.TruncatedHeaderError) as error:
            if tarfile_obj.offset == 0:
                raise
            # tarfile reports this one as ReadError regardless of the position.
            raise tarfile.SubsequentHeaderError(str(error)) from error


class TarDiffError(Exception):
    """
    Base class of the errors that abort a whole comparison run.
    """

    def __init__(self, label: str, path: pl.Path, message: str):
        """
        :param label: Name of the archive in the comparison, e.g. 'file1'.
        :param path: Path of the archive.
        :param message: Description of the failure.
        """
        super().__init__(message)
        self.label = label
        self.path = path


class ArchiveOpenError(TarDiffError):
    """
    Error thrown if an archive file cannot be opened for reading.
    """


class ArchiveFormatError(TarDiffError):
    """
    Error thrown if reading the next header fails for any reason other than the end of the archive.
    """


class TarEntryStream:
    """
    Wraps a tar archive opened in streaming mode and hands out its entries one at a time. The
    stream owns the underlying file and closes it together with the archive.
    """

    def __init__(self, label: str, path: pl.Path, fileobj: BinaryIO, archive: tarfile.TarFile):
        """
        :param label: Name of the archive in the comparison, used in error messages.
        :param path: Path of the archive.
        :param fileobj: Opened archive file.
        :param archive: Tar reader operating on `fileobj`.
        """
        self.label = label
        self.path = path
        self._fileobj = fileobj
        self._archive = archive
        self._member: Optional[tarfile.TarInfo] = None
        self._closed = False

    @classmethod
    def open(cls, path: pl.Path, label: str) -> TarEntryStream:
        """
        Opens the archive at the given path.

        :param path: Input path.
        :param label: Name of the archive in the comparison.
        :raises ArchiveOpenError: If the file cannot be opened.
        :raises ArchiveFormatError: If the file is not a readable tar archive.
        :return: Entry stream positioned before the first entry.
        """
        try:
            fileobj = open(path, 'rb')
        except OSError as error:
            raise ArchiveOpenError(label, path, f'failed to open {label}: {error}') from error

        try:
            archive = tarfile.open(fileobj=fileobj, mode=STREAM_MODE, tarinfo=StrictTarInfo)
        except (tarfile.TarError, OSError) as error:
            fileobj.close()
            raise ArchiveFormatError(
                label, path, f'error reading {label} tar: {error}') from error

        logger.debug('Opened %s: %s', label, path)
        return cls(label, path, fileobj, archive)

    def next_entry(self) -> Optional[EntryHeader]:
        """
        Advances to the next entry. Unread content of the previous entry is skipped.

        :raises ArchiveFormatError: If the next header cannot be read.
        :return: Header of the next entry, None at the end of the archive.
        """
        try:
            self._member = self._archive.next()
        except (tarfile.TarError, OSError) as error:
            raise ArchiveFormatError(
                self.label, self.path, f'error reading {self.label} tar: {error}') from error

        if self._member is None:
            logger.debug('Reached the end of %s', self.label)
            return None
        return EntryHeader.from_tarinfo(self._member)

    def open_content(self) -> BinaryIO:
        """
        Opens the content of the current entry. Entries without data, e.g. directories or links,
        have empty content.

        :return: Readable io object positioned at the start of the entry content.
        """
        if self._member is None or not self._member.isreg():
            return io.BytesIO()
        return self._archive.extractfile(self._member)

    def close(self):
        """
        Closes the archive and the underlying file. Repeated calls have no effect.
        """
        if self._closed:
            return
        self._closed = True
        try:
            self._archive.close()
        finally:
            self._fileobj.close()
            logger.debug('Closed %s', self.label)

    def __enter__(self) -> TarEntryStream:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
