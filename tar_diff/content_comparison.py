"""
Helper to compare entry contents.
"""

from __future__ import annotations

import logging
import tarfile

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8192


def bytes_equal(left: bytes, right: bytes) -> bool:
    """
    Compares two byte buffers. Buffers of different length are unequal without looking at their
    contents.

    :param left: First buffer
    :param right: Second buffer
    :return: True if both buffers hold the same bytes.
    """
    if len(left) != len(right):
        return False
    return left == right


class ContentComparator:
    """
    Helper class to compare two io streams chunk by chunk.
    """

    def __init__(self, chunk_size=DEFAULT_CHUNK_SIZE):
        """
        :param chunk_size: Number of bytes requested from each stream per comparison step.
        """
        if chunk_size <= 0:
            raise ValueError(f'Chunk size must be positive, got {chunk_size}.')
        self.chunk_size = chunk_size

    def __repr__(self):
        return f'ContentComparator({self.chunk_size})'

    def _read_chunks(self, left_io, right_io):
        try:
            return left_io.read(self.chunk_size), right_io.read(self.chunk_size)
        except (tarfile.TarError, OSError) as error:
            logger.warning('Reading entry content failed, treating the entry as different: %s',
                           error)
            return None

    def contents_equal(self, left_io, right_io) -> bool:
        """
        Reads both streams in lockstep and compares them. Reading stops at the first difference,
        the remaining bytes are left unread.

        :param left_io: input io object positioned at the start of the first content
        :param right_io: input io object positioned at the start of the second content
        :return: True if both streams end at the same time with identical bytes.
        """
        while True:
            chunks = self._read_chunks(left_io, right_io)
            if chunks is None:
                return False

            left, right = chunks
            if not left and not right:
                return True

            if not bytes_equal(left, right):
                return False
