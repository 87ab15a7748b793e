import unittest

from tar_diff.archive_walker import EntryHeader, TarEntryStream, ArchiveOpenError, \
    ArchiveFormatError

from tar_fixtures import TarTestCase


class TestTarEntryStream(TarTestCase):
    """
    Tests the forward-only entry stream.
    """

    def read_all_headers(self, stream):
        headers = []
        while True:
            header = stream.next_entry()
            if header is None:
                return headers
            headers.append(header)

    def test_entry_headers(self):
        """
        Headers are returned in archive order with their declared sizes.
        """
        path = self.make_tar('simple.tar', [
            ('root', None),
            ('root/a.txt', b'hello'),
            ('root/empty.txt', b''),
        ])
        expected_headers = [
            EntryHeader('root/', 0),
            EntryHeader('root/a.txt', 5),
            EntryHeader('root/empty.txt', 0),
        ]

        with TarEntryStream.open(path, 'file1') as stream:
            self.assertEqual(expected_headers, self.read_all_headers(stream))
            # The end of the archive is sticky.
            self.assertIsNone(stream.next_entry())

    def test_entry_content(self):
        """
        Regular files expose their content, directories have empty content.
        """
        path = self.make_tar('content.tar', [('dir', None), ('dir/a.txt', b'hello')])

        with TarEntryStream.open(path, 'file1') as stream:
            stream.next_entry()
            self.assertEqual(b'', stream.open_content().read())
            stream.next_entry()
            self.assertEqual(b'hello', stream.open_content().read())

    def test_unread_content_is_skipped(self):
        """
        Advancing without reading the content of the current entry lands on the next header.
        """
        path = self.make_tar('skip.tar', [('big.bin', b'x' * 5000), ('small.txt', b'abc')])

        with TarEntryStream.open(path, 'file1') as stream:
            stream.next_entry()
            self.assertEqual(b'xx', stream.open_content().read(2))
            self.assertEqual(EntryHeader('small.txt', 3), stream.next_entry())
            self.assertEqual(b'abc', stream.open_content().read())

    def test_compressed_archive(self):
        path = self.make_tar('simple.tar.gz', [('a.txt', b'hello')], mode='w:gz')

        with TarEntryStream.open(path, 'file1') as stream:
            self.assertEqual([EntryHeader('a.txt', 5)], self.read_all_headers(stream))

    def test_empty_archive(self):
        """
        An archive consisting only of the end-of-archive marker has no entries.
        """
        path = self.make_tar('empty.tar', [])

        with TarEntryStream.open(path, 'file1') as stream:
            self.assertIsNone(stream.next_entry())

    def test_missing_file(self):
        with self.assertRaises(ArchiveOpenError) as context:
            TarEntryStream.open(self.tmp_dir / 'missing.tar', 'file2')

        self.assertEqual('file2', context.exception.label)
        self.assertIn('failed to open file2', str(context.exception))
        self.assertIsInstance(context.exception.__cause__, FileNotFoundError)

    def test_not_a_tar_file(self):
        path = self.make_file('garbage.tar', b'this is not a tar archive\n' * 40)

        with self.assertRaises(ArchiveFormatError) as context:
            TarEntryStream.open(path, 'file1')

        self.assertEqual('file1', context.exception.label)
        self.assertIn('error reading file1 tar', str(context.exception))

    def test_zero_byte_file(self):
        path = self.make_file('zero.tar', b'')

        with self.assertRaises(ArchiveFormatError):
            TarEntryStream.open(path, 'file1')

    def test_truncated_archive(self):
        """
        A truncated archive fails when advancing past the incomplete entry.
        """
        path = self.make_tar('full.tar', [('a.bin', b'a' * 2000), ('b.txt', b'b')])
        truncated = self.make_file('truncated.tar', path.read_bytes()[:1024])

        with TarEntryStream.open(truncated, 'file2') as stream:
            self.assertEqual(EntryHeader('a.bin', 2000), stream.next_entry())
            with self.assertRaises(ArchiveFormatError) as context:
                stream.next_entry()

        self.assertEqual('file2', context.exception.label)

    def test_corrupt_header_after_first_entry(self):
        """
        A bad checksum in a later header is an error, not the end of the archive.
        """
        path = self.make_tar('full.tar', [('a.txt', b'hello'), ('b.txt', b'world')])
        corrupt = self.make_corrupt_copy('corrupt.tar', path, header_offset=1024)

        with TarEntryStream.open(corrupt, 'file1') as stream:
            self.assertEqual(EntryHeader('a.txt', 5), stream.next_entry())
            with self.assertRaises(ArchiveFormatError) as context:
                stream.next_entry()

        self.assertEqual('file1', context.exception.label)

    def test_truncated_header_after_first_entry(self):
        """
        An archive ending inside a header block is an error.
        """
        path = self.make_tar('full.tar', [('a.txt', b'hello'), ('b.txt', b'world')])
        truncated = self.make_file('truncated.tar', path.read_bytes()[:1024 + 100])

        with TarEntryStream.open(truncated, 'file1') as stream:
            self.assertEqual(EntryHeader('a.txt', 5), stream.next_entry())
            with self.assertRaises(ArchiveFormatError):
                stream.next_entry()

    def test_archive_without_end_marker(self):
        """
        An archive ending on a block boundary without the zero blocks simply ends.
        """
        path = self.make_tar('full.tar', [('a.txt', b'hello')])
        unterminated = self.make_file('unterminated.tar', path.read_bytes()[:1024])

        with TarEntryStream.open(unterminated, 'file1') as stream:
            self.assertEqual([EntryHeader('a.txt', 5)], self.read_all_headers(stream))

    def test_directory_name_as_stored(self):
        """
        Directory names keep a trailing slash only if the archive stores one.
        """
        with_slash = self.make_tar('with_slash.tar', [('root/', None)])
        without_slash = self.make_tar('without_slash.tar', [('root', None)], literal_names=True)

        with TarEntryStream.open(with_slash, 'file1') as stream:
            self.assertEqual([EntryHeader('root/', 0)], self.read_all_headers(stream))
        with TarEntryStream.open(without_slash, 'file2') as stream:
            self.assertEqual([EntryHeader('root', 0)], self.read_all_headers(stream))

    def test_close(self):
        """
        Closing releases the file and can be repeated.
        """
        path = self.make_tar('close.tar', [('a.txt', b'hello')])

        stream = TarEntryStream.open(path, 'file1')
        with stream:
            stream.next_entry()
        self.assertTrue(stream._fileobj.closed)
        stream.close()


if __name__ == '__main__':
    unittest.main()
