"""
Helper to display a TarDiff on the command line.
"""

from tar_diff.diff_data import DiffState, TarDiff


class DiffPrinter:
    """
    Utility to print tar diffs
    """

    def __init__(self, quiet=False, output=None):
        """
        :param quiet: True to use a short one line summary of the number of differences
        :param output: Output stream to write to, None for the current standard output.
        """
        self.quiet = quiet
        self.output = output

        # The extra space before 'Content differs' is part of the established output format.
        self._state_to_line = {
            DiffState.HEADER_MISMATCH: ' {name} - Size differs',
            DiffState.CONTENT_MISMATCH: ' {name}  - Content differs',
            DiffState.ONLY_LEFT: ' {name} - Only in first archive',
            DiffState.ONLY_RIGHT: ' {name} - Only in second archive',
        }

    def line(self, *args):
        """
        Prints a line to the configured output stream.
        :param args: line contents
        """
        print(*args, file=self.output)

    def print_diff(self, tar_diff: TarDiff):
        """
        Prints the given diff in the configured output format.
        :param tar_diff: Tar diff to print.
        """
        if self.quiet:
            self.print_summary(tar_diff)
            return

        if tar_diff.is_equal:
            self.line('The contents of the tar files are equal.')
            return

        self.line('The following files are different:')
        for record in tar_diff.records:
            self.line(self._state_to_line[record.result].format(name=record.name))

    def print_summary(self, tar_diff: TarDiff):
        """
        Prints a one line summary, but only if the archives differ.
        :param tar_diff: Tar diff to summarize.
        """
        if tar_diff.is_equal:
            return

        counts = tar_diff.stats()
        self.line(f'Different:'
                  f' compared={tar_diff.pairs_compared}'
                  f' size={counts[DiffState.HEADER_MISMATCH]}'
                  f' content={counts[DiffState.CONTENT_MISMATCH]}'
                  f' ol={counts[DiffState.ONLY_LEFT]}'
                  f' or={counts[DiffState.ONLY_RIGHT]}'
                  )


def print_diff(tar_diff: TarDiff, *, quiet=False) -> None:
    """
    Prints the diff object in a human-readable format to the standard output.

    :param tar_diff: diff object
    :param quiet: True to only print a summary line if the archives differ.
    """

    printer = DiffPrinter(quiet=quiet)
    printer.print_diff(tar_diff)
