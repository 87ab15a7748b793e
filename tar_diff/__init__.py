"""
Tar diff tool
"""

from .__version__ import (
    __author__,
    __copyright__,
    __description__,
    __license__,
    __title__,
    __version__,
)

from .diff_data import (
    DiffState,
    DiffRecord,
    TarDiff,
)

from .content_comparison import (
    ContentComparator,
    bytes_equal,
)

from .archive_walker import (
    EntryHeader,
    TarEntryStream,
    TarDiffError,
    ArchiveOpenError,
    ArchiveFormatError,
)

from .tar_diff import (
    TarDiffer,
    compare_entries,
)

from .cli_output import (
    print_diff,
    DiffPrinter,
)
