__title__ = 'tar-diff'
__description__ = 'Positional diff tool for tar archives.'
__version__ = '0.1.0'
__author__ = 'tar-diff developers'
__license__ = 'MIT'
__copyright__ = 'Copyright 2026 tar-diff developers'
