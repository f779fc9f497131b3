"""Top-level package for frieza-action.

GitHub Action installing the frieza CLI and snapshotting a cloud account
before a job, then cleaning it back afterwards.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("frieza-action")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
