"""Input/Output utilities package.

Provides directory management.

Submodules:
- directory_utils: Directory management (ensure_writable_directory)

Note: Use direct imports from submodules:
    from devcheck.io.directory_utils import ensure_writable_directory
"""
