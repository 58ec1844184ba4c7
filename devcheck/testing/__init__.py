"""Testing utilities package.

Provides a fake environment and configuration helpers for automated testing.
"""

__all__ = [
    "FakeEnvironment",
    "create_test_config",
]
