"""devcheck package.

Verifies a local development environment before the workshop toolchain is used:
- Configuration management
- Environment diagnostics (runtime, API keys, directories, browser, network)
- Console reporting
- Infrastructure utilities
"""

__version__ = "1.0.0"
