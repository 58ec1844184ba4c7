"""Configuration management package.

Provides configuration loading, constants and the centralized configuration
service.

Submodules:
- config_loader: YAML configuration loading (ConfigLoader, PROJECT_ROOT, CONFIG_DIR)
- constants: Application constants (DEFAULT_CHECK_CONFIG, STATUS_ICONS, thresholds)
- service: Configuration service singleton (ConfigService, get_config_service, get_check_config)

Note: Use direct imports from submodules:
    from devcheck.config.config_loader import ConfigLoader, PROJECT_ROOT
    from devcheck.config.constants import DEFAULT_CHECK_CONFIG
    from devcheck.config.service import get_config_service
"""
