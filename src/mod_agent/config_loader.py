"""
Configuration loader with validation.

Builds ModAgentConfig from the environment (and a local .env file).
"""
from dotenv import load_dotenv
from .config import ModAgentConfig
from .config_validator import get_optional_env, validate_float, validate_int, validate_path


def load_config_from_env() -> ModAgentConfig:
    """
    Load configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        app = ModAgentApp(config)
        app.initialize()
    
    :return: Validated ModAgentConfig instance
    :raises: ConfigurationError if a value is malformed
    """
    # Load .env file if it exists (for local development)
    load_dotenv()
    
    defaults = ModAgentConfig()
    
    config = ModAgentConfig(
        catalog_host=get_optional_env("CATALOG_HOST", default=defaults.catalog_host),
        request_timeout=validate_float(
            get_optional_env("REQUEST_TIMEOUT", str(defaults.request_timeout)),
            "REQUEST_TIMEOUT",
            minimum=0.1,
        ),
        prefix_file_path=get_optional_env("PREFIX_FILE_PATH", default=defaults.prefix_file_path),
        command_keyword=get_optional_env("COMMAND_KEYWORD", default=defaults.command_keyword),
        min_factorio_version=validate_float(
            get_optional_env("MIN_FACTORIO_VERSION", str(defaults.min_factorio_version)),
            "MIN_FACTORIO_VERSION",
        ),
        listing_cap=validate_int(
            get_optional_env("LISTING_CAP", str(defaults.listing_cap)),
            "LISTING_CAP",
            minimum=1,
        ),
        match_threshold=validate_int(
            get_optional_env("MATCH_THRESHOLD", str(defaults.match_threshold)),
            "MATCH_THRESHOLD",
        ),
        max_workers=validate_int(
            get_optional_env("MAX_WORKERS", str(defaults.max_workers)),
            "MAX_WORKERS",
            minimum=1,
        ),
        log_level=get_optional_env("LOG_LEVEL", default=defaults.log_level).upper(),
    )
    
    validate_path(config.prefix_file_path, "PREFIX_FILE_PATH")
    
    return config
