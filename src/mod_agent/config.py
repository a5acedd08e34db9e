from dataclasses import dataclass


@dataclass
class ModAgentConfig:
    # Catalog
    catalog_host: str = "mods.factorio.com"
    request_timeout: float = 10.0

    # Prefix storage
    prefix_file_path: str = "prefixes.json"

    # Commands
    command_keyword: str = "linkmod"

    # Resolution
    min_factorio_version: float = 0.15
    listing_cap: int = 10
    match_threshold: int = 3

    # Performance
    max_workers: int = 8

    log_level: str = "INFO"
