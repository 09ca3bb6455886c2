from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Monorail (market data: price, categories, fallback metadata)
    monorail_api_base: str = "https://testnet-api.monorail.xyz/v1"
    monorail_identifier: str = ""

    # Blockvision (chain indexer: token detail + holders)
    blockvision_api_base: str = "https://api.blockvision.org/v2/monad"
    blockvision_api_key: str = ""

    # Etherscan v2 (contract creation lookup)
    etherscan_api_base: str = "https://api.etherscan.io/v2/api"
    etherscan_api_key: str = ""
    chain_id: int = 10143  # Monad testnet

    # JSON-RPC endpoint (gas price)
    rpc_url: str = ""

    http_timeout_sec: float = 15.0

    # Logging
    log_dir: str = "logs"
    log_retention: str = "3 days"

    # Holder pagination
    holders_page_size: int = 50
    holders_max_pages: int = 1000  # safety bound against runaway pagination
    holders_page_delay_sec: float = 0.1

    # Result cache
    cache_max_entries: int = 100
    cache_ttl_sec: int = 24 * 60 * 60

    # HTTP API
    analyze_timeout_sec: float = 45.0
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    cors_origins: str = "https://montoks.xyz,http://localhost:3000"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
