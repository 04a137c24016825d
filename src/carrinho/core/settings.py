
"""Configurações Pydantic Settings para o motor de carrinho."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    """Configurações da aplicação. Carrega de env e .env (prefixo CARRINHO_)."""
    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARRINHO_", case_sensitive=False, extra="ignore")

    # Logging
    log_level: int = Field(default=20, description="Nível mínimo (padrão logging: 10=debug, 20=info)")

    # Catálogo
    catalog_path: str = Field(default="config/catalog.json")

    # Apresentação de valores
    currency_symbol: str = Field(default="$")
    price_decimals: int = Field(default=2, ge=0)
