"""
Centralized configuration for SEO Analyzer
All environment variables and settings are defined here
"""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Provides centralized configuration with validation and defaults.
    """

    # ======================
    # API Configuration
    # ======================
    ANTHROPIC_API_KEY: str = Field(default="", description="Anthropic API key")
    ANTHROPIC_MODEL: str = Field(
        default="claude-sonnet-4-20250514",
        description="Claude model to use for recommendations"
    )
    MAX_TOKENS: int = Field(default=2000, description="Max tokens for Claude response")
    TEMPERATURE: float = Field(default=0.7, description="Sampling temperature")

    # ======================
    # Backlinks (DataForSEO) Configuration
    # ======================
    DATAFORSEO_LOGIN: str = Field(default="", description="DataForSEO login")
    DATAFORSEO_PASSWORD: str = Field(default="", description="DataForSEO password")
    DATAFORSEO_API_URL: str = Field(
        default="https://api.dataforseo.com/v3/backlinks/backlinks/live",
        description="DataForSEO live backlinks endpoint"
    )
    BACKLINKS_TARGET: str = Field(
        default="https://team-gpt.com/",
        description="Target used when /backlinks is called without one"
    )
    BACKLINKS_LIMIT: int = Field(default=100, description="Max backlinks per request")
    BACKLINKS_TIMEOUT: int = Field(default=60, description="Backlinks request timeout in seconds")

    # ======================
    # ChromaDB Configuration
    # ======================
    CHROMA_HOST: Optional[str] = Field(
        default=None,
        description="ChromaDB server host (uses local persistent store if not set)"
    )
    CHROMA_PORT: int = Field(default=8000, description="ChromaDB server port")
    CHROMA_SSL: bool = Field(default=False, description="Use HTTPS for ChromaDB")
    CHROMA_AUTH_TOKEN: Optional[str] = Field(default=None, description="ChromaDB bearer token")
    CHROMA_PERSIST_DIR: str = Field(
        default="./chroma_data",
        description="Local persistent store directory"
    )
    CHROMA_COLLECTION: str = Field(
        default="embeddings_col",
        description="Collection holding the document chunks"
    )

    # ======================
    # RAG Configuration
    # ======================
    RAG_SOURCE_FILES: List[str] = Field(
        default=["./data/data.txt"],
        description="Text files embedded by the document indexer"
    )
    RAG_CHUNK_SIZE: int = Field(default=500, description="Max characters per chunk")
    RAG_CHUNK_OVERLAP: int = Field(default=15, description="Characters shared by consecutive chunks")
    RAG_TOP_K: int = Field(default=5, description="Chunks retrieved per question")
    RAG_INDEX_ON_STARTUP: bool = Field(
        default=False,
        description="Build the document index when the API starts"
    )

    # ======================
    # Lighthouse Configuration
    # ======================
    LIGHTHOUSE_BIN: str = Field(default="lighthouse", description="Lighthouse CLI executable")
    LIGHTHOUSE_TIMEOUT: int = Field(
        default=180,
        description="Max seconds a Lighthouse run may take"
    )
    LIGHTHOUSE_CHROME_FLAGS: str = Field(
        default="--headless --no-sandbox --disable-dev-shm-usage",
        description="Flags passed to the Chrome instance Lighthouse launches"
    )

    # ======================
    # Browser Configuration
    # ======================
    NAVIGATION_TIMEOUT: int = Field(
        default=90,
        description="Max seconds to wait for a page to become network-idle"
    )
    VIEWPORT_WIDTH: int = Field(
        default=1920,
        description="Browser viewport width"
    )
    VIEWPORT_HEIGHT: int = Field(
        default=1080,
        description="Browser viewport height"
    )

    # ======================
    # Logging Configuration
    # ======================
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    @property
    def backlinks_configured(self) -> bool:
        """True when both DataForSEO credentials are present"""
        return bool(self.DATAFORSEO_LOGIN and self.DATAFORSEO_PASSWORD)

    def missing_credentials(self) -> List[str]:
        """Names of required settings that are empty"""
        missing = []
        if not self.ANTHROPIC_API_KEY:
            missing.append("ANTHROPIC_API_KEY")
        return missing

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Allow extra env vars in .env file


# Global settings instance
settings = Settings()

