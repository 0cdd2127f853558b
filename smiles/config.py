"""Configuration management for Miles of Smiles using Pydantic."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # OpenAI Configuration
    openai_api_key: str = Field(..., description="OpenAI API key")

    # Server Configuration
    server_host: str = Field(default="0.0.0.0", description="Server host")
    server_port: int = Field(default=8080, description="Server port")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    # Agent Configuration
    agent_model: str = Field(default="gpt-4o", description="OpenAI model for agents")
    agent_temperature: float = Field(
        default=0.7, description="Temperature for agent responses"
    )
    conversation_db: str = Field(
        default="conversations.db",
        description="SQLite file holding per-connection chat memory",
    )
    max_input_length: int = Field(
        default=1000, gt=0, description="Longest chat message accepted"
    )

    # E-mail Configuration
    poem_recipient: str = Field(
        default="poetry-lover@example.com", description="Where poems are e-mailed"
    )
    smtp_host: str | None = Field(None, description="SMTP server host")
    smtp_port: int = Field(default=587, description="SMTP server port")
    smtp_username: str | None = Field(None, description="SMTP login user")
    smtp_password: str | None = Field(None, description="SMTP login password")
    smtp_sender: str | None = Field(None, description="From address for e-mails")
    smtp_use_tls: bool = Field(default=True, description="Use STARTTLS")

    def has_smtp_config(self) -> bool:
        """Check if outgoing e-mail is properly configured."""
        return bool(self.smtp_host and self.smtp_sender)

    def model_post_init(self, __context) -> None:
        """Validate configuration after initialization."""
        if not self.has_smtp_config():
            logger.warning(
                "SMTP_HOST/SMTP_SENDER not set - poems will not actually be e-mailed"
            )


# Global config instance
config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Config()
    return config


def setup_logging(cfg: Config | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from external libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("agents").setLevel(logging.WARNING)
