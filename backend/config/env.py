from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field

class EditorConfig(BaseModel):
    """Configuration for card defaults and the exported document."""
    default_card_title: str = Field(
        default="New Card Title",
        description="Title given to a freshly added card"
    )
    default_card_rows: str = Field(
        default="Row 1\nRow 2",
        description="Content rows given to a freshly added card"
    )
    untitled_placeholder: str = Field(
        default="Untitled",
        description="Title used for imported cards whose header has no text"
    )
    document_language: str = Field(
        default="de",
        description="Value of the lang attribute on the exported document"
    )
    default_deck_name: str = Field(
        default="default",
        description="Storage key used when a session is created without a name"
    )
    seed_default_card: bool = Field(
        default=True,
        description="Add one default card to sessions that start without stored cards"
    )

class Settings(BaseSettings):
    # Database settings
    database_url: str = Field(
        default="sqlite:///./spec_cards.db",
        description="Database connection URL"
    )

    # API settings
    api_title: str = Field(
        default="Spec Cards API",
        description="API title for documentation"
    )
    api_description: str = Field(
        default="API for editing spec cards and converting them to and from HTML",
        description="API description for documentation"
    )
    api_version: str = Field(
        default="1.0.0",
        description="API version"
    )

    # Editor settings
    editor: EditorConfig = Field(
        default_factory=EditorConfig,
        description="Card defaults and export options"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"  # Allow extra fields in environment without validation errors
    )

settings = Settings()
