from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_RELATIONSHIP_TYPES = (
    "Parent,Child,Spouse,Sibling,Grandparent,Grandchild,"
    "Aunt/Uncle,Niece/Nephew,Cousin,Step-Parent,Step-Child,In-Law"
)


class Settings(BaseSettings):
    app_env: str = "dev"
    root_path: str = ""
    log_level: str = "INFO"

    database_url: str = "sqlite:///./fambul_tik.db"
    auto_create_schema: bool = True

    cors_origins: str = "*"

    # Comma separated; seeded once at startup, existing names are kept.
    relationship_types: str = DEFAULT_RELATIONSHIP_TYPES
    strict_consistency: bool = False

    model_config = SettingsConfigDict(env_prefix="FAMBUL_", env_file=".env", extra="ignore")

    @property
    def relationship_type_names(self) -> list[str]:
        return [name.strip() for name in self.relationship_types.split(",") if name.strip()]

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
