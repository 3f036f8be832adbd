from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration, read from environment variables prefixed with
    `WHEREIS_` (or a `.env` file).

    Example:
        ```bash
        export WHEREIS_FOLLOW_LINKS=1
        export WHEREIS_MAX_DEPTH=3
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="whereis_",
        env_file=".env",
        extra="ignore",
    )

    follow_links: bool = False
    """Follow symbolic links while walking"""

    min_depth: int = 0
    """Don't yield entries above this depth (root is depth 0)"""

    max_depth: int | None = None
    """Don't descend below this depth"""

    sort: bool = False
    """Visit siblings ordered by file name instead of directory order"""

    strict: bool = False
    """Raise traversal errors instead of silently ending the search"""

    log_level: str = "info"
    """Log level for `configure_logging`"""

    log_json: bool = False
    """Render log lines as json"""
