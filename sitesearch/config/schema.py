"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_SEARCH_URL = "http://localhost:8124/api/search"


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EndpointConfig(Base):
    """Search endpoint the page fetcher talks to."""

    base_url: str = DEFAULT_SEARCH_URL
    timeout: float = 10.0


class SearchBarConfig(Base):
    """Search bar input and location behaviour."""

    debounce_ms: int = Field(default=300, ge=0)
    query_param: str = "query"


class LoggingConfig(Base):
    level: str = "INFO"


class Config(Base):
    """Root configuration."""

    endpoint: EndpointConfig = Field(default_factory=EndpointConfig)
    search_bar: SearchBarConfig = Field(default_factory=SearchBarConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
