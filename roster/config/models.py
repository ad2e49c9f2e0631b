from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

StorageBackend = Literal["memory", "file", "sqlite"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StorageConfig(BaseModel):
    backend: StorageBackend = "file"
    key: str = Field(default="students", min_length=1)
    path: str = "./data"

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    level: LogLevel = "INFO"

    model_config = ConfigDict(extra="forbid")


class RosterConfig(BaseModel):
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")
