"""Remote code Runner configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings


class RunnerConfig(BaseSettings):
    """Settings for the upstream code execution service."""

    base_url: str = Field(default="https://emkc.org/api/v2/piston", alias="runner_base_url")
    timeout_seconds: float = Field(default=30.0, gt=0, le=600, alias="runner_timeout_seconds")
    enable_module_mocks: bool = Field(default=True)

    class Config:
        env_prefix = ""
        extra = "ignore"
