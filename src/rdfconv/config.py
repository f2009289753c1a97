from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rdfconv.vocab import FOAF_NAME


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RDFCONV_", env_file=".env", extra="ignore")

    # Filesystem layout
    resource_dir: Path = Path("res")
    result_dir: Path = Path("result")

    # Logging
    log_file: Path | None = Path("log/myLog.txt")
    log_level: str = "DEBUG"
    json_logs: bool = False

    # Menu defaults
    demo_input: str = "ISWC2010.rdf"
    demo_output: str = "ISWC2010"
    demo_model_name: str = "basicModel"
    query_property: str = Field(default=FOAF_NAME)

    @property
    def demo_input_path(self) -> Path:
        return self.resource_dir / self.demo_input


settings = Settings()
