"""Configuration management."""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Geometry
    epsilon: float = Field(
        default=1e-5,
        description="Absolute tolerance for float comparisons at domain scale",
    )
    domain_min: float = Field(default=-1.0, description="Lower domain bound on both axes")
    domain_max: float = Field(default=1.0, description="Upper domain bound on both axes")
    edge_intersection_threshold: int = Field(
        default=2,
        description="Edge-pair crossings (out of 9) that make two triangles overlap",
    )
    max_candidate_area: float = Field(
        default=4.0, description="Initial best-area sentinel of the fan triangulator"
    )

    # Generation
    default_strategy: str = Field(default="circumcenter", description="Pipeline strategy")
    color_seed: int = Field(default=0, description="Seed for random site colors")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="console", description="Logging format (console, json)")

    @field_validator("epsilon")
    @classmethod
    def _positive_epsilon(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("epsilon must be positive")
        return value

    @field_validator("edge_intersection_threshold")
    @classmethod
    def _threshold_range(cls, value: int) -> int:
        if not 1 <= value <= 9:
            raise ValueError("edge_intersection_threshold must be between 1 and 9")
        return value

    @model_validator(mode="after")
    def _non_empty_domain(self) -> "Settings":
        if self.domain_min >= self.domain_max:
            raise ValueError("domain_min must be smaller than domain_max")
        return self

    class Config:
        env_prefix = "VORONOIABLE_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
