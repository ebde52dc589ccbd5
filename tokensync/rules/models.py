from pydantic import BaseModel, ConfigDict, Field, field_validator

SCHEMA_VERSION = 1


class SourceRules(BaseModel):
    tokens_path: str


class OutputRules(BaseModel):
    dir: str
    # None disables the artifact
    theme_module: str | None = "tokens.ts"
    theme_json: str | None = "tokens.json"
    css_file: str | None = "variables.css"


class CssRules(BaseModel):
    radius_fallback: str = "0.5rem"
    font_fallback: str = '"Albert Sans", sans-serif'


class BuildRules(BaseModel):
    schema_version: int
    project_slug: str = Field(min_length=1)
    source: SourceRules
    output: OutputRules
    css: CssRules = Field(default_factory=CssRules)

    model_config = ConfigDict(extra="forbid")

    @field_validator("schema_version")
    @classmethod
    def check_schema_version(cls, v: int) -> int:
        if v != SCHEMA_VERSION:
            raise ValueError(f"expected {SCHEMA_VERSION}, got {v}")
        return v
