## Pydantic schemas for the generator input, output and sampling settings
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List

class ProjectInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    industry: str
    project_type: str = Field(alias="projectType")
    difficulty: str

class CapstoneProject(BaseModel):
    project_title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    # The prompt asks for 3-5 objectives; the count itself is not enforced
    objectives: List[str] = Field(min_length=1)

    @field_validator("project_title", "description")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        # Checked only; the model's text is returned as-is
        if not v.strip():
            raise ValueError("must not be blank")
        return v

class SamplingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float = Field(ge=0.0, le=2.0)
    top_p: float = 0.9
    top_k: int = 40
    max_output_tokens: int = 2048
    json_output: bool = True
