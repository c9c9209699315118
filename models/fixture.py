"""Fixture and warning models for linter evaluation cases."""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class LintWarning(BaseModel):
    """One linter finding, either expected (fixture) or extracted (model output)."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="File path(s) the warning refers to")
    key: str = Field(..., description="Configuration key the warning refers to")
    message: str = Field(default="", description="Free-text warning or suggestion")


class FileData(BaseModel):
    """A single values file inside a chart."""

    model_config = ConfigDict(extra="ignore")

    path: str = Field(..., description="Path of the values file")
    # Order matters: the mapping is embedded verbatim into the prompt.
    values: Dict[str, Any] = Field(default_factory=dict)


class ConfigTree(BaseModel):
    """Hierarchical configuration tree submitted to the linter."""

    model_config = ConfigDict(extra="ignore")

    chart: str = Field(..., description="Chart name")
    configs: List[FileData] = Field(default_factory=list)


class EvalCase(BaseModel):
    """A fixture: input tree plus the warnings the linter should report."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(..., description="Human-readable case name")
    input_tree: ConfigTree = Field(..., alias="input")
    expected_warnings: List[LintWarning] = Field(default_factory=list)
