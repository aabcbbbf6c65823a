"""Data models and LangGraph state for the article fact-check pipeline."""

from __future__ import annotations

from typing import Any, List, Literal, Optional, TypedDict, Union

from pydantic import BaseModel, ConfigDict, Field

from src.config import DEFAULT_MAX_SOURCES, DEFAULT_RETRY_COUNT, DEFAULT_TIMEOUT_MS

QueryLabel = Literal["General", "Fact Check"]

GENERAL_LABEL: QueryLabel = "General"
FACT_CHECK_LABEL: QueryLabel = "Fact Check"


class SourceConfig(BaseModel):
    """Options for a single source fetch, resolved once per call."""
    max_sources: int = Field(default=DEFAULT_MAX_SOURCES, gt=0)
    include_fact_check_sites: bool = True
    include_trusted_domains: bool = True
    retry_count: int = Field(default=DEFAULT_RETRY_COUNT, ge=0)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    verbose: bool = False
    current_retry: Optional[int] = Field(default=None, ge=0)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def resolve(
        cls,
        options: Union[SourceConfig, dict[str, Any], None] = None,
    ) -> SourceConfig:
        """Build a validated config from caller options.

        Numeric options given as 0 or None fall back to their defaults.
        Out-of-range values raise pydantic.ValidationError.

        Args:
            options: A SourceConfig, a dict of option fields, or None.

        Returns:
            SourceConfig with every field populated.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options

        data = dict(options)
        for key in ("max_sources", "retry_count", "timeout_ms"):
            if key in data and not data[key]:
                data.pop(key)
        for key in ("include_fact_check_sites", "include_trusted_domains", "verbose"):
            if key in data and data[key] is None:
                data.pop(key)
        return cls(**data)


class SearchQuery(BaseModel):
    """A search string paired with the label of the query variant."""
    model_config = ConfigDict(frozen=True)

    q: str
    label: QueryLabel = GENERAL_LABEL


class SourceResult(BaseModel):
    """A scored (and eventually ranked) source for a claim."""
    title: str
    snippet: str = ""
    link: str
    source: str
    relevance_score: float = Field(default=0.0, ge=0.0)
    rank: int = 0


class FactCheckClaim(BaseModel):
    """A sentence flagged as inaccurate, with the sources found for it."""
    sentence: str
    sources: List[SourceResult] = []


class NodeTrace(BaseModel):
    """Trace of a single graph node's execution."""
    node: str
    duration_seconds: float
    cost_usd: float = 0.0
    input_summary: str
    output_summary: str
    success: bool
    tools_called: List[str] = []


class ArticleCheckState(TypedDict):
    """Main state passed through the LangGraph workflow."""
    # Input
    article: str
    source_options: Optional[SourceConfig]

    # Flagged claims (sources filled by the retriever node)
    claims: List[FactCheckClaim]

    # Tracing
    agent_trace: List[NodeTrace]
    total_cost_usd: float
    total_duration_seconds: float
