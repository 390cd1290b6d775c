"""
Query context and answer models.

Dependencies: pydantic
System role: Retrieval output and service facade response
"""

from pydantic import BaseModel, Field


class ContextEntry(BaseModel):
    """One retrieved (source, content) pair."""

    source: str = Field(description="Source the content came from")
    content: str = Field(description="Retrieved chunk text")


class QueryContext(BaseModel):
    """Retrieved entries for one question, in ranking order (closest first)."""

    entries: list[ContextEntry] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def sources(self) -> list[str]:
        return [entry.source for entry in self.entries]


class RAGAnswer(BaseModel):
    """Answer to a question together with the context it was grounded on."""

    question: str = Field(description="The user's question")
    answer: str = Field(description="Completion text, verbatim")
    context: QueryContext = Field(default_factory=QueryContext)
