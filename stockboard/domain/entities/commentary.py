"""
Domain entities for the templated per-persona market commentary.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Opinion:
    name: str
    view: str
    desc: str
    score: int


@dataclass(frozen=True)
class CommentaryBlock:
    gemini: Opinion
    gpt: Opinion
    deepseek: Opinion
    summary: str
