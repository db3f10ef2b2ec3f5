from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol

from models.company_record import CompanyRecord
from models.progress import ExtractionProgress
from utils.logging_setup import init_logging


class RunState(str, Enum):
    FETCHING = "FETCHING"
    WAITING_FOR_CONTENT = "WAITING_FOR_CONTENT"
    EXTRACTING = "EXTRACTING"
    MERGING = "MERGING"
    CONTINUE = "CONTINUE"
    DONE = "DONE"
    ERROR = "ERROR"


TERMINAL_STATES = (RunState.DONE, RunState.ERROR)


@dataclass
class RunContext:
    """State owned by one scrape run and handed from step to step."""

    page: int = 1
    state: RunState = RunState.FETCHING
    html: Optional[str] = None
    page_companies: List[CompanyRecord] = field(default_factory=list)
    companies: List[CompanyRecord] = field(default_factory=list)
    progress: ExtractionProgress = field(default_factory=ExtractionProgress)
    meta: dict = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def known_slugs(self) -> set[str]:
        return {c.slug for c in self.companies}


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            ctx = step.run(ctx)
        return ctx
