"""
ID registry for PRD documents.

Every entity ID lives in one flat namespace, whatever section the entity
sits in, because references such as user_story.persona_id resolve against
that namespace. The registry is built per call; nothing here is shared
between documents.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator

from plangraph.lib.types import Finding
from plangraph.prd.models import Document, ProblemDefinition

logger = logging.getLogger(__name__)


@dataclass
class IDRegistry:
    """Declared IDs mapped to the first location they were seen at."""
    ids: dict[str, str] = field(default_factory=dict)
    errors: list[Finding] = field(default_factory=list)

    def register(self, entity_id: str, location: str) -> None:
        """Record entity_id at location, or a duplicate-ID error if already taken.

        Empty IDs are not tracked and never collide.
        """
        if not entity_id:
            return
        existing = self.ids.get(entity_id)
        if existing is not None:
            self.errors.append(Finding(
                field=location,
                message=f"Duplicate ID '{entity_id}' at {location} (also at {existing})",
            ))
            return
        self.ids[entity_id] = location

    def defined_ids(self) -> set[str]:
        return set(self.ids)

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self.ids


def _iter_problem_ids(problem: ProblemDefinition, path: str) -> Iterator[tuple[str, str]]:
    yield problem.id, f"{path}.id"
    for i, secondary in enumerate(problem.secondary_problems):
        yield from _iter_problem_ids(secondary, f"{path}.secondary_problems[{i}]")


def iter_declared_ids(doc: Document) -> Iterator[tuple[str, str]]:
    """Yield (id, location) for every ID-bearing entity.

    Order is fixed so repeated runs give identical diagnostics:
    objectives, key results, personas, user stories, functional
    requirements, non-functional requirements, roadmap phases, then the
    optional problem, market, solution and decisions sections.
    """
    for i, okr in enumerate(doc.objectives.okrs):
        yield okr.objective.id, f"objectives.okrs[{i}].objective.id"
        for j, kr in enumerate(okr.key_results):
            yield kr.id, f"objectives.okrs[{i}].key_results[{j}].id"

    for i, persona in enumerate(doc.personas):
        yield persona.id, f"personas[{i}].id"

    for i, story in enumerate(doc.user_stories):
        yield story.id, f"user_stories[{i}].id"

    for i, req in enumerate(doc.requirements.functional):
        yield req.id, f"requirements.functional[{i}].id"

    for i, nfr in enumerate(doc.requirements.non_functional):
        yield nfr.id, f"requirements.non_functional[{i}].id"

    for i, phase in enumerate(doc.roadmap.phases):
        yield phase.id, f"roadmap.phases[{i}].id"

    if doc.problem is not None:
        yield from _iter_problem_ids(doc.problem, "problem")

    if doc.market is not None:
        for i, alt in enumerate(doc.market.alternatives):
            yield alt.id, f"market.alternatives[{i}].id"

    if doc.solution is not None:
        for i, option in enumerate(doc.solution.solution_options):
            yield option.id, f"solution.solution_options[{i}].id"

    if doc.decisions is not None:
        for i, record in enumerate(doc.decisions.records):
            yield record.id, f"decisions.records[{i}].id"


def collect_ids(doc: Document) -> IDRegistry:
    """Build the ID registry for doc, recording duplicates as errors."""
    registry = IDRegistry()
    for entity_id, location in iter_declared_ids(doc):
        registry.register(entity_id, location)

    logger.debug(f"Registered {len(registry.ids)} IDs, {len(registry.errors)} duplicates")
    return registry
