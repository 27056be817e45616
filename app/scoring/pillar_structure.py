# app/scoring/pillar_structure.py
"""
Pillar Structure
----------------
The six assessment pillars, their sub-pillars and the indicator codes
grouped under each sub-pillar.

Grouping is informational: it drives the sub-pillar breakdown shown next
to a pillar score, never the pillar average itself.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

PILLAR_IDS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6)


@dataclass(frozen=True)
class SubPillarDefinition:
    id: str
    name: str
    description: str
    indicators: Tuple[str, ...]


@dataclass(frozen=True)
class PillarDefinition:
    id: int
    name: str
    description: str
    sub_pillars: Tuple[SubPillarDefinition, ...]

    @property
    def indicators(self) -> List[str]:
        return [i for sp in self.sub_pillars for i in sp.indicators]


def _sp(id: str, name: str, description: str, *indicators: str) -> SubPillarDefinition:
    return SubPillarDefinition(id, name, description, tuple(indicators))


_PILLARS: Sequence[PillarDefinition] = (
    PillarDefinition(
        1,
        "Strategic Foundation & Leadership Commitment",
        "Assesses the organization's strategic foundation and leadership commitment to innovation management.",
        (
            _sp("1.1", "Innovation Intent & Strategic Alignment",
                "The organization's formal innovation intent and its alignment with strategic objectives.",
                "1.1.1", "1.1.2", "1.1.3", "1.1.4"),
            _sp("1.2", "Leadership Commitment & Accountability",
                "Leadership's commitment to innovation and accountability mechanisms.",
                "1.2.1", "1.2.2", "1.2.3", "1.2.4"),
            _sp("1.3", "Formal Policy & IP Strategy",
                "Formal innovation policies and intellectual property strategy.",
                "1.3.1", "1.3.2", "1.3.3", "1.3.4"),
            _sp("1.4", "Strategic Flexibility & Feedback Loops",
                "Strategic flexibility and feedback mechanisms for innovation.",
                "1.4.1", "1.4.2", "1.4.3", "1.4.4"),
        ),
    ),
    PillarDefinition(
        2,
        "Resource Allocation & Infrastructure",
        "Evaluates the organization's resource allocation and infrastructure for innovation.",
        (
            _sp("2.1", "Financial Investment",
                "Financial resources allocated to innovation activities.",
                "2.1.1", "2.1.2", "2.1.3"),
            _sp("2.2", "Human Capital Development",
                "Human resources and development for innovation capabilities.",
                "2.2.1", "2.2.2", "2.2.3", "2.2.4", "2.2.5"),
            _sp("2.3", "Infrastructure & Tools",
                "Physical and digital infrastructure supporting innovation.",
                "2.3.1", "2.3.2", "2.3.3", "2.3.4"),
        ),
    ),
    PillarDefinition(
        3,
        "Innovation Processes & Culture",
        "Assesses the organization's innovation processes and culture.",
        (
            _sp("3.1", "Process Maturity",
                "Maturity and effectiveness of innovation processes.",
                "3.1.1", "3.1.2", "3.1.3", "3.1.4"),
            _sp("3.2", "Idea Management",
                "Processes for capturing, evaluating, and managing ideas.",
                "3.2.1", "3.2.2", "3.2.3"),
            _sp("3.3", "Experimentation & Learning",
                "Experimentation processes and learning mechanisms.",
                "3.3.1", "3.3.2", "3.3.3"),
            _sp("3.4", "Innovation Culture",
                "Organizational culture supporting innovation.",
                "3.4.1", "3.4.2", "3.4.3", "3.4.4"),
            _sp("3.5", "Strategy Communication",
                "Communication of innovation strategy to employees.",
                "3.5.1", "3.5.2"),
        ),
    ),
    PillarDefinition(
        4,
        "Knowledge & IP Management",
        "Evaluates knowledge management and intellectual property practices.",
        (
            _sp("4.1", "IP Strategy & Value",
                "Intellectual property strategy and value creation.",
                "4.1.1", "4.1.2", "4.1.3"),
            _sp("4.2", "IP Identification & Protection",
                "Processes for identifying and protecting intellectual property.",
                "4.2.1", "4.2.2", "4.2.3"),
            _sp("4.3", "IP Risk Management",
                "Risk assessment and mitigation for intellectual property.",
                "4.3.1", "4.3.2"),
            _sp("4.4", "Knowledge Sharing",
                "Knowledge management and sharing systems.",
                "4.4.1", "4.4.2", "4.4.3"),
        ),
    ),
    PillarDefinition(
        5,
        "Strategic Intelligence & Collaboration",
        "Assesses external intelligence gathering and collaboration capabilities.",
        (
            _sp("5.1", "Intelligence Gathering",
                "Strategic intelligence gathering and analysis.",
                "5.1.1", "5.1.2", "5.1.3", "5.1.4", "5.1.5"),
            _sp("5.2", "External Collaboration",
                "External partnerships and collaboration management.",
                "5.2.1", "5.2.2", "5.2.3", "5.2.4"),
        ),
    ),
    PillarDefinition(
        6,
        "Performance Measurement & Improvement",
        "Evaluates performance measurement and continuous improvement processes.",
        (
            _sp("6.1", "Performance Metrics",
                "Innovation performance measurement and metrics.",
                "6.1.1", "6.1.2", "6.1.3"),
            _sp("6.2", "Assessment & Auditing",
                "Regular assessment and auditing of innovation systems.",
                "6.2.1", "6.2.2", "6.2.3"),
            _sp("6.3", "Continuous Improvement",
                "Continuous improvement and system evolution.",
                "6.3.1", "6.3.2", "6.3.3"),
        ),
    ),
)


class PillarStructure:
    """Lookup over the pillar → sub-pillar → indicator grouping."""

    def __init__(self, pillars: Sequence[PillarDefinition]):
        self._pillars: Dict[int, PillarDefinition] = {p.id: p for p in pillars}
        self._locations: Dict[str, Tuple[int, str]] = {
            indicator_id: (p.id, sp.id)
            for p in pillars
            for sp in p.sub_pillars
            for indicator_id in sp.indicators
        }

    @property
    def pillar_ids(self) -> Tuple[int, ...]:
        return PILLAR_IDS

    @property
    def pillars(self) -> List[PillarDefinition]:
        return [self._pillars[i] for i in PILLAR_IDS if i in self._pillars]

    def get_pillar(self, pillar_id: int) -> Optional[PillarDefinition]:
        return self._pillars.get(pillar_id)

    def get_sub_pillar(self, pillar_id: int, sub_pillar_id: str) -> Optional[SubPillarDefinition]:
        pillar = self.get_pillar(pillar_id)
        if pillar is None:
            return None
        for sp in pillar.sub_pillars:
            if sp.id == sub_pillar_id:
                return sp
        return None

    def get_indicator_location(self, indicator_id: str) -> Optional[Tuple[int, str]]:
        """(pillar id, sub-pillar id) for an indicator code, or None."""
        return self._locations.get(indicator_id)

    def indicators_for_pillar(self, pillar_id: int) -> List[str]:
        pillar = self.get_pillar(pillar_id)
        return pillar.indicators if pillar else []

    def pillar_name(self, pillar_id: int) -> str:
        pillar = self.get_pillar(pillar_id)
        return pillar.name if pillar else f"Pillar {pillar_id}"


@lru_cache
def get_pillar_structure() -> PillarStructure:
    return PillarStructure(_PILLARS)
