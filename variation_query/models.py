"""Domain objects assembled by the variation adaptors.

All objects are plain dataclasses: created fresh for each query, owned by
the caller, never written back.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Population:
    """A population (sample group) allele frequencies are measured in."""

    dbid: int
    name: str
    description: str | None = None
    size: int | None = None


@dataclass
class Allele:
    """One allele of a variation, with an optional population frequency."""

    dbid: int
    allele: str
    frequency: float | None = None
    population: Population | None = None


@dataclass(frozen=True)
class Synonym:
    """An alternative name for a variation, qualified by its source."""

    name: str
    source: str


@dataclass
class Variation:
    """A sequence variation (SNP, indel, ...) with its alleles and synonyms."""

    dbid: int
    name: str
    source: str
    validation_states: set[str] = field(default_factory=set)
    alleles: list[Allele] = field(default_factory=list)
    synonyms: list[Synonym] = field(default_factory=list)

    def add_allele(self, allele: Allele) -> None:
        self.alleles.append(allele)

    def add_synonym(self, source: str, name: str) -> None:
        """Record ``name`` as a synonym from ``source``.

        Duplicate detection is the caller's job; the hydrator only calls
        this once per distinct ``(source, name)``.
        """
        self.synonyms.append(Synonym(name=name, source=source))

    def get_all_synonyms(self, source: str | None = None) -> list[str]:
        """Synonym names, optionally restricted to one source, in load order."""
        return [s.name for s in self.synonyms if source is None or s.source == source]

    def get_all_synonym_sources(self) -> list[str]:
        """Distinct synonym sources, in first-seen order."""
        return list(dict.fromkeys(s.source for s in self.synonyms))
