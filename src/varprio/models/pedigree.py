"""Pedigree models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class Sex(enum.StrEnum):
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


class Status(enum.StrEnum):
    AFFECTED = "affected"
    UNAFFECTED = "unaffected"
    UNKNOWN = "unknown"


class Individual(BaseModel):
    """A pedigree member. Parent ids are empty strings when not in the pedigree."""
    model_config = ConfigDict(frozen=True)

    id: str
    father_id: str = ""
    mother_id: str = ""
    sex: Sex = Sex.UNKNOWN
    status: Status = Status.UNKNOWN

    def is_affected(self) -> bool:
        return self.status == Status.AFFECTED

    def is_unaffected(self) -> bool:
        return self.status == Status.UNAFFECTED

    def is_male(self) -> bool:
        return self.sex == Sex.MALE


class Pedigree(BaseModel):
    model_config = ConfigDict(frozen=True)

    individuals: tuple[Individual, ...] = Field(default_factory=tuple)

    @classmethod
    def empty(cls) -> Pedigree:
        return cls()

    @classmethod
    def just_proband(cls, sample_id: str, sex: Sex = Sex.UNKNOWN) -> Pedigree:
        """Singleton pedigree containing only the affected proband."""
        return cls(individuals=(Individual(id=sample_id, sex=sex, status=Status.AFFECTED),))

    def is_empty(self) -> bool:
        """True when there is no named, affected individual to analyse."""
        return not any(ind.id and ind.is_affected() for ind in self.individuals)

    def get(self, sample_id: str) -> Individual | None:
        for individual in self.individuals:
            if individual.id == sample_id:
                return individual
        return None

    @property
    def identifiers(self) -> set[str]:
        return {ind.id for ind in self.individuals}

    def affected(self) -> list[Individual]:
        return [ind for ind in self.individuals if ind.is_affected()]

    def unaffected(self) -> list[Individual]:
        return [ind for ind in self.individuals if ind.is_unaffected()]

    def parents_of(self, individual: Individual) -> list[Individual]:
        parents = [self.get(individual.father_id), self.get(individual.mother_id)]
        return [parent for parent in parents if parent is not None]
