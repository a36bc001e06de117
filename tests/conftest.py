import pytest

from varprio.models.pedigree import Individual, Pedigree, Sex, Status

PROBAND = "proband"
FATHER = "father"
MOTHER = "mother"


@pytest.fixture()
def singleton_pedigree() -> Pedigree:
    return Pedigree.just_proband(PROBAND, Sex.FEMALE)


@pytest.fixture()
def male_singleton_pedigree() -> Pedigree:
    return Pedigree.just_proband(PROBAND, Sex.MALE)


@pytest.fixture()
def trio_pedigree() -> Pedigree:
    # affected child with two unaffected parents
    return Pedigree(individuals=(
        Individual(id=PROBAND, father_id=FATHER, mother_id=MOTHER, sex=Sex.FEMALE, status=Status.AFFECTED),
        Individual(id=FATHER, sex=Sex.MALE, status=Status.UNAFFECTED),
        Individual(id=MOTHER, sex=Sex.FEMALE, status=Status.UNAFFECTED),
    ))
