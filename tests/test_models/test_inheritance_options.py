"""Tests for inheritance modes and frequency ceilings."""

import math

import pytest
from pydantic import ValidationError

from varprio.config import InheritanceConfig
from varprio.models.inheritance import (
    InheritanceModeOptions,
    ModeOfInheritance,
    SubModeOfInheritance,
)


def test_sub_modes_map_to_parent_modes():
    assert SubModeOfInheritance.AUTOSOMAL_RECESSIVE_COMP_HET.mode == ModeOfInheritance.AUTOSOMAL_RECESSIVE
    assert SubModeOfInheritance.X_RECESSIVE_HOM_ALT.mode == ModeOfInheritance.X_RECESSIVE
    assert SubModeOfInheritance.ANY.mode == ModeOfInheritance.ANY


def test_recessive_modes():
    assert ModeOfInheritance.AUTOSOMAL_RECESSIVE.is_recessive()
    assert ModeOfInheritance.X_RECESSIVE.is_recessive()
    assert not ModeOfInheritance.AUTOSOMAL_DOMINANT.is_recessive()
    assert not ModeOfInheritance.MITOCHONDRIAL.is_recessive()


class TestDefaults:
    def test_mode_ceiling_is_max_of_sub_modes(self):
        options = InheritanceModeOptions.defaults()
        assert options.max_freq_for_mode(ModeOfInheritance.AUTOSOMAL_RECESSIVE) == 2.0
        assert options.max_freq_for_mode(ModeOfInheritance.X_RECESSIVE) == 2.0
        assert options.max_freq_for_mode(ModeOfInheritance.AUTOSOMAL_DOMINANT) == 0.1
        assert options.max_freq_for_mode(ModeOfInheritance.MITOCHONDRIAL) == 0.2

    def test_any_takes_highest_ceiling(self):
        options = InheritanceModeOptions.defaults()
        assert options.max_freq_for_mode(ModeOfInheritance.ANY) == 2.0
        assert options.max_freq_for_sub_mode(SubModeOfInheritance.ANY) == 2.0

    def test_sub_mode_ceilings(self):
        options = InheritanceModeOptions.defaults()
        assert options.max_freq_for_sub_mode(SubModeOfInheritance.AUTOSOMAL_RECESSIVE_HOM_ALT) == 0.1
        assert options.max_freq_for_sub_mode(SubModeOfInheritance.AUTOSOMAL_RECESSIVE_COMP_HET) == 2.0

    def test_defined_modes(self):
        options = InheritanceModeOptions.defaults()
        assert options.defined_modes == {
            ModeOfInheritance.AUTOSOMAL_DOMINANT,
            ModeOfInheritance.AUTOSOMAL_RECESSIVE,
            ModeOfInheritance.X_DOMINANT,
            ModeOfInheritance.X_RECESSIVE,
            ModeOfInheritance.MITOCHONDRIAL,
        }


def test_default_for_modes():
    options = InheritanceModeOptions.default_for_modes(ModeOfInheritance.AUTOSOMAL_RECESSIVE)
    assert options.defined_modes == {ModeOfInheritance.AUTOSOMAL_RECESSIVE}
    assert options.defined_sub_modes == {
        SubModeOfInheritance.AUTOSOMAL_RECESSIVE_COMP_HET,
        SubModeOfInheritance.AUTOSOMAL_RECESSIVE_HOM_ALT,
    }


def test_default_for_any_is_defaults():
    assert InheritanceModeOptions.default_for_modes(ModeOfInheritance.ANY) == InheritanceModeOptions.defaults()


def test_empty_options():
    options = InheritanceModeOptions.empty()
    assert options.is_empty()
    assert options.defined_modes == set()
    assert math.isinf(options.max_freq_for_mode(ModeOfInheritance.AUTOSOMAL_DOMINANT))


def test_ceiling_must_be_a_percentage():
    with pytest.raises(ValidationError):
        InheritanceModeOptions.of({SubModeOfInheritance.AUTOSOMAL_DOMINANT: 101.0})


def test_config_defaults_match_option_defaults():
    assert InheritanceConfig().to_options() == InheritanceModeOptions.defaults()
