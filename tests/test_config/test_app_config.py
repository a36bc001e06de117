"""Tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from varprio.config import AnnotationConfig, _build_config
from varprio.models.annotation import PutativeImpact


def test_split_minimum_impact_default():
    assert AnnotationConfig().split_minimum_impact == PutativeImpact.MODERATE


@pytest.mark.parametrize("value, expected", [
    ("HIGH", PutativeImpact.HIGH),
    ("low", PutativeImpact.LOW),
    (" Modifier ", PutativeImpact.MODIFIER),
    (PutativeImpact.HIGH, PutativeImpact.HIGH),
])
def test_split_minimum_impact_by_name(value, expected):
    assert AnnotationConfig(split_minimum_impact=value).split_minimum_impact == expected


def test_invalid_split_minimum_impact_names_the_setting():
    with pytest.raises(ValidationError, match="VARPRIO_SPLIT_MIN_IMPACT"):
        AnnotationConfig(split_minimum_impact="SEVERE")


def test_build_config_from_environment(monkeypatch):
    monkeypatch.setenv("VARPRIO_SPLIT_MIN_IMPACT", "high")
    monkeypatch.setenv("VARPRIO_MAX_FREQ_AD", "0.5")
    built = _build_config()
    assert built.annotation.split_minimum_impact == PutativeImpact.HIGH
    assert built.inheritance.max_freq_autosomal_dominant == 0.5


def test_build_config_rejects_unknown_impact(monkeypatch):
    monkeypatch.setenv("VARPRIO_SPLIT_MIN_IMPACT", "SEVERE")
    with pytest.raises(ValidationError, match="split_minimum_impact"):
        _build_config()
