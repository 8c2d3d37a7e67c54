"""Shared fixtures for the test suite."""

import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.kyc.engine import KycEngine
from app.main import app, load_seed_data
from app.models import CustomerRiskProfile, FeatureFlags, KycInputV1, KycInputV2
from app.storage.flags import FeatureFlagStore
from app.storage.memory import MemoryStore


@pytest.fixture
def flags():
    return FeatureFlagStore()


@pytest.fixture
def engine(flags):
    return KycEngine(flags)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def seeded_store():
    s = MemoryStore()
    load_seed_data(s, get_settings().data_dir)
    return s


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def make_profile(risk_score=30, country="US", **extra) -> CustomerRiskProfile:
    return CustomerRiskProfile(risk_score=risk_score, country=country, **extra)


def make_v1(risk_score=30, country="US", amount=None) -> KycInputV1:
    return KycInputV1(risk_score=risk_score, country=country, amount=amount)


def make_v2(risk_score=30, country="US", **extra) -> KycInputV2:
    return KycInputV2(risk_score=risk_score, country=country, **extra)


def make_flags(version="v1") -> FeatureFlagStore:
    return FeatureFlagStore(FeatureFlags(kyc_version=version))
