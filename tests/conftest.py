import pytest

from profiles import PROFILES, enhanced_profile, legacy_profile
from spam_detector import SpamDetector


@pytest.fixture
def enhanced_config():
    return enhanced_profile()


@pytest.fixture
def legacy_config():
    return legacy_profile()


@pytest.fixture
def enhanced_detector(enhanced_config):
    return SpamDetector(enhanced_config)


@pytest.fixture(params=sorted(PROFILES))
def detector(request):
    """Runs a test once per built-in profile."""
    return SpamDetector(PROFILES[request.param]())
