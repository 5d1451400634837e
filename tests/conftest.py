# argonhash Test Configuration
# This file contains test settings and fixtures

import pytest
import sys
import os

# Add python-core and python-cli to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'python-core'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'python-cli'))

from argonhash import ArgonConfig


# Syntactically valid argon2id hash (salt and key are canonical base64).
SAMPLE_SALT_B64 = "dI54H+DNb1aVA4mnMkb8qA"
SAMPLE_KEY_B64 = "Kq26FzQd+ewxNfrPdq25v1vY8+MAx53MsUGgaKAZCTk"
SAMPLE_HASH = f"$argon2id$v=13$m=6528,t=1,p=2${SAMPLE_SALT_B64}${SAMPLE_KEY_B64}"


@pytest.fixture
def sample_hash():
    """A syntactically valid argon2id hash string."""
    return SAMPLE_HASH


@pytest.fixture
def fast_config():
    """Config with small costs so derivation runs quickly."""
    return ArgonConfig.default().set_memory(1024).set_parallelism(1)


@pytest.fixture
def fixed_salt():
    """Provide a fixed 16-byte salt."""
    return bytes(range(16))
