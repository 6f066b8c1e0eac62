# tests/conftest.py
import os
import sys

import numpy as np
import pytest

# cli.py y gradio_app.py viven en la raíz del proyecto
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../"))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from cvmatch.vocabulary import default_vocabulary  # noqa: E402

SAMPLE_JOB = "Looking for a Python and Docker engineer with SQL skills"
SAMPLE_CV = "John Smith john@x.com +1-555-123-4567 ... python, docker, mysql experience"


@pytest.fixture
def vocabulary():
    return default_vocabulary()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def sample_job():
    return SAMPLE_JOB


@pytest.fixture
def sample_cv():
    return SAMPLE_CV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Aísla los tests de variables CVMATCH_* del entorno."""
    for key in list(os.environ):
        if key.startswith("CVMATCH_"):
            monkeypatch.delenv(key, raising=False)
