import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcomx7.config import GXConfig  # noqa: E402
from gedcomx7.core.context import ConversionContext  # noqa: E402
from gedcomx7.gedcomx.index import SourceGraph  # noqa: E402
from gedcomx7.logging import get_logger  # noqa: E402

DATA_DIR = Path(__file__).resolve().parent / "data"


def make_ctx(data=None, messages=None, **config):
    """A fresh ConversionContext over ``data`` with an in-memory config."""
    return ConversionContext(
        config=GXConfig(config),
        logger=get_logger("tests"),
        graph=SourceGraph(data or {}),
        reporter=messages.append if messages is not None else None,
    )


@pytest.fixture
def messages():
    return []


@pytest.fixture
def ctx(messages):
    return make_ctx(messages=messages)


@pytest.fixture
def data_dir():
    return DATA_DIR
