import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import quickchar
sys.path.insert(0, str(Path(__file__).parent.parent))

from quickchar import UnicodeResolver
from quickchar.services import get_catalog


@pytest.fixture(scope="session")
def catalog():
    """Process-wide catalog, built once for the whole test run."""
    return get_catalog()


@pytest.fixture(scope="session")
def resolver(catalog):
    return UnicodeResolver(catalog=catalog)
