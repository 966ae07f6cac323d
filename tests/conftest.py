import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import namesort
sys.path.insert(0, str(Path(__file__).parent.parent))

from namesort import NameSorter


@pytest.fixture(scope="session")
def sorter():
    return NameSorter()
