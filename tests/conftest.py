import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Add the project root to sys.path so the top-level modules import without installing
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from config import LoadPolicy  # noqa: E402
from data_loader import InsufficientDataError, ingest  # noqa: E402


KENYA_LINES = ["Kenya,5000,200.0", "Kenya,100,10.0", "Kenya,50000,2000.0"]


# Common test fixtures
@pytest.fixture
def lenient_policy():
    """Default ranges with no minimum record quota."""
    return LoadPolicy(min_records=0)


@pytest.fixture
def kenya_index():
    """Index holding the three Kenya parcels; the load itself fails the 2000-record quota."""
    records = [
        ("Kenya", 5000, Decimal("200.0")),
        ("Kenya", 100, Decimal("10.0")),
        ("Kenya", 50000, Decimal("2000.0")),
    ]
    with pytest.raises(InsufficientDataError) as excinfo:
        ingest(records)
    return excinfo.value.index


@pytest.fixture
def courier_file(tmp_path: Path):
    """Write courier lines to a temp file and return its path."""
    def _write(lines, name="courier.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write
