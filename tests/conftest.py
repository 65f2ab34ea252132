#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
from datetime import datetime, timezone

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from formcheck.validators import FileInfo


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def now() -> datetime:
    """Fixed reference instant, Monday 2026-06-15 12:00 UTC."""
    return datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def png_file():
    """Factory for FileInfo records with a PNG type."""

    def _create(size: int = 1024, type: str = "image/png") -> FileInfo:
        return FileInfo(name="image.png", size=size, type=type)

    return _create
