"""
Shared test fixtures and sample data for igc-decode tests.

``SAMPLE_IGC_LINES`` is a small but complete IGC file exercising every
record kind, one unknown tag, and two malformed lines (17 and 18).
Line numbers in the comments are 1-based, as the reader reports them.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample IGC content -- edit here if the sample changes
# ---------------------------------------------------------------------------
SAMPLE_IGC_LINES = [
    "AXCSAAA Thermal Pro",                                 # 1
    "HFDTE230718",                                         # 2
    "HFPLTPILOTINCHARGE: Jane Doe",                        # 3
    "HFGTYGLIDERTYPE: LS8",                                # 4
    "I033638FXA3941ENL4246TAS",                            # 5
    "J010810HDT",                                          # 6
    "C230718092044000000000204Foo task",                   # 7
    "C5156040N00038120WLBZ-Leighton Buzzard NE",           # 8
    "C5209520N00006950WCambridge",                         # 9
    "B1101355206343N00006198WA005870055802004501234",      # 10
    "B1101455206259N00006295WA005930056401801001210",      # 11
    "E110145PEVpilot event",                               # 12
    "F110145040609",                                       # 13
    "K110145090",                                          # 14
    "LXCSsome comment",                                    # 15
    "ZUNKNOWN",                                            # 16
    "B11013X5206343N00006198WA0058700558",                 # 17 bad time
    "C23071809204400000000020",                            # 18 too short
    "GABCDEF0123",                                         # 19
]

SAMPLE_IGC_TEXT = "\r\n".join(SAMPLE_IGC_LINES) + "\r\n"

# Optional real flight for smoke tests; skipped when absent
INPUT_DIR = Path(__file__).resolve().parent.parent / "inputs"
REAL_IGC = INPUT_DIR / "sample_flight.igc"


@pytest.fixture
def sample_igc_path(tmp_path: Path) -> Path:
    """Write the sample IGC content to a temporary ``.igc`` file."""
    path = tmp_path / "sample.igc"
    path.write_bytes(SAMPLE_IGC_TEXT.encode("ascii"))
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against whole IGC files)",
    )
