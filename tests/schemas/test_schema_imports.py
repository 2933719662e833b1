"""Document models must import and register without a database."""

import subprocess
import sys
from pathlib import Path

from app.schemas import DOCUMENT_MODELS, BloodDonor, BloodGroup

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def test_schemas_import_in_fresh_interpreter():
    result = subprocess.run(
        [sys.executable, "-c", "import app.schemas"],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr


def test_blood_group_keeps_enum_type():
    assert BloodDonor in DOCUMENT_MODELS
    assert BloodDonor.model_fields["blood_group"].annotation is BloodGroup
