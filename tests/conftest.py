from pathlib import Path
from typing import Any, Dict, List

import pytest
import yaml


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def scenarios(fixtures_dir: Path) -> Dict[str, List[Dict[str, Any]]]:
    with (fixtures_dir / "scenarios.yml").open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)
