from pathlib import Path

import pytest

from pielayout.io import load_menu

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def demo_menu_path():
    return ROOT / "examples" / "demo_menu.json"


@pytest.fixture
def demo_menu(demo_menu_path):
    return load_menu(demo_menu_path)
