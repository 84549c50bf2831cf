"""
pytest configuration file (conftest.py)

Ensures the project root is on the Python path so tests can import
the top-level modules (config, game_session, ...) without installing.
"""
import sys
from pathlib import Path

# Get the project root (where this conftest.py is located)
project_root = Path(__file__).parent

# Add the project root to Python path if not already there
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
