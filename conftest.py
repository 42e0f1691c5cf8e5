import sys
from pathlib import Path

# Make `couponlegs` importable from a source checkout without installing it.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
