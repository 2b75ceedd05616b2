import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))

sys.path.append(ROOT)
sys.path.append(os.path.join(ROOT, "test"))
