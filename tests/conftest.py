import sys
import os

# Add converter/ to path so tests can import converter modules directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "converter"))

# Add scripts/ to path so tests can import script modules directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "scripts"))
