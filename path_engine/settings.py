# path_engine/settings.py
import os
from dotenv import load_dotenv

from path_engine.core.constants import DEFAULT_MAX_VERTICES

# Load environment variables from .env file
load_dotenv()

# Engine limits
MAX_VERTICES = int(os.getenv('PATH_ENGINE_MAX_VERTICES', str(DEFAULT_MAX_VERTICES)))
if MAX_VERTICES < 1:
    raise ValueError("PATH_ENGINE_MAX_VERTICES must be a positive integer.")

# Input parsing: coerce malformed cells to "no edge" unless strict
STRICT_WEIGHTS = os.getenv('PATH_ENGINE_STRICT_WEIGHTS', 'False') == 'True'

# Presentation
ONE_BASED_LABELS = os.getenv('PATH_ENGINE_ONE_BASED_LABELS', 'True') == 'True'
LOG_LEVEL = os.getenv('PATH_ENGINE_LOG_LEVEL', 'INFO')
