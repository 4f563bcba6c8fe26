import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    """
    Configuration class for the journey planner.
    This class loads configuration values from environment variables or uses default values.
    """
    # General configuration
    DEBUG = os.environ.get('DEBUG', 'False') == 'True'

    # Timezone used to work out "now" when a query has no requested time
    TIMEZONE = os.environ.get('TIMEZONE', 'Europe/Madrid')

    # Result caps
    MAX_RESULTS = int(os.environ.get('MAX_RESULTS', 5))
    MAX_TRANSFER_RESULTS = int(os.environ.get('MAX_TRANSFER_RESULTS', 3))
    MAX_TRANSFER_CANDIDATES = int(os.environ.get('MAX_TRANSFER_CANDIDATES', 10))

    # Transfer rules
    TRANSFER_RADIUS_KM = float(os.environ.get('TRANSFER_RADIUS_KM', 10.0))
    MIN_TRANSFER_MINUTES = int(os.environ.get('MIN_TRANSFER_MINUTES', 10))
    MAX_TRANSFER_MINUTES = int(os.environ.get('MAX_TRANSFER_MINUTES', 60))
    TRANSFER_ALLOWANCE_MINUTES = int(os.environ.get('TRANSFER_ALLOWANCE_MINUTES', 10))

    # Thread pool size for the per-candidate searches; 1 runs them inline
    TRANSFER_WORKERS = int(os.environ.get('TRANSFER_WORKERS', 1))

    SCHEDULE_PATH = os.environ.get('SCHEDULE_PATH', 'schedule.json')
