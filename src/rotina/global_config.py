"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared anchors and cross-cutting constants that many modules can import.
"""

from pathlib import Path

# Core roots
PACKAGE_ROOT: Path = Path(__file__).resolve().parent
# From src/rotina/global_config.py, go up two levels: src/rotina -> src -> repo root
PROJECT_ROOT: Path = PACKAGE_ROOT.parent.parent

# Core Names
PROJECT_NAME = "rotina"
PACKAGE_NAME = "rotina"


# Locale used for every human-readable rendering
DEFAULT_LOCALE = "pt_BR"

# Relative labels shown instead of a formatted date
TODAY_LABEL = "Hoje"
YESTERDAY_LABEL = "Ontem"

# CLDR patterns (Babel syntax)
# "segunda-feira, 15 de jan."
DATE_LABEL_FORMAT = "EEEE, dd 'de' MMM"
# "15/01"
DATE_SHORT_FORMAT = "dd/MM"
# "seg., 15/01"
DATE_LONG_FORMAT = "EEE, dd/MM"
# "14:30"
TIME_FORMAT = "HH:mm"

# Day arithmetic
MS_PER_DAY = 86_400_000
MAX_STREAK_DAYS = 365

# Logging
LOG_LEVEL_ENV = "ROTINA_LOG_LEVEL"
