"""
Konfiguracja testów De Schatkamer.
Wartości z .env (lub zmiennych środowiskowych), z domyślnymi dla środowiska TST.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


BASE_URL: str = os.getenv("SCHATKAMER_BASE_URL", "https://schatkamer-tst.beeldengeluid.nl/")
if not BASE_URL.startswith(("http://", "https://")):
    raise RuntimeError(f"SCHATKAMER_BASE_URL musi zaczynać się od http(s)://, jest: {BASE_URL!r}")

# Ścieżki encji są doklejane do BASE_URL, więc zawsze z końcowym '/'
if not BASE_URL.endswith("/"):
    BASE_URL += "/"

ENV_NAME: str = os.getenv("SCHATKAMER_ENV_NAME", "tst")

# Przeglądarka
HEADLESS: bool = env_flag("HEADLESS", "true")
SLOW_MO: int = int(os.getenv("SLOW_MO", "0"))
VIEWPORT: str = os.getenv("VIEWPORT", "desktop")

# Timeouty (ms), domyślne Playwrighta chyba że nadpisane
DEFAULT_TIMEOUT: int = int(os.getenv("DEFAULT_TIMEOUT", "30000"))
NAVIGATION_TIMEOUT: int = int(os.getenv("NAVIGATION_TIMEOUT", "60000"))

# Dodatkowy czas na doładowanie elementów JS po domcontentloaded
SETTLE_MS: int = int(os.getenv("SETTLE_MS", "1000"))

# Testy na żywej stronie domyślnie wyłączone, włącza je --live albo SCHATKAMER_LIVE=1
LIVE: bool = env_flag("SCHATKAMER_LIVE")

ARTIFACTS_DIR = Path(os.getenv("ARTIFACTS_DIR", "artifacts"))
LOGS_DIR = Path(os.getenv("LOGS_DIR", "logs"))

VIEWPORTS: dict[str, dict[str, int]] = {
    'desktop': {'width': 1280, 'height': 720},
    'tablet':  {'width': 768,  'height': 1024},
    'mobile':  {'width': 375,  'height': 667},
    'reflow':  {'width': 320,  'height': 568},
}

if VIEWPORT not in VIEWPORTS:
    raise RuntimeError(f"Nieznany VIEWPORT: {VIEWPORT!r} (dostępne: {', '.join(VIEWPORTS)})")
