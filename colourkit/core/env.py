"""Environment variable loading and settings for colourkit.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Walking stops at .git so we never load a .env from outside the repo.
Only sets variables that are NOT already in os.environ.

Recognised settings:
  COLOURKIT_PRECISION     decimals in report output (default 4)
  COLOURKIT_MIN_DISTANCE  default for --min-distance (default unset)
  COLOURKIT_JSON          1/true/yes to default to JSON output
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off', ''}


@dataclass
class Settings:
    precision: int = 4
    min_distance: float | None = None
    json: bool = False


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    parsed = _parse_dotenv(path)
    for key, value in parsed.items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def read_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from COLOURKIT_* variables. Raises ValueError on bad values."""
    env = os.environ if environ is None else environ
    settings = Settings()

    raw = env.get('COLOURKIT_PRECISION')
    if raw is not None and raw.strip():
        try:
            settings.precision = int(raw)
        except ValueError:
            raise ValueError(f'COLOURKIT_PRECISION must be an integer, got {raw!r}') from None
        if settings.precision < 0:
            raise ValueError(f'COLOURKIT_PRECISION must be >= 0, got {raw!r}')

    raw = env.get('COLOURKIT_MIN_DISTANCE')
    if raw is not None and raw.strip():
        try:
            settings.min_distance = float(raw)
        except ValueError:
            raise ValueError(f'COLOURKIT_MIN_DISTANCE must be a number, got {raw!r}') from None

    raw = env.get('COLOURKIT_JSON')
    if raw is not None:
        flag = raw.strip().lower()
        if flag in _TRUE:
            settings.json = True
        elif flag not in _FALSE:
            raise ValueError(f'COLOURKIT_JSON must be a boolean, got {raw!r}')

    return settings
