"""Environment variable loading and settings for css-colours.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read from the environment:
  CSS_COLOURS_FORMAT       text (default) or json
  CSS_COLOURS_SWATCH_SIZE  swatch edge length in pixels (default 64)
"""

import os
from pathlib import Path

FORMAT_VAR = 'CSS_COLOURS_FORMAT'
SWATCH_SIZE_VAR = 'CSS_COLOURS_SWATCH_SIZE'

DEFAULT_FORMAT = 'text'
DEFAULT_SWATCH_SIZE = 64


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
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
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
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

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def output_format() -> str:
    """Default output format: 'text' or 'json'. Unknown values fall back to text."""
    value = os.environ.get(FORMAT_VAR, DEFAULT_FORMAT).strip().lower()
    return value if value in ('text', 'json') else DEFAULT_FORMAT


def parse_size(text: str) -> int:
    """A pixel length of at least 1. Raises ValueError otherwise."""
    try:
        size = int(text)
    except ValueError:
        raise ValueError(f'invalid size: {text!r}') from None
    if size <= 0:
        raise ValueError(f'size must be positive, got {size}')
    return size


def swatch_size() -> int:
    """Default swatch edge length. Raises ValueError for a non-positive or non-integer value."""
    raw = os.environ.get(SWATCH_SIZE_VAR)
    if not raw:
        return DEFAULT_SWATCH_SIZE
    try:
        return parse_size(raw)
    except ValueError as exc:
        raise ValueError(f'{SWATCH_SIZE_VAR}: {exc}') from None
