"""Configuration for colour-scheme: .env loading and Settings.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  COLOUR_SCHEME_SEED    integer seed for random base colours and mix palettes
  COLOUR_SCHEME_FORMAT  'hex' (default) or 'rgb'
  COLOUR_SCHEME_NAMES   path to a JSON named-colour dataset for `lookup`
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

OUTPUT_FORMATS = ('hex', 'rgb')


def find_env_file(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a repository root."""
    for folder in (start.resolve(), *start.resolve().parents):
        candidate = folder / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (folder / '.git').exists():
            return None
    return None


def read_env_file(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Accepts `export KEY=value` and quoted values."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, sep, value = line.partition('=')
        key = key.strip()
        if not sep or not key:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
            value = value[1:-1]
        values[key] = value
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the file that was read, or None.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_env_file(Path.cwd())
        if path is None:
            return None

    for key, value in read_env_file(path).items():
        os.environ.setdefault(key, value)
    return path


@dataclass(frozen=True)
class Settings:
    seed: int | None = None
    output: str = 'hex'
    names_file: str | None = None

    @property
    def to_hex(self) -> bool:
        return self.output == 'hex'

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'Settings':
        env = os.environ if environ is None else environ

        seed_text = env.get('COLOUR_SCHEME_SEED', '').strip()
        try:
            seed = int(seed_text) if seed_text else None
        except ValueError as exc:
            raise ValueError(f'COLOUR_SCHEME_SEED must be an integer, got {seed_text!r}') from exc

        output = env.get('COLOUR_SCHEME_FORMAT', 'hex').strip().lower() or 'hex'
        if output not in OUTPUT_FORMATS:
            raise ValueError(f'COLOUR_SCHEME_FORMAT must be one of {", ".join(OUTPUT_FORMATS)}, got {output!r}')

        names_file = env.get('COLOUR_SCHEME_NAMES', '').strip() or None
        return cls(seed=seed, output=output, names_file=names_file)
