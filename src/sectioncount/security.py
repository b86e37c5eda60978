"""Security utilities: sensitive file filtering and path validation for file inputs."""

import fnmatch
import logging
from pathlib import Path
from typing import Optional

from . import config

logger = logging.getLogger(__name__)

# Files that should never be read through a tool
SKIP_FILES = {
    '.env',
    '.env.local',
    '.env.production',
    '.env.staging',
    '.env.development',
    'credentials.json',
    'secrets.yaml',
    'secrets.yml',
    'service-account.json',
    '.npmrc',
    '.pypirc',
    '.netrc',
}

# Glob patterns for sensitive files
SENSITIVE_PATTERNS = [
    '*.pem',
    '*.key',
    '*.p12',
    '*.pfx',
    '*.jks',
    '*.keystore',
    'id_rsa*',
    'id_ed25519*',
]


class UnsafePathError(Exception):
    """Raised when a requested input file may not be read."""


def is_sensitive_filename(filename: str) -> bool:
    """Check if a filename matches known sensitive file patterns."""
    basename = Path(filename).name
    if basename.lower() in {s.lower() for s in SKIP_FILES}:
        return True
    for pattern in SENSITIVE_PATTERNS:
        if fnmatch.fnmatch(basename, pattern):
            return True
    return False


def validate_path_traversal(resolved_path: Path, base_path: Path) -> bool:
    """Check that a resolved path is within the base directory (no traversal/symlink escape)."""
    try:
        resolved_path.relative_to(base_path)
        return True
    except ValueError:
        return False


def resolve_input_path(path: str, base_dir: Optional[Path] = None) -> Path:
    """
    Resolve a user-supplied document path, refusing anything unsafe.

    ``base_dir`` defaults to SECTIONCOUNT_BASE_DIR; relative paths are
    taken relative to it when set.
    """
    if base_dir is None:
        base_dir = config.get_base_dir()

    candidate = Path(path).expanduser()
    if base_dir is not None and not candidate.is_absolute():
        candidate = base_dir / candidate
    resolved = candidate.resolve()

    if is_sensitive_filename(resolved.name):
        logger.info("Refusing sensitive file: %s", resolved)
        raise UnsafePathError(f"Refusing to read sensitive file: {path}")

    if base_dir is not None and not validate_path_traversal(resolved, base_dir):
        logger.warning("Path escapes base directory: %s -> %s", path, resolved)
        raise UnsafePathError(f"Path is outside the allowed directory: {path}")

    return resolved
