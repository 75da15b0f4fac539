# SPDX-License-Identifier: MIT
"""Version parsing and ordering for semantic and package-manager versions.

Two representations are supported: strict semantic versions
(``MAJOR.MINOR.PATCH-PREREL+META``) and permissive generic versions with an
optional epoch, as used by distribution packages (``2:1.4.7rc1-3``).

Example:
    >>> from pkgversions import parse_semver, parse_version, compare
    >>>
    >>> parse_semver("1.0.0-alpha") < parse_semver("1.0.0-alpha.1")
    True
    >>> parse_version("1.1") > parse_version("1.1rc1")
    True
    >>> compare("2:1.0", "1.0")
    1
"""

__version__ = "0.1.0"

from .chunks import (
    Chunk,
    Digits,
    Text,
    VersionUnit,
    compare_units,
    units_equal,
    compare_chunks,
    compare_chunk_lists,
)
from .semver import (
    SemVer,
    SEMVER_IDENTITY,
    compare_semver,
    combine,
    combine_all,
)
from .version import (
    Version,
    compare_versions,
)
from .parse import (
    parse,
    parse_chunk,
    parse_semver,
    parse_version,
    is_valid_semver,
    is_valid_version,
    VersionError,
    InvalidVersionError,
    SEMVER_PATTERN,
    VERSION_PATTERN,
)
from .compare import (
    SCHEMES,
    compare,
    parse_with_scheme,
    resolve_scheme,
    version_key,
    sort_versions,
    latest,
)
from .config import (
    CLIConfig,
    ConfigError,
    load_config,
)

__all__ = [
    # Units and chunks
    "Chunk",
    "Digits",
    "Text",
    "VersionUnit",
    "compare_units",
    "units_equal",
    "compare_chunks",
    "compare_chunk_lists",
    # Semantic versions
    "SemVer",
    "SEMVER_IDENTITY",
    "compare_semver",
    "combine",
    "combine_all",
    # Generic versions
    "Version",
    "compare_versions",
    # Parsing
    "parse",
    "parse_chunk",
    "parse_semver",
    "parse_version",
    "is_valid_semver",
    "is_valid_version",
    "VersionError",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    "VERSION_PATTERN",
    # Comparison helpers
    "SCHEMES",
    "compare",
    "parse_with_scheme",
    "resolve_scheme",
    "version_key",
    "sort_versions",
    "latest",
    # Configuration
    "CLIConfig",
    "ConfigError",
    "load_config",
]
