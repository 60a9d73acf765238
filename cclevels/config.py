"""
cclevels Configuration

Parser for the cclevels.ini configuration file used by the command line tool.

INI Format:
    [cclevels]
    default_type = ms          ; ms, lynx, pg or lynxpg
    default_level_count = 1
    log_path = cclevels.log
"""

import configparser
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .constants import MAGIC_NAMES, LevelsetMagic

SECTION = 'cclevels'


@dataclass
class CodecConfig:
    """Settings for the command line tool"""
    default_type: str = 'ms'  # Ruleset for new levelsets
    default_level_count: int = 1  # Levels in a new levelset
    log_path: Optional[str] = None  # None: cclevels.log in the working directory
    # Problems found while loading, for the caller to report once logging is up
    warnings: List[str] = field(default_factory=list, compare=False, repr=False)

    def __post_init__(self):
        """Validate configuration"""
        self.default_type = self.default_type.lower()
        if self.default_type not in MAGIC_NAMES:
            raise ValueError(
                f"Unknown levelset type '{self.default_type}' "
                f"(expected one of {', '.join(MAGIC_NAMES)})")

        if self.default_level_count < 0:
            raise ValueError(f"default_level_count must not be negative ({self.default_level_count})")

    @property
    def default_magic(self) -> LevelsetMagic:
        return MAGIC_NAMES[self.default_type]


def load_config(config_path: Union[str, Path, None] = None) -> CodecConfig:
    """
    Load configuration from an INI file.

    Missing files and missing keys fall back to the defaults. A missing file
    or section is noted in `CodecConfig.warnings` rather than logged, so
    loading never starts the log file by itself.

    Args:
        config_path: Path to the INI file

    Returns:
        CodecConfig instance

    Raises:
        ValueError: if a value is present but invalid
    """
    if config_path is None:
        return CodecConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        return CodecConfig(warnings=[f"Config file not found: {config_path}, using defaults"])

    parser = configparser.ConfigParser(inline_comment_prefixes=(';', '#'))
    parser.read(config_path)

    if not parser.has_section(SECTION):
        return CodecConfig(warnings=[f"No [{SECTION}] section in {config_path}, using defaults"])

    section = parser[SECTION]
    defaults = CodecConfig()
    try:
        level_count = section.getint('default_level_count', fallback=defaults.default_level_count)
    except ValueError:
        raise ValueError(
            f"default_level_count in {config_path} is not an integer: "
            f"{section.get('default_level_count')}") from None

    return CodecConfig(
        default_type=section.get('default_type', fallback=defaults.default_type),
        default_level_count=level_count,
        log_path=section.get('log_path', fallback=defaults.log_path),
    )
