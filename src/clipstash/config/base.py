# region Docstring
"""
clipstash.config.base

Environment detection and application root resolution.

Overview:
- Provides a utility class for detecting the current application environment
    (production, development, or test) and the directory that holds config
    files, the .env file, and logs.
- Exposes module-level constants for the resolved root and environment.

Contents:
- Classes:
    - AppEnv:
        Class methods to determine the current environment and the application
        root directory.

- Module-level Constants:
    - APP_ROOT (Path): The resolved application root directory.
    - APP_ENV (Literal["prod", "dev", "test"]): The detected environment.

Environment Detection Logic:
- CLIPSTASH_ENV selects the environment explicitly; anything else is "prod".
- CLIPSTASH_HOME selects the application root; otherwise ~/.clipstash is used.

Design Notes:
- Both values are resolved at import time so every settings class sees the same
    root and environment for the lifetime of the process.
"""
# endregion
# region Imports
import os
from pathlib import Path
from typing import Literal

# endregion
# region AppEnv Class


class AppEnv:
    """
    Application environment detection utility.

    Attributes:
        DEFAULT_ROOT (Path): Root used when CLIPSTASH_HOME is not set.
        PROD (Literal["prod"]): Constant representing the production environment.
        DEV (Literal["dev"]): Constant representing the development environment.
        TEST (Literal["test"]): Constant representing the test environment.
    """

    DEFAULT_ROOT: Path = Path.home() / ".clipstash"
    PROD: Literal["prod"] = "prod"
    DEV: Literal["dev"] = "dev"
    TEST: Literal["test"] = "test"

    @classmethod
    def environment(cls) -> Literal["prod", "dev", "test"]:
        """Determine the current application environment."""
        env = os.getenv("CLIPSTASH_ENV", "").strip().lower()
        if env in {cls.PROD, cls.DEV, cls.TEST}:
            return env  # type: ignore[return-value]
        return cls.PROD

    @classmethod
    def app_root(cls) -> Path:
        """Get the application root directory."""
        home = os.getenv("CLIPSTASH_HOME")
        if home:
            return Path(home).expanduser().resolve()
        return cls.DEFAULT_ROOT


# endregion
# region Module-level Constants

APP_ROOT: Path = AppEnv.app_root()
"""[Path] Root directory of the application (config, .env, logs)."""
APP_ENV: Literal["prod", "dev", "test"] = AppEnv.environment()
"""[Literal] Environment type."""
# endregion


__all__ = [
    "APP_ENV",
    "APP_ROOT",
    "AppEnv",
]
