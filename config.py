"""
Command Layout Configuration Module

Centralized configuration management for the command block layout tool.
Loads settings from environment variables with sensible defaults.

Usage:
    from config import config
    orientation = config.DEFAULT_ORIENTATION
    box_max = config.DEFAULT_MAX
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from cmdlayout.constants import DEFAULT_BOX_MIN, DEFAULT_BOX_SIZE, DEFAULT_ORIENTATION
from cmdlayout.coordinate import Coordinate, Orientation

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


class Config:
    """
    Configuration class for the layout tool.

    Attributes are loaded from environment variables with fallback defaults.
    """

    # =============================================================================
    # Placement Defaults
    # =============================================================================

    @property
    def DEFAULT_MIN(self) -> Coordinate:
        """Minimal corner of the bounding box (inclusive)"""
        return self._coordinate('DEFAULT_MIN', Coordinate.of(DEFAULT_BOX_MIN))

    @property
    def DEFAULT_MAX(self) -> Coordinate:
        """Maximal corner of the bounding box (exclusive)"""
        fallback = Coordinate.of(DEFAULT_BOX_MIN) + Coordinate.uniform(DEFAULT_BOX_SIZE)
        return self._coordinate('DEFAULT_MAX', fallback)

    @property
    def DEFAULT_ORIENTATION(self) -> Orientation:
        """Curve orientation, primary/secondary/tertiary (default: +x+z+y)"""
        value = os.getenv('DEFAULT_ORIENTATION', DEFAULT_ORIENTATION)
        try:
            return Orientation.parse(value)
        except ValueError:
            return Orientation.parse(DEFAULT_ORIENTATION)

    # =============================================================================
    # File Paths
    # =============================================================================

    @property
    def PROJECT_ROOT(self) -> Path:
        """Project root directory"""
        return Path(__file__).parent

    @property
    def EXPORT_DIR(self) -> Path:
        """Default directory for GLB previews"""
        return self._directory('EXPORT_DIR', 'exports')

    @property
    def SAVE_DIR(self) -> Path:
        """Default directory for JSON layouts"""
        return self._directory('SAVE_DIR', 'saves')

    # =============================================================================
    # Debug/Development
    # =============================================================================

    @property
    def DEBUG(self) -> bool:
        """Enable debug mode"""
        return os.getenv('DEBUG', 'False').lower() in ('true', '1', 'yes')

    @property
    def LOG_LEVEL(self) -> str:
        """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"""
        level = os.getenv('LOG_LEVEL', 'INFO').upper()
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        return level if level in valid_levels else 'INFO'

    @property
    def VERBOSE(self) -> bool:
        """Print every placed block in CLI summaries"""
        return os.getenv('VERBOSE', 'False').lower() in ('true', '1', 'yes')

    # =============================================================================
    # Helper Methods
    # =============================================================================

    def _coordinate(self, name: str, fallback: Coordinate) -> Coordinate:
        value = os.getenv(name)
        if not value:
            return fallback
        try:
            return Coordinate.parse(value)
        except ValueError:
            return fallback

    def _directory(self, name: str, default: str) -> Path:
        directory = Path(os.getenv(name, default))
        if not directory.is_absolute():
            directory = self.PROJECT_ROOT / directory
        return directory

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of warnings/errors.

        Returns:
            List of warning/error messages (empty if all OK)
        """
        issues = []

        for name in ('DEFAULT_MIN', 'DEFAULT_MAX'):
            value = os.getenv(name)
            if value:
                try:
                    Coordinate.parse(value)
                except ValueError:
                    issues.append(f"{name} is not a coordinate: {value!r}")

        value = os.getenv('DEFAULT_ORIENTATION')
        if value:
            try:
                Orientation.parse(value)
            except ValueError as e:
                issues.append(f"DEFAULT_ORIENTATION is invalid: {e}")

        low, high = self.DEFAULT_MIN, self.DEFAULT_MAX
        if low.x >= high.x or low.y >= high.y or low.z >= high.z:
            issues.append(f"Default bounding box is empty: {low} .. {high}")

        return issues

    def get_summary(self) -> str:
        """
        Get human-readable configuration summary.

        Returns:
            Formatted configuration summary string
        """
        lines = [
            "Command Layout Configuration:",
            f"  Project Root: {self.PROJECT_ROOT}",
            f"  Export Dir: {self.EXPORT_DIR}",
            f"  Save Dir: {self.SAVE_DIR}",
            "",
            "Defaults:",
            f"  Bounding Box: {self.DEFAULT_MIN} .. {self.DEFAULT_MAX}",
            f"  Orientation: {self.DEFAULT_ORIENTATION}",
            "",
            "Debug:",
            f"  Debug mode: {self.DEBUG}",
            f"  Log level: {self.LOG_LEVEL}",
            f"  Verbose: {self.VERBOSE}",
        ]
        return "\n".join(lines)


# Global config instance
config = Config()


if __name__ == "__main__":
    # Allow running as script to check configuration
    print(config.get_summary())
    print()

    issues = config.validate()
    if issues:
        print("Issues found:")
        for issue in issues:
            print(f"   - {issue}")
    else:
        print("Configuration valid!")
