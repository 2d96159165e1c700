"""Open a directory in the platform file browser."""
import subprocess
import sys
from pathlib import Path
from typing import List

from modprep.core.logger import get_logger

logger = get_logger(__name__)


def browser_command(path: Path, platform: str = sys.platform) -> List[str]:
    if platform.startswith("win"):
        return ["explorer", str(path)]
    if platform == "darwin":
        return ["open", str(path)]
    return ["xdg-open", str(path)]


def open_in_file_browser(path: Path) -> bool:
    """Launch the file browser on ``path`` without waiting for it.

    Returns:
        True if the browser process was started
    """
    cmd = browser_command(path)
    try:
        subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError as e:
        logger.debug(f"Could not open {path} with {cmd[0]}: {e}")
        return False
    return True
