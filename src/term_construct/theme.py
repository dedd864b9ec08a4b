"""
UI theme: styles for router-written lines.
"""

from typing import Dict

THEME: Dict[str, str] = {
    "logo": "bold #00ccff",  # Cyan
    "title": "bold #ffffff",  # White
}
