"""
Shared Rich console instances with the Guidebook theme.
"""

from rich.console import Console
from rich.theme import Theme

GUIDEBOOK_THEME = Theme({
    "brand": "#2E8B57",           # Sea green - headers, branding
    "success": "#3CB371",
    "warning": "yellow",
    "info": "white",
    "category": "#66CDAA",        # Aquamarine - category names
    "guideline": "#8FBC8F",       # Guideline IDs
    "title": "bold",
    "muted": "dim",
})

# Brand border style for panels and rules
BRAND_BORDER = "#2E8B57"

# Shared console instances
console = Console(theme=GUIDEBOOK_THEME)
err_console = Console(theme=GUIDEBOOK_THEME, stderr=True)
