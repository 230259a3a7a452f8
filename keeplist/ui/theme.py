"""
Keeplist Theme - Centralized color palette.

Color Philosophy:
- Cyan is the accent for navigation and actions
- Gold marks favourites
- Text uses tinted grays for hierarchy
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
CYAN_PRIMARY = "#48b0f7"       # Main accent, icons, highlights
TEAL_PRIMARY = "#4ECDC4"       # Success
GOLD_PRIMARY = "#F2C14E"       # Favourites
RED_PRIMARY = "#FF6B6B"        # Errors, delete

# =============================================================================
# TEXT COLORS (Tinted grays for hierarchy)
# =============================================================================
TEXT_BRIGHT = "#AFC5D6"
TEXT_MEDIUM = "#6E879B"
TEXT_MUTED = "#8A9BA8"

# =============================================================================
# BACKGROUND & BORDER COLORS
# =============================================================================
BG_NAV = "#0a0d1f"
BG_CARD = "rgba(255,255,255,0.025)"
BORDER_DIVIDER = "rgba(255,255,255,0.12)"

# =============================================================================
# SEMANTIC UI TOKENS
# =============================================================================
TEXT_TITLE = TEXT_BRIGHT
TEXT_SUBTITLE = TEXT_MEDIUM
TEXT_PLACEHOLDER = TEXT_MUTED

FAVORITE_ICON_ACTIVE = GOLD_PRIMARY
FAVORITE_ICON_INACTIVE = TEXT_MUTED
BUTTON_ICON_ACTIVE = CYAN_PRIMARY
DELETE_ICON = RED_PRIMARY


def get_favorite_color(is_favorite: bool) -> str:
    """Icon color for a film's favourite toggle."""
    return FAVORITE_ICON_ACTIVE if is_favorite else FAVORITE_ICON_INACTIVE
