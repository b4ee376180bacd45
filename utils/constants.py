"""Application constants."""

CURRENCY = "GNF"

THEME_MODES = ("light", "dark", "system")

THEME_LABELS = {
    "light": "Light",
    "dark": "Dark",
    "system": "System",
}

TABS = [
    ("home", "Home", "⌂"),
    ("reports", "Reports", "◔"),
    ("add", "", "+"),
    ("budget", "Budget", "◎"),
    ("settings", "Settings", "⚙"),
]

WEEKDAY_ABBREVIATIONS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
