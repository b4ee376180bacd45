"""Bottom navigation and theme styling."""
import streamlit as st
from utils.constants import TABS

_BASE_CSS = """
<style>
main .block-container {
  padding-top: 16px;
  padding-bottom: 96px;
  max-width: 520px;
}
#MainMenu, footer, header { visibility: hidden; }

.et-nav {
  position: fixed;
  left: 0;
  right: 0;
  bottom: 0;
  z-index: 9999;
  padding: 10px 14px calc(10px + env(safe-area-inset-bottom, 0px));
  background: var(--et-nav-bg, rgba(255,255,255,0.97));
  backdrop-filter: blur(16px);
  border-top: 1px solid rgba(102,126,234,0.25);
  box-shadow: 0 -4px 20px rgba(0,0,0,0.08);
}
.et-nav .inner {
  max-width: 520px;
  margin: 0 auto;
  display: grid;
  grid-template-columns: repeat(5, 1fr);
  align-items: end;
  gap: 8px;
}
a.et-tab, a.et-tab:visited, a.et-tab:hover, a.et-tab:active {
  display: flex;
  flex-direction: column;
  align-items: center;
  padding: 6px 4px;
  border-radius: 12px;
  text-decoration: none !important;
  color: var(--et-nav-fg, rgba(0,0,0,0.5));
  font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial;
}
.et-tab .icon { font-size: 18px; line-height: 18px; }
.et-tab .label { margin-top: 4px; font-size: 11px; line-height: 12px; }
.et-tab.active {
  color: #2563eb;
  font-weight: 600;
  background: rgba(102,126,234,0.12);
}
.et-tab-add { transform: translateY(-14px); }
.et-tab-add .pill {
  width: 52px;
  height: 52px;
  border-radius: 26px;
  display: grid;
  place-items: center;
  color: white;
  font-size: 28px;
  line-height: 28px;
  background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
  box-shadow: 0 10px 24px rgba(102,126,234,0.4);
}
.et-tab-add.active .pill { background: linear-gradient(135deg, #2563eb 0%, #667eea 100%); }
</style>
"""

# "system" leaves Streamlit's own light/dark detection alone.
_THEME_CSS = {
    "light": """
<style>
:root { --et-nav-bg: rgba(255,255,255,0.97); --et-nav-fg: rgba(0,0,0,0.5); }
.stApp { background-color: #ffffff; color: #1f2937; }
</style>
""",
    "dark": """
<style>
:root { --et-nav-bg: rgba(17,24,39,0.97); --et-nav-fg: rgba(255,255,255,0.6); }
.stApp { background-color: #0f172a; color: #e5e7eb; }
.stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label, .stApp span { color: #e5e7eb; }
</style>
""",
}


def apply_theme(mode: str) -> None:
    """Inject colour overrides for an explicitly chosen theme."""
    css = _THEME_CSS.get(mode)
    if css:
        st.markdown(css, unsafe_allow_html=True)


def render_bottom_nav(active: str) -> None:
    """Render fixed bottom navigation bar."""
    st.markdown(_BASE_CSS, unsafe_allow_html=True)

    items_html = []
    for tab_id, label, icon in TABS:
        state = "active" if tab_id == active else ""
        href = f"?tab={tab_id}"
        if tab_id == "add":
            items_html.append(
                f'<a class="et-tab et-tab-add {state}" href="{href}" target="_self"><div class="pill">{icon}</div></a>'
            )
        else:
            items_html.append(
                f'<a class="et-tab {state}" href="{href}" target="_self">'
                f'<div class="icon">{icon}</div><div class="label">{label}</div></a>'
            )

    st.markdown(
        '<div class="et-nav"><div class="inner">{items}</div></div>'.format(items="".join(items_html)),
        unsafe_allow_html=True,
    )
