"""Shared page fragments."""
import html
import streamlit as st


def render_header(title: str, subtitle: str, color_from: str, color_to: str) -> None:
    """Gradient banner at the top of every tab."""
    st.markdown(f"""
    <div style="
        background: linear-gradient(135deg, {color_from} 0%, {color_to} 100%);
        padding: 20px;
        border-radius: 16px;
        margin-bottom: 20px;
        box-shadow: 0 8px 24px rgba(0,0,0,0.12);
    ">
        <h1 style="color: white; margin: 0; font-size: 28px; font-weight: 600;">{html.escape(title)}</h1>
        <p style="color: rgba(255,255,255,0.9); margin: 4px 0 0 0; font-size: 14px;">{html.escape(subtitle)}</p>
    </div>
    """, unsafe_allow_html=True)


def render_card(label: str, value: str, subtitle: str = "", color: str = "#667eea") -> None:
    """Summary card with a coloured left border."""
    subtitle_html = (
        f'<div style="font-size: 12px; color: {color}; margin-top: 2px;">{html.escape(subtitle)}</div>'
        if subtitle else ""
    )
    st.markdown(f"""
    <div style="
        padding: 12px 16px;
        border-radius: 12px;
        margin-bottom: 12px;
        box-shadow: 0 2px 8px rgba(0,0,0,0.06);
        border-left: 4px solid {color};
    ">
        <div style="font-size: 13px; opacity: 0.7;">{html.escape(label)}</div>
        <div style="font-size: 22px; font-weight: 700;">{html.escape(value)}</div>
        {subtitle_html}
    </div>
    """, unsafe_allow_html=True)


def render_section_title(title: str) -> None:
    st.markdown(f"""
    <h3 style="margin-top: 24px; margin-bottom: 12px; font-size: 20px; font-weight: 600;">{html.escape(title)}</h3>
    """, unsafe_allow_html=True)
