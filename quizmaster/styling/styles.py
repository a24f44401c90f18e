"""Centralized styles for the web page and the desktop window."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate stylesheets based on the current theme."""

    @staticmethod
    def get_page_stylesheet(theme: Theme = Theme.DARK) -> str:
        return f"""
      :root {{
        --text: {ColorPalette.TEXT_PRIMARY.get(theme)};
        --text-muted: {ColorPalette.TEXT_SECONDARY.get(theme)};
        --bg: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
        --card: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
        --raised: {ColorPalette.BACKGROUND_TERTIARY.get(theme)};
        --accent: {ColorPalette.ACCENT_PRIMARY.get(theme)};
        --success: {ColorPalette.SUCCESS.get(theme)};
        --error: {ColorPalette.ERROR.get(theme)};
        --border: {ColorPalette.BORDER_PRIMARY.get(theme)};
        font-family: 'Inter', system-ui, sans-serif;
        background: var(--bg);
        color: var(--text);
      }}
      body {{ margin: 0; min-height: 100vh; display: flex; flex-direction: column; }}
      header, footer {{ padding: 1rem 1.5rem; border-color: var(--border); }}
      header {{ display: flex; justify-content: space-between; align-items: center; border-bottom: 1px solid var(--border); }}
      footer {{ border-top: 1px solid var(--border); color: var(--text-muted); font-size: 0.85rem; text-align: center; }}
      main {{ flex: 1; width: 100%; max-width: 48rem; margin: 0 auto; padding: 2rem 1rem; box-sizing: border-box; }}
      .card {{ background: var(--card); border: 1px solid var(--border); border-radius: 0.75rem; padding: 1.5rem; margin-bottom: 1rem; }}
      .hidden {{ display: none !important; }}
      .muted {{ color: var(--text-muted); }}
      .brand {{ font-weight: 700; font-size: 1.2rem; background: none; border: none; color: var(--text); cursor: pointer; }}
      .primary-button {{ border: none; border-radius: 0.75rem; padding: 0.85rem 1.5rem; font-size: 1rem; background: var(--accent); color: #fff; cursor: pointer; }}
      .primary-button:disabled {{ opacity: 0.5; cursor: not-allowed; }}
      .secondary-button {{ border: 1px solid var(--border); border-radius: 0.75rem; padding: 0.6rem 1.2rem; background: var(--raised); color: var(--text); cursor: pointer; }}
      .chip {{ border: 1px solid var(--border); border-radius: 999px; padding: 0.35rem 0.9rem; background: transparent; color: var(--text-muted); cursor: pointer; margin: 0.2rem; }}
      .chip.active {{ background: var(--accent); color: #fff; border-color: var(--accent); }}
      input[type=text] {{ width: 100%; box-sizing: border-box; padding: 0.75rem; border-radius: 0.5rem; border: 1px solid var(--border); background: var(--bg); color: var(--text); font-size: 1rem; }}
      .option-button {{ display: block; width: 100%; text-align: left; border: 2px solid var(--border); border-radius: 0.75rem; padding: 1rem; margin: 0.5rem 0; background: var(--bg); color: var(--text); cursor: pointer; }}
      .option-button.selected {{ border-color: var(--accent); }}
      .progress-track {{ height: 0.5rem; background: var(--raised); border-radius: 999px; overflow: hidden; }}
      .progress-fill {{ height: 100%; background: var(--accent); transition: width 200ms ease; }}
      .error-banner {{ border: 1px solid var(--error); color: var(--error); border-radius: 0.75rem; padding: 0.75rem 1rem; margin-bottom: 1.5rem; }}
      .correct {{ color: var(--success); }}
      .incorrect {{ color: var(--error); }}
      .row {{ display: flex; justify-content: space-between; align-items: center; gap: 1rem; }}
      pre, code {{ background: var(--raised); border-radius: 0.3rem; padding: 0.1rem 0.3rem; }}
"""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QToolBar {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border-bottom: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                spacing: 6px;
            }}
            QToolButton {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                padding: 4px 10px;
            }}
        """
