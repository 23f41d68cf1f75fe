"""
TaskTracker dark theme stylesheet (QSS)
"""

# ── Palette ──────────────────────────────────────
BG_PRIMARY = "#0f0f1a"
BG_SECONDARY = "#161625"
BG_TERTIARY = "#1e1e33"      # cards
BG_INPUT = "#1a1a2e"
SURFACE = "#252542"          # hover

ACCENT = "#8b5cf6"
ACCENT_GLOW = "#a78bfa"
ACCENT_DEEP = "#6d28d9"
HEADER_BG = "#bbc6fb"
SUCCESS = "#10b981"

TEXT_PRIMARY = "#f1f0f7"
TEXT_SECONDARY = "#8b89a6"
TEXT_MUTED = "#55536e"
TEXT_DONE = "#4a4862"
TEXT_ON_HEADER = "#1e1e33"

BORDER = "#2a2a45"
BORDER_SUBTLE = "#1f1f38"

DANGER = "#ef4444"

MAIN_STYLESHEET = f"""
QWidget {{
    background-color: {BG_PRIMARY};
    color: {TEXT_PRIMARY};
    font-family: "Segoe UI Variable", "Segoe UI", "Noto Sans", sans-serif;
    font-size: 13px;
}}

QLabel#headerLabel {{
    background-color: {HEADER_BG};
    color: {TEXT_ON_HEADER};
    font-size: 18px;
    font-weight: 700;
    padding: 14px 16px;
}}

QLineEdit#taskInput, QLineEdit#taskEditInput {{
    background-color: {BG_INPUT};
    border: 1px solid {BORDER};
    border-radius: 10px;
    padding: 9px 14px;
    color: {TEXT_PRIMARY};
    selection-background-color: {ACCENT};
}}
QLineEdit#taskInput:focus, QLineEdit#taskEditInput:focus {{
    border: 1px solid {ACCENT};
    background-color: {BG_TERTIARY};
}}

QPushButton#addButton, QPushButton#saveButton {{
    background-color: {ACCENT};
    color: white;
    border: none;
    border-radius: 10px;
    padding: 8px 14px;
    font-weight: 600;
}}
QPushButton#addButton:hover, QPushButton#saveButton:hover {{
    background-color: {ACCENT_DEEP};
}}

QPushButton#iconButton {{
    background-color: transparent;
    color: {TEXT_SECONDARY};
    border: 1px solid transparent;
    border-radius: 6px;
    padding: 4px 8px;
}}
QPushButton#iconButton:hover {{
    background-color: rgba(139, 92, 246, 0.15);
    color: {ACCENT_GLOW};
    border-color: {BORDER};
}}

QLabel#counterLabel {{
    color: {TEXT_SECONDARY};
    font-size: 11px;
    font-weight: 500;
    padding: 2px 0px;
}}

QScrollArea {{
    background: transparent;
    border: none;
}}
QScrollArea > QWidget > QWidget {{
    background: transparent;
}}
QScrollBar:vertical {{
    background: transparent;
    width: 5px;
    margin: 4px 1px;
    border-radius: 2px;
}}
QScrollBar::handle:vertical {{
    background: {BORDER};
    min-height: 40px;
    border-radius: 2px;
}}

QFrame#taskItem {{
    background-color: {BG_TERTIARY};
    border: 1px solid {BORDER_SUBTLE};
    border-radius: 10px;
}}
QFrame#taskItem:hover {{
    background-color: {SURFACE};
    border: 1px solid {BORDER};
}}

QCheckBox::indicator {{
    width: 18px;
    height: 18px;
    border-radius: 5px;
    border: 2px solid {BORDER};
}}
QCheckBox::indicator:checked {{
    background-color: {SUCCESS};
    border-color: {SUCCESS};
}}

QLabel#taskTitle {{
    color: {TEXT_PRIMARY};
    padding: 2px 0px;
}}
QLabel#taskTitleDone {{
    color: {TEXT_DONE};
    text-decoration: line-through;
    font-style: italic;
    padding: 2px 0px;
}}

QLabel#emptyLabel {{
    color: {TEXT_MUTED};
    padding: 30px 10px;
}}

QWidget#filterBar {{
    background-color: {BG_SECONDARY};
    border-top: 1px solid {BORDER};
}}
QPushButton#filterButton {{
    background-color: transparent;
    color: {TEXT_SECONDARY};
    border: none;
    border-radius: 8px;
    padding: 8px 12px;
    font-weight: 600;
}}
QPushButton#filterButton:checked {{
    background-color: rgba(139, 92, 246, 0.2);
    color: {ACCENT_GLOW};
}}

QPushButton#deleteAllButton {{
    background-color: transparent;
    color: {TEXT_SECONDARY};
    border: 1px solid {BORDER};
    border-radius: 10px;
    padding: 9px 14px;
    font-weight: 500;
}}
QPushButton#deleteAllButton:hover {{
    background-color: rgba(239, 68, 68, 0.1);
    color: {DANGER};
    border-color: rgba(239, 68, 68, 0.3);
}}

QProgressBar#busyProgress {{
    min-height: 3px;
    max-height: 3px;
    border: none;
    background-color: rgba(255, 255, 255, 0.06);
}}
QProgressBar#busyProgress::chunk {{
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0,
        stop:0 {ACCENT}, stop:1 {ACCENT_GLOW});
}}

QToolTip {{
    background-color: {BG_TERTIARY};
    color: {TEXT_PRIMARY};
    border: 1px solid {BORDER};
    padding: 6px 8px;
}}
"""
