"""Terminal UI layer: output primitives (`basic`) and prompts (`prompts`)."""

from odoo_setup.ui.basic import (
    ui_error,
    ui_header,
    ui_info,
    ui_rule,
    ui_status,
    ui_success,
    ui_table,
    ui_warning,
)
from odoo_setup.ui.prompts import ask_confirm, ask_text

__all__ = [
    "ask_confirm",
    "ask_text",
    "ui_error",
    "ui_header",
    "ui_info",
    "ui_rule",
    "ui_status",
    "ui_success",
    "ui_table",
    "ui_warning",
]
