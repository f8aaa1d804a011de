"""
Localized user-facing messages for the formatter tool.
"""

from typing import Any

DEFAULT_LANGUAGE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "json.syntax_error": "Syntax Error",
        "json.empty_input": "Input is empty",
        "json.repair_fail": "Could not repair the JSON automatically. Please check it manually.",
        "json.size_limit": "Document too large: {detail}",
    },
    "zh": {
        "json.syntax_error": "语法错误",
        "json.empty_input": "输入为空",
        "json.repair_fail": "无法自动修复 JSON，请手动检查。",
        "json.size_limit": "文档过大：{detail}",
    },
}

SUPPORTED_LANGUAGES = tuple(MESSAGES)


def translate(key: str, language: str = DEFAULT_LANGUAGE, **params: Any) -> str:
    """
    Look up a message, falling back to English and then to the key itself.

    ``{name}`` placeholders are filled from params.
    """
    table = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    text = table.get(key) or MESSAGES[DEFAULT_LANGUAGE].get(key, key)
    for name, value in params.items():
        text = text.replace(f"{{{name}}}", str(value))
    return text
