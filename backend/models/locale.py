"""Supported languages, UI strings and system prompts.

Both tables are keyed by closed enums and checked for completeness when the
module is imported, so a missing translation fails loudly at startup instead
of rendering an empty label.
"""
from enum import Enum
from typing import Dict


class Language(str, Enum):
    """Supported display languages."""
    ZH = "zh"
    EN = "en"

    def toggled(self) -> "Language":
        return Language.EN if self is Language.ZH else Language.ZH


class UIString(str, Enum):
    """Keys of every string shown by the viewer."""
    TITLE = "title"
    UPLOAD = "upload"
    QUESTION_PLACEHOLDER = "questionPlaceholder"
    PROCESSING = "processing"
    ASK_QUESTION = "askQuestion"
    ANSWER = "answer"
    ERROR = "error"
    DISCLAIMER = "disclaimer"
    DESIGNER = "designer"
    CURRENT_MODEL = "currentModel"
    SCROLL_HINT = "scrollHint"
    LOAD_ERROR = "loadError"
    EXTRACTION_ERROR = "extractionError"


SYSTEM_PROMPTS: Dict[Language, str] = {
    Language.ZH: (
        "你是一個專業的面試助手，負責回答關於這份履歷的問題。"
        "請基於履歷內容提供準確、專業的回答。如果問題超出履歷範圍，請明確指出。"
        "回答時要保持專業、客觀的語氣。"
    ),
    Language.EN: (
        "You are a professional interview assistant responsible for answering "
        "questions about this resume. Please provide accurate and professional "
        "answers based on the resume content. If a question goes beyond the scope "
        "of the resume, please clearly indicate this. Maintain a professional and "
        "objective tone in your responses."
    ),
}

TRANSLATIONS: Dict[Language, Dict[UIString, str]] = {
    Language.ZH: {
        UIString.TITLE: "Ask about me",
        UIString.UPLOAD: "點擊上傳或拖放 PDF 檔案",
        UIString.QUESTION_PLACEHOLDER: "請輸入您的問題... (按 Enter 送出，Shift+Enter 換行)",
        UIString.PROCESSING: "處理中...",
        UIString.ASK_QUESTION: "送出問題",
        UIString.ANSWER: "回答：",
        UIString.ERROR: "抱歉，處理您的問題時發生錯誤。請重試。",
        UIString.DISCLAIMER: "* 回答僅供參考，請以 PDF 內容為準",
        UIString.DESIGNER: "設計者",
        UIString.CURRENT_MODEL: "使用模型",
        UIString.SCROLL_HINT: "* 可上下滾動查看完整內容",
        UIString.LOAD_ERROR: "無法載入 PDF 檔案，請確認檔案格式後重新選擇。",
        UIString.EXTRACTION_ERROR: "無法讀取 PDF 文字內容，請重新選擇檔案。",
    },
    Language.EN: {
        UIString.TITLE: "Ask about me",
        UIString.UPLOAD: "Click to upload or drag and drop a PDF file",
        UIString.QUESTION_PLACEHOLDER: "Ask a question... (Press Enter to submit, Shift+Enter for new line)",
        UIString.PROCESSING: "Processing...",
        UIString.ASK_QUESTION: "Ask Question",
        UIString.ANSWER: "Answer:",
        UIString.ERROR: "Sorry, there was an error processing your question. Please try again.",
        UIString.DISCLAIMER: "* Answers are for reference only, please refer to the PDF content",
        UIString.DESIGNER: "Designer",
        UIString.CURRENT_MODEL: "Current Model",
        UIString.SCROLL_HINT: "* Scroll to view full content",
        UIString.LOAD_ERROR: "Failed to load the PDF file. Please check the file and select it again.",
        UIString.EXTRACTION_ERROR: "Failed to read the PDF text. Please select the file again.",
    },
}


def _check_tables() -> None:
    """Raise if any language lacks a prompt or a UI string."""
    for language in Language:
        if language not in SYSTEM_PROMPTS:
            raise RuntimeError(f"Missing system prompt for language: {language.value}")
        table = TRANSLATIONS.get(language, {})
        missing = [key.value for key in UIString if key not in table]
        if missing:
            raise RuntimeError(
                f"Missing translations for {language.value}: {', '.join(missing)}"
            )


_check_tables()


def translate(language: Language, key: UIString) -> str:
    """Return the display string for ``key`` in ``language``."""
    return TRANSLATIONS[language][key]


def system_prompt(language: Language) -> str:
    """Return the system instruction sent with every question."""
    return SYSTEM_PROMPTS[language]


def strings_for(language: Language) -> Dict[str, str]:
    """Return the full string table for a language, keyed by string name."""
    return {key.value: text for key, text in TRANSLATIONS[language].items()}
