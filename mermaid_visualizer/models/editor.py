"""
Editor view models.

Everything the editor template needs to render one mode of the page.

Dependencies: pydantic
System role: Editor page view model
"""

from enum import Enum

from pydantic import BaseModel, Field

RENDER_ERROR_MESSAGE = "Invalid Mermaid syntax. Please check your input."
CONVERSION_ERROR_MESSAGE = "Conversion failed. Please try again."


class EditorMode(str, Enum):
    """Editor modes."""

    VISUALIZE = "visualize"
    CONVERT = "convert"


class MermaidClientConfig(BaseModel):
    """Arguments passed to mermaid.initialize() in the browser."""

    startOnLoad: bool = True
    theme: str = "neutral"
    securityLevel: str = "loose"


class EditorView(BaseModel):
    """Editor page state for one mode."""

    title: str
    mode: EditorMode
    input_heading: str
    placeholder: str
    show_convert_button: bool
    show_code_tab: bool
    convert_label: str = "Convert to Mermaid"
    loading_label: str = "Converting..."
    empty_preview_text: str = "Preview will appear here"
    render_error_message: str = RENDER_ERROR_MESSAGE
    conversion_error_message: str = CONVERSION_ERROR_MESSAGE
    convert_url: str
    mermaid_js_url: str
    mermaid_config: MermaidClientConfig = Field(default_factory=MermaidClientConfig)
