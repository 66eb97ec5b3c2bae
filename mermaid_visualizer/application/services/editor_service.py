"""
Editor service.

Builds the per-mode view model for the editor page.

Dependencies: mermaid_visualizer.configs, mermaid_visualizer.models
System role: Editor page composition
"""

from mermaid_visualizer.configs.editor import EditorSettings
from mermaid_visualizer.models.editor import EditorMode, EditorView, MermaidClientConfig

_MODE_LABELS = {
    EditorMode.VISUALIZE: ("Mermaid Syntax", "Enter Mermaid syntax here..."),
    EditorMode.CONVERT: ("Text Input", "Enter text to convert to Mermaid syntax..."),
}


class EditorService:
    """Composes editor views from editor settings."""

    def __init__(self, settings: EditorSettings, convert_url: str) -> None:
        self.settings = settings
        self.convert_url = convert_url

    def build_view(self, mode: EditorMode) -> EditorView:
        """
        Build the editor view for a mode.

        Args:
            mode: Requested editor mode

        Returns:
            EditorView: Labels, flags and client configuration for the page
        """
        heading, placeholder = _MODE_LABELS[mode]
        is_convert = mode is EditorMode.CONVERT
        return EditorView(
            title=self.settings.title,
            mode=mode,
            input_heading=heading,
            placeholder=placeholder,
            show_convert_button=is_convert,
            show_code_tab=is_convert,
            convert_url=self.convert_url,
            mermaid_js_url=self.settings.mermaid_js_url,
            mermaid_config=MermaidClientConfig(
                theme=self.settings.theme,
                securityLevel=self.settings.security_level,
            ),
        )
