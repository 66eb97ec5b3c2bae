"""
Text-to-Mermaid conversion prompt.

Defines the fixed instruction sent ahead of the user's text.

Dependencies: langchain_core.prompts
System role: Prompt template for the conversion endpoint
"""

from langchain_core.prompts import PromptTemplate

CONVERSION_INSTRUCTION = (
    "Convert the following text into a proper Mermaid diagram syntax. "
    "Only return the Mermaid code without any explanation:"
)

CONVERSION_PROMPT = PromptTemplate.from_template(CONVERSION_INSTRUCTION + "\n\n{text}")


def build_conversion_query(text: str) -> str:
    """
    Render the conversion prompt for a piece of free text.

    Args:
        text: User text to convert

    Returns:
        str: Complete query sent to the text-generation API
    """
    return CONVERSION_PROMPT.format(text=text)
