"""Tests for the conversion prompt."""

from mermaid_visualizer.core.conversion_prompt import build_conversion_query


def test_build_conversion_query_should_prefix_fixed_instruction():
    query = build_conversion_query("Alice sends Bob a message")

    assert query == (
        "Convert the following text into a proper Mermaid diagram syntax. "
        "Only return the Mermaid code without any explanation:\n\n"
        "Alice sends Bob a message"
    )


def test_build_conversion_query_should_keep_braces_in_text():
    query = build_conversion_query("config {a: 1} -> {b}")

    assert query.endswith("config {a: 1} -> {b}")
