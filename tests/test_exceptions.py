from blog_engine.core.exceptions import (
    BlogEngineException,
    DiagramRenderError,
    EmptyInputError,
    MarkdownRenderError,
    RenderFailedError,
)


def test_exception_str_includes_details():
    exc = BlogEngineException("boom", {"key": "value"})

    assert str(exc) == "boom | Details: {'key': 'value'}"


def test_exception_str_without_details():
    assert str(BlogEngineException("boom")) == "boom"


def test_diagram_render_error_carries_stderr_and_returncode():
    exc = DiagramRenderError("mmdc failed", stderr="bad syntax", returncode=2)

    assert isinstance(exc, RenderFailedError)
    assert exc.stderr == "bad syntax"
    assert exc.details == {"stderr": "bad syntax", "returncode": 2}


def test_markdown_render_error_is_render_failure():
    assert issubclass(MarkdownRenderError, RenderFailedError)


def test_empty_input_error_default_message():
    assert EmptyInputError().message == "mermaid code cannot be empty"
