from wiki.render import markdown_to_html


def test_markdown_heading():
    assert markdown_to_html("# Hi") == "<h1>Hi</h1>"


def test_markdown_paragraph_with_emphasis():
    assert markdown_to_html("some *text*") == "<p>some <em>text</em></p>"


def test_empty_markdown_renders_nothing():
    assert markdown_to_html("") == ""
