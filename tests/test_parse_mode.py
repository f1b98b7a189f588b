from tgbotkit.parse_mode import HTML, MD, MD2


def test_html():
    assert str(HTML) == "HTML"
    assert HTML.line("Hello", "World") == "Hello World"
    assert HTML.text("Hello", "World") == "Hello\nWorld"
    assert HTML.bold("Hello", "World") == "<b>Hello World</b>"
    assert HTML.italic("Hello", "World") == "<i>Hello World</i>"
    assert HTML.underline("Hello", "World") == "<u>Hello World</u>"
    assert HTML.strike("Hello", "World") == "<s>Hello World</s>"
    assert HTML.spoiler("Hello", "World") == "<tg-spoiler>Hello World</tg-spoiler>"
    assert (
        HTML.link("Hello World", "https://telegram.org")
        == '<a href="https://telegram.org">Hello World</a>'
    )
    assert HTML.pre("Hello World") == "<pre>Hello World</pre>"
    assert HTML.sep(", ").bold("Hello", "World") == "<b>Hello, World</b>"
    assert (
        HTML.sep(", ").blockquote("Hello", "World")
        == "<blockquote>Hello, World</blockquote>"
    )
    assert HTML.escape("Me & You") == "Me &amp; You"


def test_html_escapes_quotes():
    assert HTML.escape("<\"'>") == "&lt;&#34;&#39;&gt;"


def test_sep_does_not_change_original():
    changed = HTML.sep("-")
    assert changed.bold("a", "b") == "<b>a-b</b>"
    assert HTML.bold("a", "b") == "<b>a b</b>"
    assert str(changed) == "HTML"


def test_link_does_not_expand_placeholders_in_values():
    assert HTML.link("{url}", "x") == '<a href="x">{url}</a>'


def test_markdown():
    assert str(MD) == "Markdown"
    assert MD.line("Hello", "World") == "Hello World"
    assert MD.text("Hello", "World") == "Hello\nWorld"
    assert MD.bold("Hello", "World") == "*Hello World*"
    assert MD.italic("Hello", "World") == "_Hello World_"
    assert MD.underline("Hello", "World") == "Hello World"
    assert MD.strike("Hello", "World") == "Hello World"
    assert MD.spoiler("Hello", "World") == "Hello World"
    assert (
        MD.link("Hello World", "https://telegram.org")
        == "[Hello World](https://telegram.org)"
    )
    assert MD.pre("Hello World") == "```Hello World```"
    assert MD.sep(", ").bold("Hello", "World") == "*Hello, World*"
    assert MD.escape("*go_tg*") == "\\*go\\_tg\\*"


def test_markdown_v2():
    assert str(MD2) == "MarkdownV2"
    assert MD2.line("Hello", "World") == "Hello World"
    assert MD2.text("Hello", "World") == "Hello\nWorld"
    assert MD2.bold("Hello", "World") == "*Hello World*"
    assert MD2.italic("Hello", "World") == "_Hello World_"
    assert MD2.underline("Hello", "World") == "__Hello World__"
    assert MD2.strike("Hello", "World") == "~Hello World~"
    assert MD2.spoiler("Hello", "World") == "||Hello World||"
    assert (
        MD2.link("Hello World", "https://telegram.org")
        == "[Hello World](https://telegram.org)"
    )
    assert MD2.pre("Hello World") == "```Hello World```"
    assert MD2.blockquote("Hello World") == ">Hello World"
    assert MD2.sep(", ").bold("Hello", "World") == "*Hello, World*"
    assert MD2.escape("[*go_tg*]") == "\\[\\*go\\_tg\\*\\]"
    assert MD2.escape("go.tg") == "go\\.tg"