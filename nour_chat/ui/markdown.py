"""Markdown to HTML conversion for chat bubbles.

Supports: bold, italic, inline code, code blocks, links, headings,
block quotes, ordered and unordered lists. Input is HTML-escaped first,
so model output can never inject markup of its own.
"""

import html
import re

_CODE_BLOCK = re.compile(r"```(\w*)\n?([\s\S]*?)```")
_INLINE_CODE = re.compile(r"`([^`\n]+)`")
_PLACEHOLDER = re.compile(r"\x00(\d+)\x00")

_HEADING = re.compile(r"^(#{1,3})\s+(.+)$")
_QUOTE = re.compile(r"^&gt;\s?(.*)$")
_BULLET = re.compile(r"^[-*]\s+(.+)$")
_NUMBERED = re.compile(r"^\d+[.)]\s+(.+)$")

_HEADING_CLASSES = {
    1: "text-lg font-bold my-2",
    2: "text-base font-bold my-2",
    3: "text-sm font-semibold my-1",
}
_LIST_TAGS = {
    "ul": '<ul class="list-disc list-inside my-2 space-y-1">',
    "ol": '<ol class="list-decimal list-inside my-2 space-y-1">',
}


def _render_inline(text: str) -> str:
    # Bold (**text** or __text__)
    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"__(.+?)__", r"<strong>\1</strong>", text)

    # Italic (*text* or _text_), underscores only outside words
    text = re.sub(r"\*([^*\n]+)\*", r"<em>\1</em>", text)
    text = re.sub(r"(?<!\w)_([^_\n]+)_(?!\w)", r"<em>\1</em>", text)

    # Links [text](url), http(s) only
    return re.sub(
        r'\[([^\]]+)\]\((https?://[^)\s"]+)\)',
        r'<a href="\2" class="text-amber-600 underline" target="_blank">\1</a>',
        text,
    )


def _render_lines(text: str) -> str:
    """Render line-level constructs and join the result.

    Block elements are joined directly; consecutive text lines get ``<br>``.
    """
    parts: list[tuple[str, bool]] = []
    open_list: str | None = None

    def close_list() -> None:
        nonlocal open_list
        if open_list:
            parts.append((f"</{open_list}>", True))
            open_list = None

    for line in text.split("\n"):
        stripped = line.strip()

        list_kind, item = None, None
        if match := _BULLET.match(stripped):
            list_kind, item = "ul", _render_inline(match.group(1))
        elif match := _NUMBERED.match(stripped):
            list_kind, item = "ol", _render_inline(match.group(1))

        if list_kind:
            if open_list != list_kind:
                close_list()
                parts.append((_LIST_TAGS[list_kind], True))
                open_list = list_kind
            parts.append((f"<li>{item}</li>", True))
            continue

        close_list()
        if match := _HEADING.match(stripped):
            level = len(match.group(1))
            heading = _render_inline(match.group(2))
            parts.append((f'<div class="{_HEADING_CLASSES[level]}">{heading}</div>', True))
        elif match := _QUOTE.match(stripped):
            parts.append(
                (
                    '<blockquote class="border-s-4 border-amber-400 ps-3 my-2 opacity-80">'
                    f"{_render_inline(match.group(1))}</blockquote>",
                    True,
                )
            )
        else:
            parts.append((_render_inline(line), False))
    close_list()

    rendered: list[str] = []
    previous_is_block = True
    for fragment, is_block in parts:
        if rendered and not is_block and not previous_is_block:
            rendered.append("<br>")
        rendered.append(fragment)
        previous_is_block = is_block
    return "".join(rendered)


def markdown_to_html(text: str) -> str:
    """Convert assistant markdown to HTML for the chat bubble."""
    text = html.escape(text.replace("\x00", ""), quote=False)

    # Code is set aside so inline rules never touch it
    stash: list[str] = []

    def keep(fragment: str) -> str:
        stash.append(fragment)
        return f"\x00{len(stash) - 1}\x00"

    text = _CODE_BLOCK.sub(
        lambda m: keep(
            '<pre dir="ltr" class="bg-gray-800 text-gray-100 rounded-lg p-3 my-2 '
            f'overflow-x-auto text-xs"><code>{m.group(2)}</code></pre>'
        ),
        text,
    )
    text = _INLINE_CODE.sub(
        lambda m: keep(
            '<code dir="ltr" class="bg-gray-200 text-pink-600 px-1.5 py-0.5 rounded text-xs">'
            f"{m.group(1)}</code>"
        ),
        text,
    )

    text = _render_lines(text)
    return _PLACEHOLDER.sub(lambda m: stash[int(m.group(1))], text)


def plain_text_to_html(text: str) -> str:
    """Escape user text and keep its line breaks."""
    return html.escape(text, quote=False).replace("\n", "<br>")
