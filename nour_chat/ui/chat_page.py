"""NiceGUI chat page: right-to-left Arabic chat with a light/dark theme."""

from nicegui import ui

from nour_chat.gateway import get_gateway
from nour_chat.models.schemas import Message, MessageRole
from nour_chat.ui.markdown import markdown_to_html, plain_text_to_html
from nour_chat.ui.session import ChatSession

APP_TITLE = "نور الهداية"
APP_SUBTITLE = "مساعدك الذكي"
DISCLAIMER_TEXT = "هذا المساعد يستخدم الذكاء الاصطناعي، يرجى مراجعة المصادر الموثوقة"

SUGGESTIONS = [
    "حديث عن الصدق والأمانة",
    "ما هي أركان الإيمان؟",
    "آية تدعو للمحبة والتسامح",
    "كيف أطور من نفسي دينياً؟",
]

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Amiri:wght@400;700&family=Noto+Sans+Arabic:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Noto Sans Arabic', sans-serif; }
    h1, .title { font-family: 'Amiri', serif; }

    body { background: #fdfaf6; color: #292524; min-height: 100vh; transition: background 0.3s; }
    body.body--dark { background: #121212; color: #ffffff; }

    .app-header { background: rgba(255, 255, 255, 0.8); border-bottom: 1px solid #e7e5e4; }
    .body--dark .app-header { background: rgba(26, 26, 26, 0.8); border-color: rgba(255, 255, 255, 0.1); }

    .logo { background: #fef3c7; color: #b45309; }
    .body--dark .logo { background: rgba(120, 53, 15, 0.3); color: #fbbf24; }

    .message-user { background: #292524; color: white; border-radius: 18px 4px 18px 18px; }
    .body--dark .message-user { background: #b45309; }

    .message-assistant {
        background: white;
        color: #292524;
        border: 1px solid #e7e5e4;
        border-radius: 4px 18px 18px 18px;
    }
    .body--dark .message-assistant {
        background: #1a1a1a;
        color: #e7e5e4;
        border-color: rgba(255, 255, 255, 0.1);
    }

    .suggestion { background: white; border: 1px solid #e7e5e4; border-radius: 12px; }
    .suggestion:hover { border-color: #fcd34d; background: #fffbeb; }
    .body--dark .suggestion { background: #1a1a1a; border-color: rgba(255, 255, 255, 0.1); color: #d6d3d1; }

    .input-box { background: white; border: 1px solid #e7e5e4; border-radius: 16px; }
    .input-box:focus-within { border-color: #fbbf24; }
    .body--dark .input-box { background: #1a1a1a; border-color: rgba(255, 255, 255, 0.1); }

    .typing-dot {
        width: 8px; height: 8px;
        background: #d97706;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .message-assistant strong { font-weight: 600; }
    .message-assistant pre { margin: 0.5rem 0; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each page load gets its own session."""
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession(get_gateway())
    ui.dark_mode().bind_value_from(session, "dark_mode")

    scroll_area: ui.scroll_area
    messages_container: ui.column
    clear_btn: ui.button
    theme_btn: ui.button

    def render_message(msg: Message) -> None:
        is_user = msg.role is MessageRole.USER
        bubble = "message-user" if is_user else "message-assistant"
        content = plain_text_to_html(msg.content) if is_user else markdown_to_html(msg.content)

        with ui.row().classes(f"w-full {'justify-start' if is_user else 'justify-end'}"):
            with ui.column().classes("max-w-[85%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 shadow-sm {bubble}"):
                    ui.html(content, sanitize=False).classes("leading-relaxed")
                ui.label(msg.created_at.strftime("%H:%M")).classes(
                    f"text-[10px] text-gray-400 {'self-start' if is_user else 'self-end'}"
                )

    def render_empty_state() -> None:
        with ui.column().classes("w-full items-center justify-center gap-6 py-12 text-center"):
            with ui.element("div").classes("logo w-20 h-20 rounded-3xl flex items-center justify-center"):
                ui.icon("chat_bubble_outline").classes("text-4xl")
            ui.label("كيف يمكنني مساعدتك اليوم؟").classes("text-2xl font-bold")
            ui.label("أنا هنا للإجابة على تساؤلاتك الدينية والعامة بكل رحابة صدر.").classes(
                "opacity-70 max-w-md"
            )
            with ui.grid().classes("grid-cols-1 md:grid-cols-2 gap-3 w-full max-w-lg"):
                for suggestion in SUGGESTIONS:
                    ui.button(
                        suggestion,
                        on_click=lambda s=suggestion: setattr(session, "pending_input", s),
                    ).props("flat no-caps align=right").classes("suggestion p-3 text-sm")

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-end"):
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("items-center gap-3"):
                    with ui.row().classes("gap-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")
                    ui.label("جاري التفكير...").classes("text-sm opacity-60")

    def refresh() -> None:
        clear_btn.set_visibility(bool(session.messages))
        theme_btn.props(f"icon={'light_mode' if session.dark_mode else 'dark_mode'}")

        messages_container.clear()
        with messages_container:
            if not session.messages and not session.is_awaiting:
                render_empty_state()
            for msg in session.messages:
                render_message(msg)
            if session.is_awaiting:
                render_typing_indicator()
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        await session.submit(session.pending_input or "")

    # === UI Layout ===
    with ui.column().classes("w-full min-h-screen gap-0").props("dir=rtl lang=ar"):
        # Header
        with ui.row().classes("app-header w-full sticky top-0 z-10 px-4 py-3 backdrop-blur-md"):
            with ui.row().classes("w-full max-w-4xl mx-auto items-center justify-between"):
                with ui.row().classes("items-center gap-3"):
                    with ui.element("div").classes(
                        "logo w-10 h-10 rounded-full flex items-center justify-center"
                    ):
                        ui.icon("menu_book").classes("text-2xl")
                    with ui.column().classes("gap-0"):
                        ui.label(APP_TITLE).classes("title text-xl font-bold")
                        ui.label(APP_SUBTITLE).classes("text-xs opacity-60")
                with ui.row().classes("items-center gap-2"):
                    clear_btn = (
                        ui.button(icon="delete_outline", on_click=session.clear)
                        .props("flat round")
                        .tooltip("مسح المحادثة")
                    )
                    theme_btn = ui.button(on_click=session.toggle_theme).props("flat round")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full").style(
            "height: calc(100vh - 10rem)"
        ) as scroll_area:
            messages_container = ui.column().classes("w-full max-w-4xl mx-auto p-4 gap-6")

        # Input
        with ui.column().classes("w-full px-4 pb-6 pt-2 gap-2"):
            with ui.row().classes(
                "input-box w-full max-w-4xl mx-auto items-center gap-2 p-1.5 shadow-lg"
            ):
                (
                    ui.input(placeholder="اكتب سؤالك هنا...")
                    .props("borderless dense")
                    .classes("flex-grow px-3")
                    .bind_value(session, "pending_input")
                    .on("keydown.enter", send_message)
                )
                (
                    ui.button(icon="send", on_click=send_message)
                    .props("unelevated color=amber-8")
                    .classes("rounded-xl")
                    .bind_enabled_from(session, "can_submit")
                )
            with ui.row().classes(
                "w-full max-w-4xl mx-auto items-center justify-center gap-1 text-[11px] opacity-50"
            ):
                ui.icon("info_outline").classes("text-sm")
                ui.label(DISCLAIMER_TEXT)

    session.set_on_change(refresh)
    refresh()

