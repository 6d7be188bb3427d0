"""NiceGUI chat widget and playground page.

Both views drive a ``ChatSession``; they only differ in the resolver. The
floating widget on ``/`` answers locally, the playground page on
``/playground`` asks the remote answering service.
"""

from nicegui import Client, ui

from src.chat.config import ChatConfig, get_chat_config
from src.chat.resolvers import LocalEchoResolver, RemoteResolver
from src.chat.session import ChatSession
from src.models.schemas import Message, Notification, Sender

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    .playground-bg {
        background: linear-gradient(135deg, #431407 0%, #78350f 50%, #7c2d12 100%);
        min-height: 100vh;
    }
    .header { background: linear-gradient(90deg, #c2410c 0%, #9a3412 100%); }

    .message-user {
        background: linear-gradient(90deg, #f97316 0%, #ea580c 100%);
        color: white;
        border-radius: 16px 16px 4px 16px;
    }
    .message-bot {
        background: linear-gradient(90deg, #92400e 0%, #9a3412 100%);
        color: #fff7ed;
        border: 1px solid #c2410c;
        border-radius: 16px 16px 16px 4px;
    }

    .widget-window { width: 20rem; height: 24rem; border-radius: 16px; }
    .widget-header { background: linear-gradient(90deg, #2563eb 0%, #9333ea 100%); }
    .widget-user {
        background: linear-gradient(90deg, #3b82f6 0%, #a855f7 100%);
        color: white;
        border-radius: 8px 8px 2px 8px;
    }
    .widget-bot {
        background: white;
        color: #1f2937;
        border: 1px solid #e5e7eb;
        border-radius: 8px 8px 8px 2px;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #fb923c;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.1s; }
    .typing-dot:nth-child(3) { animation-delay: 0.2s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
</style>
"""


def show_notification(notification: Notification) -> None:
    """Render a notification as a NiceGUI toast."""
    ui.notify(
        notification.title,
        caption=notification.description,
        type="negative" if notification.variant == "destructive" else "info",
        position="top-right",
    )


def bind_teardown(session: ChatSession, client: Client) -> None:
    """Close the session once the page is gone for good.

    A dropped socket that reconnects within the reconnect timeout keeps the
    session alive; only client deletion tears it down.
    """
    client.on_delete(session.close)


def create_widget_session(config: ChatConfig) -> ChatSession:
    resolver = LocalEchoResolver(delay=config.local_reply_delay, reply=config.local_reply)
    return ChatSession(resolver, notifier=show_notification, greeting=config.greeting)


def create_playground_session(config: ChatConfig) -> ChatSession:
    resolver = RemoteResolver(config.backend_url, timeout=config.request_timeout)
    return ChatSession(resolver, notifier=show_notification)


def render_typing_indicator(session: ChatSession) -> None:
    with (
        ui.row()
        .classes("w-full justify-start")
        .bind_visibility_from(session, "is_awaiting_response"),
        ui.element("div").classes("message-bot px-4 py-3"),
        ui.row().classes("items-center gap-3"),
    ):
        with ui.row().classes("gap-1"):
            for _ in range(3):
                ui.element("div").classes("typing-dot")
        ui.label("AI is thinking...").classes("text-sm text-orange-200")


@ui.page("/")
def widget_page() -> None:
    """Landing page carrying the floating chat widget."""
    ui.add_head_html(CUSTOM_CSS)
    session = create_widget_session(get_chat_config())
    bind_teardown(session, ui.context.client)

    messages_container: ui.column
    scroll_area: ui.scroll_area

    def render_message(msg: Message) -> None:
        is_user = msg.sender is Sender.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "widget-user" if is_user else "widget-bot"
        with ui.row().classes(f"w-full {align}"):
            ui.label(msg.content).classes(
                f"max-w-[70%] px-3 py-2 text-sm whitespace-pre-wrap break-words {bubble}"
            )

    def refresh_messages(_: Message | None = None) -> None:
        messages_container.clear()
        with messages_container:
            for msg in session.messages:
                render_message(msg)
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        await session.submit()

    with ui.element("div").classes("fixed bottom-6 right-6 z-50"):
        with ui.column().classes(
            "widget-window mb-4 bg-white shadow-2xl overflow-hidden gap-0"
        ) as window:
            with ui.row().classes("w-full widget-header p-4 items-center justify-between"):
                with ui.column().classes("gap-0"):
                    ui.label("Chatty North").classes("text-sm font-semibold text-white")
                    ui.label("Always here to help").classes("text-xs text-blue-100")
                ui.button(icon="close", on_click=lambda: window.set_visibility(False)).props(
                    "flat round dense color=white"
                )

            with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
                messages_container = ui.column().classes("w-full p-2 gap-3")

            with ui.row().classes("w-full p-3 gap-2 bg-white border-t no-wrap"):
                (
                    ui.input(placeholder="Type your message...")
                    .props("dense outlined")
                    .classes("flex-grow")
                    .bind_value(session, "pending_input")
                    .on("keydown.enter", send_message)
                )
                ui.button(icon="send", on_click=send_message).props("unelevated dense")
        window.set_visibility(False)

        ui.button(
            icon="chat",
            on_click=lambda: window.set_visibility(not window.visible),
        ).props("round size=lg color=deep-purple")

    session.transcript.on_append(refresh_messages)
    refresh_messages()


@ui.page("/playground")
def playground_page() -> None:
    """Full-page chat against the remote answering service."""
    ui.add_head_html(CUSTOM_CSS)
    session = create_playground_session(get_chat_config())
    bind_teardown(session, ui.context.client)

    messages_container: ui.column
    scroll_area: ui.scroll_area

    def render_message(msg: Message) -> None:
        is_user = msg.sender is Sender.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-bot"
        with (
            ui.row().classes(f"w-full {align}"),
            ui.column().classes(f"max-w-[75%] p-4 gap-1 shadow-lg {bubble}"),
        ):
            ui.label(msg.content).classes("whitespace-pre-wrap break-words")
            ui.label(msg.created_at.strftime("%I:%M:%S %p")).classes("text-xs opacity-80")

    def refresh_messages(_: Message | None = None) -> None:
        messages_container.clear()
        with messages_container:
            if not session.messages:
                with ui.column().classes("w-full mt-20 items-center gap-2 text-orange-100"):
                    ui.label("🤖").classes("text-3xl")
                    ui.label("Welcome to North Light AI Playground").classes(
                        "text-xl font-medium"
                    )
                    ui.label(
                        "Ask me anything about your website content and get intelligent "
                        "responses powered by RAG technology."
                    ).classes("text-sm text-orange-200")
            else:
                for msg in session.messages:
                    render_message(msg)
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        await session.submit()

    with ui.column().classes("w-full playground-bg gap-0"):
        # Header
        with ui.column().classes("w-full header p-4 items-center gap-0 shadow-lg"):
            ui.label("North Light AI Playground").classes("text-2xl font-bold text-white")
            ui.label("Intelligent RAG-powered assistant").classes("text-sm text-orange-100")

        with ui.column().classes("w-full max-w-4xl mx-auto p-4").style(
            "height: calc(100vh - 6rem)"
        ):
            # Messages
            with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
                messages_container = ui.column().classes("w-full gap-4")
                render_typing_indicator(session)

            # Input
            with ui.row().classes(
                "w-full p-4 gap-3 no-wrap rounded-2xl border border-orange-700 bg-orange-900/50"
            ):
                (
                    ui.input(placeholder="Ask me anything about your website...")
                    .props("outlined dark")
                    .classes("flex-grow text-lg")
                    .bind_value(session, "pending_input")
                    .bind_enabled_from(
                        session, "is_awaiting_response", backward=lambda busy: not busy
                    )
                    .on("keydown.enter", send_message)
                )
                (
                    ui.button(icon="send", on_click=send_message)
                    .props("unelevated color=orange")
                    .bind_enabled_from(session, "can_submit")
                )

    session.transcript.on_append(refresh_messages)
    refresh_messages()
