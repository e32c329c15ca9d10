# ======================================================================================================================
# 📁 file        : aw_logger.py — Rich LogRouter для AutoWire Forms
# 🕒 created     : 14.10.2026 10:12
# 🎉 contains    : TLogRouter, LOG_ROUTER, init_log_router/set_log_router, LoggableComponent
# 🌅 project     : AutoWire Forms 2026 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import threading
from datetime import datetime
from typing import Callable
from rich.console import Console
from rich.text import Text
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TLogRouter", "LOG_ROUTER", "init_log_router", "set_log_router", "get_log_router",
           "LoggableComponent", "format_line", "console_write"]
# 💎 ... CONFIG / CONSTS ...
BUFFER_LIMIT = 200
_CONSOLE = Console(highlight=False)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TLogRouter — лог-центр с несколькими окнами
# ----------------------------------------------------------------------------------------------------------------------
class TLogRouter:
    """Глобальный Rich лог-центр с несколькими окнами."""

    def __init__(self, window_count: int = 3, console: Console | None = None, echo: bool = True):
        self.console = console or Console(highlight=False)
        self.window_count = window_count
        self.echo = echo
        self.buffers: dict[int, list[str]] = {i: [] for i in range(1, window_count + 1)}
        self.lock = threading.Lock()

        # Подписчики на логи: callables вида fn(message: str, window: int)
        self.subscribers: list[Callable[[str, int], None]] = []

    # ------------------------------------------------------------------------------------------------------------------
    # API
    # ------------------------------------------------------------------------------------------------------------------
    def write(self, message: str, window: int = 1):
        """Добавляет строку в окно, печатает её (echo) и рассылает подписчикам."""
        with self.lock:
            buf = self.buffers.setdefault(window, [])
            buf.append(message)
            if len(buf) > BUFFER_LIMIT:
                buf.pop(0)

        if self.echo:
            self.console.print(Text(message))

        for fn in list(self.subscribers):
            try:
                fn(message, window)
            except Exception as e:
                # ни один подписчик не должен уронить лог-центр
                self.console.print(Text(f"⚠️ log subscriber error: {e}", style="red"))

    def lines(self, window: int = 1) -> list[str]:
        """Копия буфера окна."""
        with self.lock:
            return list(self.buffers.get(window, []))

    def add_subscriber(self, fn):
        """Регистрирует внешнего подписчика логов.

        fn: callable(message: str, window: int)
        """
        if not fn:
            return
        if fn not in self.subscribers:
            self.subscribers.append(fn)

    def remove_subscriber(self, fn):
        """Отписывает подписчика логов."""
        try:
            self.subscribers.remove(fn)
        except ValueError:
            pass

# ----------------------------------------------------------------------------------------------------------------------
# 🌍 Global instance
# ----------------------------------------------------------------------------------------------------------------------
LOG_ROUTER: TLogRouter | None = None


def init_log_router(**kwargs) -> TLogRouter:
    global LOG_ROUTER
    if LOG_ROUTER is None:
        LOG_ROUTER = TLogRouter(**kwargs)
    return LOG_ROUTER


def set_log_router(router: TLogRouter | None) -> TLogRouter | None:
    """Подменяет глобальный роутер (None → обычная консоль). Возвращает предыдущий."""
    global LOG_ROUTER
    prev, LOG_ROUTER = LOG_ROUTER, router
    return prev


def get_log_router() -> TLogRouter | None:
    return LOG_ROUTER


def format_line(source: str, function: str, *parts) -> str:
    from aw_sys import _key

    project_symbol = _key('PROJECT_SYMBOL', 'AW')
    project_version = _key('PROJECT_VERSION', '1')
    now = datetime.now().strftime('%H:%M:%S')
    msg = ' '.join(str(p) for p in parts)
    return f'[{project_symbol}_{project_version}][{now}][{source}]{function}(): {msg}'


def console_write(text: str, window: int = 1):
    """Пишет строку в LOG_ROUTER, а если его нет — прямо в rich-консоль."""
    router = LOG_ROUTER
    if router:
        router.write(text, window=window)
    else:
        _CONSOLE.print(Text(text))
# ----------------------------------------------------------------------------------------------------------------------
# 🧪 Mixins
# ----------------------------------------------------------------------------------------------------------------------
class LoggableComponent:
    """
    Базовый миксин, добавляющий поддержку централизованного логгирования.
    Все потомки автоматически используют Rich LogRouter (если активен).
    """

    def log(self, function: str, *parts, window: int = 1):
        console_write(format_line(self.__class__.__name__, function, *parts), window)
