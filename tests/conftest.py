import pytest
import sys
from pathlib import Path
from typing import Sequence

# Add the src directory to the path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from clipstash.app import ClipStashApp  # noqa: E402
from clipstash.clipboard import MemoryClipboard  # noqa: E402
from clipstash.config import get_settings  # noqa: E402
from clipstash.models import Store  # noqa: E402


class ScriptedShell:
    """Interaction shell that replays canned answers and records output."""

    def __init__(self, texts: Sequence[object] = (), choices: Sequence[object] = ()):
        self.texts = list(texts)
        self.choices = list(choices)
        self.prompts: list[str] = []
        self.menus: list[tuple[str, list[str]]] = []
        self.messages: list[str] = []
        self.errors: list[str] = []
        self.shown: list[object] = []

    def prompt_text(self, label: str, allow_empty: bool = False) -> str:
        self.prompts.append(label)
        answer = self.texts.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def prompt_choice(self, label: str, options: Sequence[str]) -> int:
        self.menus.append((label, list(options)))
        answer = self.choices.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        if isinstance(answer, str):
            return list(options).index(answer)
        return answer

    def show(self, renderable: object) -> None:
        self.shown.append(renderable)

    def info(self, message: str) -> None:
        self.messages.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear CLIPSTASH_* variables and the settings cache around every test."""
    for name in [
        "CLIPSTASH_STORE_PATH",
        "CLIPSTASH_DEFAULT_HISTORY",
        "CLIPSTASH_LOG_LEVEL",
        "CLIPSTASH_CONSOLE_LOG_LEVEL",
        "CLIPSTASH_LOG_DIR",
        "CLIPSTASH_LOG_ARCHIVES",
        "CLIPSTASH_ENV",
        "CLIPSTASH_HOME",
    ]:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store_path(tmp_path) -> Path:
    """Location of the canonical store file for a test."""
    return tmp_path / "clipboard.json"


@pytest.fixture
def sample_store() -> Store:
    """A store with two histories, an empty value, and an empty history."""
    store = Store()
    store.save_entry("work", "snippet", "echo hi")
    store.save_entry("work", "deploy", "kubectl apply -f deploy.yaml")
    store.save_entry("personal", "address", "221B Baker Street\nLondon")
    store.save_entry("personal", "blank", "")
    store.create_history("archive")
    return store


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard("copied text")


@pytest.fixture
def make_app(store_path, clipboard):
    """Build a ClipStashApp around a ScriptedShell."""

    def _make(
        texts=(), choices=(), store: Store | None = None, clip=None
    ) -> ClipStashApp:
        return ClipStashApp(
            store_path,
            ScriptedShell(texts, choices),
            clip if clip is not None else clipboard,
            store=store,
        )

    return _make
