import pytest

from a11y_compliance.errors import ShortcutConflictError
from a11y_compliance.shortcuts import (
    KeyEvent,
    ShortcutBinding,
    ShortcutDispatcher,
    ShortcutRegistry,
    format_sequence,
    is_typing_target,
    keyboard_activation,
    parse_sequence,
)
from a11y_compliance.tree import ElementNode


@pytest.fixture
def fired():
    return []


@pytest.fixture
def dispatcher(announcer, fired):
    d = ShortcutDispatcher(announcer=announcer)
    d.registry.add("Alt+1", "Go to Home page", lambda: fired.append("home"), category="Navigation")
    d.registry.add("Ctrl+S", "Submit current form", lambda: fired.append("submit"), category="Forms")
    return d


def test_parse_sequence():
    assert parse_sequence("Ctrl+Shift+S") == ("s", True, False, True)
    assert parse_sequence("alt+1") == ("1", False, True, False)
    assert parse_sequence("/") == ("/", False, False, False)
    assert parse_sequence("Ctrl++") == ("+", True, False, False)
    with pytest.raises(ValueError):
        parse_sequence("Hyper+K")
    with pytest.raises(ValueError):
        parse_sequence("Ctrl+")


def test_alt_1_fires_on_div(dispatcher, fired, announcer):
    event = KeyEvent(key="1", alt=True, target=ElementNode("div"))
    binding = dispatcher.dispatch(event)
    assert binding is not None
    assert binding.sequence == "Alt+1"
    assert fired == ["home"]
    assert event.default_prevented
    assert announcer.message == "Go to Home page"


def test_alt_1_suppressed_in_text_input(dispatcher, fired, announcer):
    event = KeyEvent(key="1", alt=True, target=ElementNode("input", input_type="email"))
    assert dispatcher.dispatch(event) is None
    assert fired == []
    assert not event.default_prevented
    assert announcer.message == ""


def test_suppressed_inside_contenteditable_region(dispatcher, fired):
    inner = ElementNode("span", "bold text")
    ElementNode("div", contenteditable=True, children=[ElementNode("p", children=[inner])])
    assert dispatcher.dispatch(KeyEvent(key="s", ctrl=True, target=inner)) is None
    assert fired == []


def test_non_text_inputs_do_not_suppress(dispatcher, fired):
    checkbox = ElementNode("input", input_type="checkbox")
    assert dispatcher.dispatch(KeyEvent(key="s", ctrl=True, target=checkbox)) is not None
    assert fired == ["submit"]


def test_unmatched_event_passes_through(dispatcher, fired):
    event = KeyEvent(key="2", alt=True, target=ElementNode("div"))
    assert dispatcher.dispatch(event) is None
    assert not event.default_prevented
    assert fired == []


def test_modifiers_must_match_exactly(dispatcher, fired):
    assert dispatcher.dispatch(KeyEvent(key="1")) is None
    assert dispatcher.dispatch(KeyEvent(key="1", alt=True, shift=True)) is None
    assert dispatcher.dispatch(KeyEvent(key="s", ctrl=True, alt=True)) is None
    assert fired == []


def test_key_match_is_case_insensitive(dispatcher, fired):
    assert dispatcher.dispatch(KeyEvent(key="S", ctrl=True)) is not None
    assert fired == ["submit"]


def test_disabled_dispatcher_skips_everything(dispatcher, fired):
    dispatcher.enabled = False
    event = KeyEvent(key="1", alt=True)
    assert dispatcher.dispatch(event) is None
    assert not event.default_prevented
    assert fired == []


def test_duplicate_registration_rejected(fired):
    reg = ShortcutRegistry()
    reg.add("Alt+M", "Skip to main content", lambda: fired.append("first"))
    with pytest.raises(ShortcutConflictError) as exc:
        reg.add("alt+m", "Something else", lambda: fired.append("second"))
    assert "Skip to main content" in str(exc.value)
    assert len(reg) == 1
    assert reg.get("Alt+M").description == "Skip to main content"


def test_same_key_different_modifiers_is_not_a_conflict():
    reg = ShortcutRegistry()
    reg.add("S", "Search", lambda: None)
    reg.add("Ctrl+S", "Submit", lambda: None)
    reg.add("Ctrl+Shift+S", "Save draft", lambda: None)
    assert len(reg) == 3


def test_unregister():
    reg = ShortcutRegistry()
    reg.add("/", "Show keyboard shortcuts help", lambda: None)
    assert reg.unregister("/")
    assert not reg.unregister("/")
    assert reg.get("/") is None


def test_by_category_sorted(dispatcher):
    dispatcher.registry.add("Alt+3", "Go to Request History", lambda: None, category="Navigation")
    dispatcher.registry.add("Alt+2", "Go to Request Form", lambda: None, category="Navigation")
    buckets = dispatcher.registry.by_category()
    assert set(buckets) == {"Navigation", "Forms"}
    assert [b.sequence for b in buckets["Navigation"]] == ["Alt+1", "Alt+2", "Alt+3"]


def test_action_errors_propagate():
    def boom():
        raise RuntimeError("navigation failed")

    d = ShortcutDispatcher()
    d.register(ShortcutBinding.from_sequence("Alt+9", "Broken", boom))
    event = KeyEvent(key="9", alt=True)
    with pytest.raises(RuntimeError):
        d.dispatch(event)
    assert event.default_prevented


def test_is_typing_target():
    assert is_typing_target(ElementNode("textarea"))
    assert is_typing_target(ElementNode("input"))
    assert is_typing_target(ElementNode("div", role="searchbox"))
    assert not is_typing_target(ElementNode("button"))
    assert not is_typing_target(None)


def test_named_keys_keep_their_casing():
    assert format_sequence("ArrowUp", alt=True) == "Alt+ArrowUp"
    assert format_sequence("k", ctrl=True, shift=True) == "Ctrl+Shift+K"
    binding = ShortcutBinding.from_sequence("Ctrl+PageDown", "Next tab", lambda: None)
    assert binding.sequence == "Ctrl+PageDown"
    assert binding.matches(KeyEvent(key="pagedown", ctrl=True))


@pytest.mark.parametrize("key", ["Enter", " "])
def test_keyboard_activation_fires_on_enter_and_space(key):
    fired = []
    handler = keyboard_activation(lambda: fired.append(key))
    event = KeyEvent(key=key, target=ElementNode("div", role="button", tabindex=0))
    assert handler(event)
    assert fired == [key]
    assert event.default_prevented


def test_keyboard_activation_ignores_other_keys():
    fired = []
    handler = keyboard_activation(lambda: fired.append("x"))
    event = KeyEvent(key="Escape")
    assert not handler(event)
    assert fired == []
    assert not event.default_prevented
