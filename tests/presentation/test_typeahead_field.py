import pytest
from textual.app import App, ComposeResult
from textual.widgets import OptionList

from typeahead.domain.events import SelectRequested
from typeahead.domain.types import EngineStatus
from typeahead.presentation import OptionListResolver, TypeaheadField
from typeahead.presentation.tui import TypeaheadApp


class _FieldApp(App):
    def __init__(self, field: TypeaheadField | None = None, datalist: list[str] | None = None) -> None:
        super().__init__()
        self._field = field
        self._datalist = datalist

    def compose(self) -> ComposeResult:
        if self._datalist:
            yield OptionList(*self._datalist, id="datalist")
        yield self._field

    def on_mount(self) -> None:
        self._field.input.focus()


@pytest.mark.asyncio
async def test_typing_opens_dropdown_and_enter_commits():
    field = TypeaheadField(["apple", "banana", "grape"])
    app = _FieldApp(field)

    async with app.run_test() as pilot:
        await pilot.press("a", "p")
        await pilot.pause()
        assert field.engine.status is EngineStatus.OPEN_NO_SELECTION
        assert field.dropdown.option_count == 2
        assert field.dropdown.display

        await pilot.press("down")
        await pilot.pause()
        assert field.engine.highlighted_index == 0
        assert field.dropdown.highlighted == 0

        await pilot.press("enter")
        await pilot.pause()
        assert field.input.value == "apple"
        assert field.engine.status is EngineStatus.CLOSED
        assert not field.dropdown.display


@pytest.mark.asyncio
async def test_escape_closes_and_cancelled_select_keeps_text():
    field = TypeaheadField("apple, banana, grape")
    field.engine.subscribe(SelectRequested, lambda event: True)
    app = _FieldApp(field)

    async with app.run_test() as pilot:
        await pilot.press("a", "n")
        await pilot.pause()
        assert field.engine.is_open

        await pilot.press("down", "enter")
        await pilot.pause()
        assert field.input.value == "an"
        assert field.engine.is_open

        await pilot.press("escape")
        await pilot.pause()
        assert not field.engine.is_open


@pytest.mark.asyncio
async def test_list_attribute_resolves_option_list():
    app = _FieldApp(datalist=["Python", "Ruby", "Perl"])
    field = TypeaheadField(attributes={"list": "datalist"}, resolver=OptionListResolver(app))
    app._field = field

    async with app.run_test() as pilot:
        await pilot.press("r", "u")
        await pilot.pause()
        assert [item.text for item in field.engine.items] == ["Ruby"]


@pytest.mark.asyncio
async def test_demo_app_reports_selection():
    app = TypeaheadApp([("py", "Python"), ("rb", "Ruby")], options={"auto_first": True})

    async with app.run_test() as pilot:
        await pilot.press("p", "y")
        await pilot.pause()
        assert app.field.engine.highlighted_index == 0

        await pilot.press("enter")
        await pilot.pause()
        assert app.field.input.value == "Python"
        assert app.hidden_value.value == "py"


@pytest.mark.asyncio
async def test_hover_highlights_option():
    field = TypeaheadField(["apple", "banana", "grape"])
    app = _FieldApp(field)

    async with app.run_test() as pilot:
        await pilot.press("a", "p")
        await pilot.pause()
        assert field.engine.highlighted_index == -1

        await pilot.hover(field.dropdown, offset=(2, 2))
        await pilot.pause()
        assert field.engine.highlighted_index == 1
        assert field.engine.highlighted_item.text == "grape"
        assert field.dropdown.highlighted == 1


@pytest.mark.asyncio
async def test_click_commits_option():
    field = TypeaheadField(["apple", "banana", "grape"])
    app = _FieldApp(field)

    async with app.run_test() as pilot:
        await pilot.press("a", "p")
        await pilot.pause()

        await pilot.click(field.dropdown, offset=(2, 2))
        await pilot.pause()
        assert field.input.value == "grape"
        assert field.engine.status is EngineStatus.CLOSED
        assert not field.dropdown.display


@pytest.mark.asyncio
async def test_cancelled_select_blocks_click_commit():
    field = TypeaheadField(["apple", "banana", "grape"])
    field.engine.subscribe(SelectRequested, lambda event: event.cancel())
    app = _FieldApp(field)

    async with app.run_test() as pilot:
        await pilot.press("a", "p")
        await pilot.pause()

        await pilot.click(field.dropdown, offset=(2, 2))
        await pilot.pause()
        assert field.input.value == "ap"
        assert field.engine.is_open
        assert field.dropdown.display
