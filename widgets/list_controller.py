from typing import Dict, List, Optional
import clipboard
import logger
from color import Color
import config
from data_types import KeyEvent, ListOptions, SelectInfo
from focus import FocusTarget
from utils import display_width, next_component_id
from widgets.surface import ListSurface, Row, ViewportSurface

TRUNCATED = '...'


class ListCallbacks:
    # Host hooks, subclasses override the ones they need

    def select(self, component_id: int, index: int, content: List[str], select_info: SelectInfo):
        pass

    def update_content(self, old_content: List[str], new_content: List[str]):
        pass

    def get_focus(self):
        pass

    def render(self):
        pass


class ListController(FocusTarget):
    # Only a prefix of the content is in the surface, followed by a "more" row
    # while content is pending. None means the configured value.
    CONTENT_LIMIT = None
    LOAD_MORE = None

    def __init__(self, content: List[str], callbacks: Optional[ListCallbacks] = None,
                 options: Optional[ListOptions] = None, surface: Optional[ViewportSurface] = None,
                 component_id: Optional[int] = None):
        super().__init__()
        self.id = next_component_id() if component_id is None else component_id
        self.callbacks = callbacks if callbacks is not None else ListCallbacks()
        if surface is None:
            surface = ListSurface.from_options(options or ListOptions(80, 24))
        self.surface = surface
        self.content: List[str] = []
        self.list_index = 0
        self.displayed_items = 0
        self.more_entry_index: Optional[int] = None
        self._scroll_offsets: Dict[int, int] = {}
        self.set_content(content)

    @staticmethod
    def create_entry_for_more(more: int) -> Row:
        return Row((f'{more} more ... (select and ', Color.DIM), ('enter', Color.INVERSE), (' to load)', Color.DIM))

    def content_limit(self) -> int:
        limit = config.const.LIST_CONTENT_LIMIT if self.CONTENT_LIMIT is None else self.CONTENT_LIMIT
        return max(0, limit)

    def load_more_size(self) -> int:
        size = config.const.LIST_LOAD_MORE if self.LOAD_MORE is None else self.LOAD_MORE
        return max(1, size)

    def get_scroll_offset(self, index: int) -> int:
        return self._scroll_offsets.get(index, 0)

    def loaded_items(self) -> int:
        if self.more_entry_index is None:
            return self.displayed_items
        return self.displayed_items - 1

    def on_keypress(self, char: str, key: KeyEvent):
        name = key.name
        if (name == 'enter' and len(self.content) > 0 and
                self.more_entry_index is not None and self.list_index == self.more_entry_index):
            self.load_more_content()
            return

        if name == 'down' and self.list_index < self.displayed_items - 1:
            self.list_index += 1
            self.surface.select(self.list_index)
            self.select_update(self.list_index, self.content, SelectInfo(name))
        elif name == 'up' and self.list_index > 0:
            self.list_index -= 1
            self.surface.select(self.list_index)
            self.select_update(self.list_index, self.content, SelectInfo(name))
        elif name == 'enter':
            self.select_update(self.list_index, self.content, SelectInfo(name))
        elif name == 'left':
            self.scroll_left()
        elif name == 'right':
            self.scroll_right()
        elif name not in ('up', 'down'):
            self.on_action(name)

    def selected_content(self) -> Optional[str]:
        if self.list_index == self.more_entry_index:
            return None
        if 0 <= self.list_index < len(self.content):
            return self.content[self.list_index]
        return None

    def _render_scrolled(self, text: str, offset: int) -> Row:
        if offset > 0:
            return Row((TRUNCATED, Color.DIM), text[offset:])
        return Row(text)

    def _set_scroll_offset(self, text: str, offset: int):
        if offset > 0:
            self._scroll_offsets[self.list_index] = offset
        else:
            self._scroll_offsets.pop(self.list_index, None)
        self.surface.replace_item(self.list_index, self._render_scrolled(text, offset))
        self.surface.select(self.list_index)

    def scroll_left(self):
        text = self.selected_content()
        if not text:
            return
        offset = self.get_scroll_offset(self.list_index)
        if offset == 0:
            return
        self._set_scroll_offset(text, offset - 1)

    def scroll_right(self):
        text = self.selected_content()
        if not text or display_width(text) <= 5:
            return
        offset = self.get_scroll_offset(self.list_index)
        # Keep at least one character of the row visible
        if offset >= len(text) - 1:
            return
        self._set_scroll_offset(text, offset + 1)

    def focus(self):
        self.surface.focus()
        self.surface.set_border_focus(True)
        self.get_focus()

    def lose_focus(self):
        self.surface.set_border_focus(False)

    def select_index(self, index: int):
        while self.more_entry_index is not None and self.displayed_items <= index:
            self.load_more_content()
        if self.displayed_items == 0:
            index = 0
        else:
            index = max(0, min(index, self.displayed_items - 1))
        self.list_index = index
        self.surface.select(index)

    def set_content(self, content: List[str]):
        old_content = self.content
        self.surface.clear_items()
        self.displayed_items = 0
        self.more_entry_index = None
        self.list_index = 0
        for line in content[0:self.content_limit()]:
            self.surface.push_item(Row(line))
            self.displayed_items += 1
        self.content = content
        self._scroll_offsets.clear()
        self._insert_more_entry()
        logger.logwrite(f'list {self.id}: content set, {len(content)} lines, {self.displayed_items} displayed')
        self.update_content(old_content, self.content)

    def load_more_content(self):
        if self.more_entry_index is None:
            return
        cur_index = self.list_index
        self._replace_more_entry_with_page()
        logger.logwrite(f'list {self.id}: loaded up to {self.loaded_items()} of {len(self.content)}')
        self.select_index(cur_index)
        self.render()

    def _replace_more_entry_with_page(self):
        self.surface.pop_item()
        self.more_entry_index = None
        self.displayed_items -= 1
        limit = min(self.displayed_items + self.load_more_size(), len(self.content))
        for line in self.content[self.displayed_items:limit]:
            self.surface.push_item(Row(line))
        self.displayed_items = limit
        self._insert_more_entry()

    def _insert_more_entry(self):
        remaining = len(self.content) - self.displayed_items
        if remaining > 0:
            self.surface.push_item(self.create_entry_for_more(remaining))
            self.displayed_items += 1
            self.more_entry_index = self.displayed_items - 1

    def action_copy(self):
        text = self.selected_content()
        if text is not None:
            clipboard.copy(text)

    def render(self):
        self.callbacks.render()

    # Overridable hooks, forwarding to the callbacks by default
    def update_content(self, old_content: List[str], new_content: List[str]):
        self.callbacks.update_content(old_content, new_content)

    def get_focus(self):
        self.callbacks.get_focus()

    def select_update(self, index: int, content: List[str], select_info: SelectInfo):
        self.callbacks.select(self.id, index, content, select_info)
