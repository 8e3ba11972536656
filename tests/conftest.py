import atexit
import os
import shutil
import tempfile

# Must be set before config is first imported. The directory is removed at
# exit, after config has saved its ini file into it.
os.environ['TERMLIST_CONFIG_DIR'] = tempfile.mkdtemp(prefix='termlist-test-')
atexit.register(shutil.rmtree, os.environ['TERMLIST_CONFIG_DIR'], True)

import pytest

from widgets.list_controller import ListCallbacks
from widgets.surface import ViewportSurface


class RecordingSurface(ViewportSurface):
    def __init__(self):
        self.items = []
        self.selected = 0
        self.calls = []
        self.focused = False
        self.border_focus = False

    def push_item(self, row):
        self.calls.append(('push', str(row)))
        self.items.append(row)

    def replace_item(self, index, row):
        self.calls.append(('replace', index, str(row)))
        self.items[index] = row

    def pop_item(self):
        self.calls.append(('pop',))
        self.items.pop()

    def clear_items(self):
        self.calls.append(('clear',))
        self.items = []

    def select(self, index):
        self.calls.append(('select', index))
        self.selected = index

    def focus(self):
        self.focused = True

    def set_border_focus(self, state):
        self.border_focus = state

    def texts(self):
        return [str(row) for row in self.items]


class RecordingCallbacks(ListCallbacks):
    def __init__(self):
        self.selects = []
        self.updates = []
        self.focus_count = 0
        self.render_count = 0

    def select(self, component_id, index, content, select_info):
        self.selects.append((component_id, index, select_info.key_name))

    def update_content(self, old_content, new_content):
        self.updates.append((old_content, new_content))

    def get_focus(self):
        self.focus_count += 1

    def render(self):
        self.render_count += 1


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def callbacks():
    return RecordingCallbacks()
